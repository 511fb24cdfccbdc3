"""Behaviour shared by every operation of the table, exercised through the client."""

import pytest

from conftest import CallbackRecorder, sent_request
from language_translator_lib import MissingParameterError
from language_translator_lib.services.operations import OPERATIONS

ALL_OPERATIONS = sorted(OPERATIONS)
WITH_REQUIRED = [name for name in ALL_OPERATIONS if OPERATIONS[name].required_params]
WITHOUT_REQUIRED = [
    name for name in ALL_OPERATIONS if not OPERATIONS[name].required_params
]


def required_values(name):
    return {param: f"fake_{param}" for param in OPERATIONS[name].required_params}


def test_every_operation_has_a_client_method(client):
    for name in ALL_OPERATIONS:
        assert callable(getattr(client, name)), name


@pytest.mark.parametrize("name", ALL_OPERATIONS)
def test_request_matches_descriptor(client, transport, name):
    operation = OPERATIONS[name]
    getattr(client, name)(required_values(name)).result()

    request = sent_request(transport)
    assert request.operation == name
    assert request.method == operation.method
    assert request.url == operation.url
    assert request.response_mode == operation.response_mode
    assert request.headers.get("Accept") == operation.accept
    assert request.headers.get("Content-Type") == operation.content_type


@pytest.mark.parametrize("name", ALL_OPERATIONS)
def test_user_given_headers_win(client, transport, name):
    params = required_values(name)
    params["headers"] = {"Accept": "fake/header", "Content-Type": "fake/header"}

    getattr(client, name)(params, lambda err, res: None)

    request = sent_request(transport)
    assert request.headers["Accept"] == "fake/header"
    assert request.headers["Content-Type"] == "fake/header"


@pytest.mark.parametrize("name", ALL_OPERATIONS)
def test_returns_future_without_callback(client, transport, name):
    future = getattr(client, name)(required_values(name))

    assert future.result() == {"ok": True}
    transport.execute.assert_called_once()


@pytest.mark.parametrize("name", ALL_OPERATIONS)
def test_callback_receives_result_and_returns_none(client, transport, name):
    recorder = CallbackRecorder()

    assert getattr(client, name)(required_values(name), recorder) is None
    assert recorder.error is None
    assert recorder.result == {"ok": True}


@pytest.mark.parametrize("name", ALL_OPERATIONS)
def test_callback_and_future_build_identical_requests(client, transport, name):
    params = required_values(name)

    getattr(client, name)(params, lambda err, res: None)
    getattr(client, name)(params).result()

    first, second = [c[0][0] for c in transport.execute.call_args_list]
    assert first == second


@pytest.mark.parametrize("name", ALL_OPERATIONS)
def test_none_params_behave_like_empty_mapping(client, transport, name):
    from_none, from_empty = CallbackRecorder(), CallbackRecorder()

    getattr(client, name)(None, from_none)
    getattr(client, name)({}, from_empty)

    if OPERATIONS[name].required_params:
        assert isinstance(from_none.error, MissingParameterError)
        assert from_none.error.missing_params == from_empty.error.missing_params
        transport.execute.assert_not_called()
    else:
        first, second = [c[0][0] for c in transport.execute.call_args_list]
        assert first == second


@pytest.mark.parametrize("name", WITH_REQUIRED)
def test_missing_required_params_reported_to_callback(client, transport, name):
    recorder = CallbackRecorder()

    assert getattr(client, name)({}, recorder) is None

    assert isinstance(recorder.error, MissingParameterError)
    assert recorder.error.missing_params == OPERATIONS[name].required_params
    assert recorder.result is None
    transport.execute.assert_not_called()


@pytest.mark.parametrize("name", WITH_REQUIRED)
def test_missing_required_params_reject_future(client, transport, name):
    future = getattr(client, name)()

    with pytest.raises(MissingParameterError) as exc_info:
        future.result()
    assert exc_info.value.missing_params == OPERATIONS[name].required_params
    transport.execute.assert_not_called()


@pytest.mark.parametrize("name", WITH_REQUIRED)
def test_required_param_set_to_none_counts_as_missing(client, transport, name):
    params = {param: None for param in OPERATIONS[name].required_params}

    with pytest.raises(MissingParameterError):
        getattr(client, name)(params).result()
    transport.execute.assert_not_called()


@pytest.mark.parametrize("name", WITHOUT_REQUIRED)
def test_single_callable_argument_is_the_callback(client, transport, name):
    recorder = CallbackRecorder()

    assert getattr(client, name)(recorder) is None

    assert recorder.error is None
    request = sent_request(transport)
    assert request.qs == {}
    assert request.body is None
