import io
import logging

import pytest
from pydantic import ValidationError

from language_translator_lib.core.binder import (
    RequestBinder,
    get_missing_params,
    normalize_params,
    resolve_path,
)
from language_translator_lib.data_models.operation import (
    Binding,
    FormPart,
    OperationDescriptor,
    ParameterSpec,
    ResponseMode,
)
from language_translator_lib.data_models.translation import (
    ListModelsModel,
    TranslateDocumentModel,
)


@pytest.fixture
def binder():
    return RequestBinder()


@pytest.fixture
def upload_operation():
    return OperationDescriptor(
        name="upload",
        method="POST",
        url="/v3/things/{thing_id}/files",
        parameters=(
            ParameterSpec(name="thing_id", binding=Binding.PATH, required=True),
            ParameterSpec(name="limit", binding=Binding.QUERY, wire_name="max"),
            ParameterSpec(name="trace", binding=Binding.HEADER, wire_name="X-Trace"),
            ParameterSpec(
                name="blob",
                binding=Binding.FORM_DATA,
                file=True,
                content_type_param="blob_content_type",
            ),
            ParameterSpec(name="label", binding=Binding.FORM_DATA),
        ),
        accept="application/json",
        content_type="multipart/form-data",
    )


class TestGetMissingParams:
    def test_reports_absent_and_none_in_declared_order(self):
        assert get_missing_params(["a", "b", "c"], {"b": 1, "c": None}) == ["a", "c"]

    def test_falsy_values_are_present(self):
        assert get_missing_params(["a", "b"], {"a": "", "b": 0}) == []


class TestNormalizeParams:
    def test_none_becomes_empty_dict(self):
        assert normalize_params(None) == {}

    def test_returns_a_copy(self):
        params = {"a": 1}
        normalized = normalize_params(params)
        normalized["b"] = 2
        assert params == {"a": 1}

    def test_dumps_models_without_unset_fields(self):
        assert normalize_params(ListModelsModel(source="en")) == {"source": "en"}

    def test_keeps_model_file_objects_as_is(self):
        fh = io.BytesIO(b"PK")
        normalized = normalize_params(TranslateDocumentModel(file=fh, target="fr"))
        assert normalized == {"file": fh, "target": "fr"}
        assert normalized["file"] is fh


def test_resolve_path_encodes_values():
    assert resolve_path("/v3/models/{model_id}", {"model_id": "a/b c"}) == (
        "/v3/models/a%2Fb%20c"
    )


def test_binds_every_target(binder, upload_operation):
    request = binder.bind(
        upload_operation,
        {
            "thing_id": "t1",
            "limit": 10,
            "trace": "abc",
            "blob": b"data",
            "blob_content_type": "application/x-tmx+xml",
            "label": "glossary",
            "unknown": "ignored",
        },
    )

    assert request.path == "/v3/things/t1/files"
    assert request.path_params == {"thing_id": "t1"}
    assert request.qs == {"max": 10}
    assert request.headers == {
        "Accept": "application/json",
        "Content-Type": "multipart/form-data",
        "X-Trace": "abc",
    }
    assert request.form_data == {
        "blob": FormPart(data=b"data", content_type="application/x-tmx+xml"),
        "label": "glossary",
    }
    assert request.body is None
    assert request.response_mode == ResponseMode.JSON


def test_undeclared_parameters_are_logged(binder, upload_operation, caplog):
    with caplog.at_level(logging.WARNING):
        request = binder.bind(
            upload_operation, {"thing_id": "t1", "colour": "red", "extra": 1}
        )

    assert "upload: ignoring undeclared parameters ['colour', 'extra']" in (
        caplog.text
    )
    assert request.qs == {}


def test_declared_parameters_are_not_logged(binder, upload_operation, caplog):
    with caplog.at_level(logging.WARNING):
        binder.bind(
            upload_operation,
            {
                "thing_id": "t1",
                "blob": b"data",
                "blob_content_type": "text/plain",
                "headers": {"X-Trace": "abc"},
            },
        )

    assert caplog.records == []


def test_none_values_are_omitted(binder, upload_operation):
    request = binder.bind(
        upload_operation, {"thing_id": "t1", "limit": None, "trace": None}
    )

    assert request.qs == {}
    assert "X-Trace" not in request.headers
    assert request.form_data == {}


def test_body_fields_and_raw_body(binder):
    json_op = OperationDescriptor(
        name="json",
        method="POST",
        url="/json",
        parameters=(
            ParameterSpec(name="a", binding=Binding.BODY),
            ParameterSpec(name="b", binding=Binding.BODY, wire_name="B"),
        ),
    )
    raw_op = OperationDescriptor(
        name="raw",
        method="POST",
        url="/raw",
        parameters=(ParameterSpec(name="text", binding=Binding.BODY_RAW),),
    )

    assert binder.bind(json_op, {"a": 1, "b": 2}).body == {"a": 1, "B": 2}
    assert binder.bind(json_op, {}).body is None
    assert binder.bind(raw_op, {"text": "hello"}).body == "hello"


class TestMergeHeaders:
    def test_missing_defaults_are_not_sent(self):
        operation = OperationDescriptor(name="del", method="DELETE", url="/x")
        assert RequestBinder.merge_headers(operation, {}, None) == {}

    def test_user_headers_override_case_insensitively(self):
        operation = OperationDescriptor(
            name="get", method="GET", url="/x", accept="application/json"
        )
        headers = RequestBinder.merge_headers(
            operation, {}, {"accept": "text/csv", "X-Extra": "1"}
        )
        assert headers == {"accept": "text/csv", "X-Extra": "1"}


def test_descriptors_are_immutable(upload_operation):
    with pytest.raises(ValidationError):
        upload_operation.url = "/other"
    assert upload_operation.required_params == ["thing_id"]
    assert "blob_content_type" in upload_operation.param_names
