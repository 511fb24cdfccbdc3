from concurrent.futures import Executor, Future
from unittest.mock import MagicMock

import pytest

from language_translator_lib import LanguageTranslatorV3
from language_translator_lib.utils.http import HttpRequester


class InlineExecutor(Executor):
    """Runs submitted calls immediately in the calling thread."""

    def submit(self, fn, /, *args, **kwargs):
        future = Future()
        try:
            future.set_result(fn(*args, **kwargs))
        except Exception as exc:
            future.set_exception(exc)
        return future


@pytest.fixture
def transport():
    mock = MagicMock(spec=HttpRequester)
    mock.execute.return_value = {"ok": True}
    return mock


@pytest.fixture
def client(transport):
    return LanguageTranslatorV3(
        url="https://translator.example.com/api",
        version="2018-10-18",
        username="batman",
        password="bruce-wayne",
        http=transport,
        executor=InlineExecutor(),
    )


def sent_request(transport):
    """Return the single request descriptor handed to the transport."""
    assert transport.execute.call_count == 1
    return transport.execute.call_args[0][0]


class CallbackRecorder:
    def __init__(self):
        self.calls = []

    def __call__(self, error, result):
        self.calls.append((error, result))

    @property
    def error(self):
        assert len(self.calls) == 1
        return self.calls[0][0]

    @property
    def result(self):
        assert len(self.calls) == 1
        return self.calls[0][1]


@pytest.fixture
def recorder():
    return CallbackRecorder()
