"""
Single asynchronous entry point for every operation.

Each invocation produces a :class:`concurrent.futures.Future`.  Validation
and binding happen synchronously in the caller's thread; only the transport
call is submitted to the executor.  When a callback is given it is attached
to that future and receives ``(error, result)``, so both calling conventions
share one code path and build identical requests.
"""

import logging
from concurrent.futures import Executor, Future
from typing import Any, Callable, Optional

from language_translator_lib.core.binder import (
    RequestBinder,
    get_missing_params,
    normalize_params,
)
from language_translator_lib.data_models.operation import OperationDescriptor
from language_translator_lib.exceptions import MissingParameterError

Callback = Callable[[Optional[BaseException], Any], None]


class Dispatcher:
    """
    Validates, binds and dispatches operations.

    Parameters
    ----------
    transport :
        Object exposing ``execute(request)``; normally an
        :class:`~language_translator_lib.utils.http.HttpRequester`.
    executor : concurrent.futures.Executor
        Runs the transport calls.
    binder : Optional[RequestBinder]
        Request builder; a fresh one sharing ``logger`` by default.
    logger : Optional[logging.Logger]
    """

    def __init__(
        self,
        transport,
        executor: Executor,
        binder: Optional[RequestBinder] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.transport = transport
        self.executor = executor
        self.logger = logger or logging.getLogger(__name__)
        self.binder = binder or RequestBinder(logger=self.logger)

    def invoke(
        self,
        operation: OperationDescriptor,
        params: Any = None,
        callback: Optional[Callback] = None,
    ) -> Optional[Future]:
        """
        Run ``operation`` with ``params``.

        If ``params`` is the only argument and is callable it is used as the
        callback.  Without a callback the future is returned; with one the
        result is delivered as ``callback(error, result)`` and ``None`` is
        returned.  A :class:`MissingParameterError` is never raised from here,
        it always travels through the future.
        """
        if callback is None and callable(params):
            callback, params = params, None

        future = self.submit(operation, params)
        if callback is None:
            return future

        future.add_done_callback(lambda f: _deliver(f, callback))
        return None

    def submit(self, operation: OperationDescriptor, params: Any = None) -> Future:
        params = normalize_params(params)

        missing = get_missing_params(operation.required_params, params)
        if missing:
            self.logger.warning(
                "%s: missing required parameters %s", operation.name, missing
            )
            future = Future()
            future.set_exception(MissingParameterError(missing))
            return future

        request = self.binder.bind(operation, params)
        return self.executor.submit(self.transport.execute, request)


def _deliver(future: Future, callback: Callback) -> None:
    error = future.exception()
    if error is not None:
        callback(error, None)
    else:
        callback(None, future.result())
