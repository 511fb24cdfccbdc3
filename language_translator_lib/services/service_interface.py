import abc
from concurrent.futures import Future
from typing import Any, Optional, Tuple

from language_translator_lib.core.dispatch import Callback, Dispatcher
from language_translator_lib.data_models.operation import OperationDescriptor
from language_translator_lib.exceptions import UnknownOperationError
from language_translator_lib.services.operations import OPERATIONS


class BaseServiceInterface(abc.ABC):
    """
    Abstract base class for per-resource service wrappers.

    Sub-classes set the ``operations`` attribute (names from the operations
    table that belong to the resource).  The class provides a reusable
    ``call`` method that looks the descriptor up and hands it to the shared
    :class:`Dispatcher`; no sub-class needs endpoint-specific code.
    """

    # Names of the operations exposed by this resource
    operations: Tuple[str, ...] = ()

    def __init__(self, dispatcher: Dispatcher, logger):
        """
        Initialise the service wrapper.

        Parameters
        ----------
        dispatcher : Dispatcher
            Validates, binds and dispatches requests.
        logger : logging.Logger
            Logger instance used for debugging and error reporting.
        """
        self.dispatcher = dispatcher
        self.logger = logger

    def descriptor(self, name: str) -> OperationDescriptor:
        if name not in self.operations:
            raise UnknownOperationError(
                f"{type(self).__name__} has no operation {name!r}"
            )
        return OPERATIONS[name]

    def call(
        self,
        name: str,
        params: Any = None,
        callback: Optional[Callback] = None,
    ) -> Optional[Future]:
        """
        Invoke operation ``name``.

        Parameters
        ----------
        name : str
            Operation name; must be listed in ``operations``.
        params : dict | pydantic.BaseModel | callable | None
            Call parameters.  A callable passed alone is used as the callback.
        callback : Optional[Callable[[Optional[BaseException], Any], None]]
            Receives ``(error, result)`` once the call completes.

        Returns
        -------
        Future | None
            The future when no callback is supplied, otherwise ``None``.

        Raises
        ------
        UnknownOperationError
            If ``name`` does not belong to this service.
        """
        return self.dispatcher.invoke(self.descriptor(name), params, callback)
