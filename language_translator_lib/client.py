import logging
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from typing import Any, Dict, Optional

from language_translator_lib.constants import (
    DEFAULT_API_VERSION,
    DEFAULT_MAX_WORKERS,
    DEFAULT_RETRIES,
    DEFAULT_SERVICE_URL,
    DEFAULT_TIMEOUT,
)
from language_translator_lib.core.dispatch import Callback, Dispatcher
from language_translator_lib.data_models.constants import TRANSLATED_DOCUMENT_VARIANTS
from language_translator_lib.exceptions import UnknownOperationError
from language_translator_lib.services.documents import DocumentsService
from language_translator_lib.services.identification import IdentificationService
from language_translator_lib.services.models import ModelsService
from language_translator_lib.services.operations import (
    OPERATIONS,
    TRANSLATED_DOCUMENT_PREFIX,
)
from language_translator_lib.services.translation import TranslationService
from language_translator_lib.utils.http import HttpRequester


class LanguageTranslatorV3:
    """
    Client for the Language Translator v3 service.

    Every operation method takes ``params`` (a ``dict``, a pydantic request
    model or ``None``) and an optional ``callback``.  Without a callback the
    method returns a :class:`concurrent.futures.Future`; with one it returns
    ``None`` and later calls ``callback(error, result)``.  Passing only a
    callable is the same as ``method(None, callable)``.

    Parameters
    ----------
    url : Optional[str]
        Service base URL (``LANGUAGE_TRANSLATOR_URL`` by default).
    version : Optional[str]
        API version date sent with every request.
    username, password : Optional[str]
        Basic-auth credentials.
    token : Optional[str]
        Bearer token; preferred over basic credentials.
    timeout, retries : Optional[int]
        Transport settings.
    max_workers : Optional[int]
        Size of the thread pool created when no ``executor`` is given.
    disable_ssl_verification : bool, default ``False``
    default_headers : Optional[Dict[str, str]]
        Headers sent with every request.
    logger : Optional[logging.Logger]
    http :
        Transport to use instead of a new :class:`HttpRequester`.
    executor : Optional[concurrent.futures.Executor]
        Executor to use instead of an owned thread pool.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        version: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        token: Optional[str] = None,
        timeout: Optional[int] = None,
        retries: Optional[int] = None,
        max_workers: Optional[int] = None,
        disable_ssl_verification: bool = False,
        default_headers: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None,
        http=None,
        executor: Optional[Executor] = None,
    ) -> None:
        self.base_url = (url or DEFAULT_SERVICE_URL).rstrip("/")
        self.version = version or DEFAULT_API_VERSION
        self.timeout = timeout if timeout is not None else DEFAULT_TIMEOUT
        self.retries = retries if retries is not None else DEFAULT_RETRIES
        self.logger = logger or logging.getLogger(__name__)

        self.http = http or HttpRequester(
            base_url=self.base_url,
            version=self.version,
            username=username,
            password=password,
            token=token,
            timeout=self.timeout,
            retries=self.retries,
            verify=not disable_ssl_verification,
            default_headers=default_headers,
            logger=self.logger,
        )

        self._owns_executor = executor is None
        self.executor = executor or ThreadPoolExecutor(
            max_workers=max_workers or DEFAULT_MAX_WORKERS,
            thread_name_prefix="language-translator",
        )
        self.dispatcher = Dispatcher(self.http, self.executor, logger=self.logger)

        self.translation = TranslationService(self.dispatcher, self.logger)
        self.identification = IdentificationService(self.dispatcher, self.logger)
        self.models = ModelsService(self.dispatcher, self.logger)
        self.documents = DocumentsService(self.dispatcher, self.logger)

    # ------------------------------------------------------------------ #
    def invoke(
        self, name: str, params: Any = None, callback: Optional[Callback] = None
    ) -> Optional[Future]:
        """Invoke any operation of the table by name."""
        if name not in OPERATIONS:
            raise UnknownOperationError(f"Unknown operation {name!r}")
        return self.dispatcher.invoke(OPERATIONS[name], params, callback)

    # ------------------------------------------------------------------ #
    def translate(self, params: Any = None, callback: Optional[Callback] = None):
        """Translate ``text`` (required) by ``model_id`` or ``source``/``target``."""
        return self.translation.call("translate", params, callback)

    # ------------------------------------------------------------------ #
    def list_identifiable_languages(
        self, params: Any = None, callback: Optional[Callback] = None
    ):
        return self.identification.call(
            "list_identifiable_languages", params, callback
        )

    def identify(self, params: Any = None, callback: Optional[Callback] = None):
        """Identify the language of ``text`` (required)."""
        return self.identification.call("identify", params, callback)

    # ------------------------------------------------------------------ #
    def list_models(self, params: Any = None, callback: Optional[Callback] = None):
        """List models, optionally filtered by ``source``, ``target``, ``default_models``."""
        return self.models.call("list_models", params, callback)

    def create_model(self, params: Any = None, callback: Optional[Callback] = None):
        """Customize ``base_model_id`` (required) with a glossary and/or corpus."""
        return self.models.call("create_model", params, callback)

    def delete_model(self, params: Any = None, callback: Optional[Callback] = None):
        return self.models.call("delete_model", params, callback)

    def get_model(self, params: Any = None, callback: Optional[Callback] = None):
        return self.models.call("get_model", params, callback)

    # ------------------------------------------------------------------ #
    def list_documents(self, params: Any = None, callback: Optional[Callback] = None):
        return self.documents.call("list_documents", params, callback)

    def translate_document(
        self, params: Any = None, callback: Optional[Callback] = None
    ):
        """Submit ``file`` (required) for asynchronous translation."""
        return self.documents.call("translate_document", params, callback)

    def get_document_status(
        self, params: Any = None, callback: Optional[Callback] = None
    ):
        return self.documents.call("get_document_status", params, callback)

    def get_document_status_as_json(
        self, params: Any = None, callback: Optional[Callback] = None
    ):
        return self.documents.call("get_document_status_as_json", params, callback)

    def delete_document(self, params: Any = None, callback: Optional[Callback] = None):
        return self.documents.call("delete_document", params, callback)

    def get_translated_document(
        self, params: Any = None, callback: Optional[Callback] = None
    ):
        """
        Download a translated document as a stream.

        ``params["accept"]`` selects the media type; the
        ``get_translated_document_as_*`` methods pre-select one.
        """
        return self.documents.call("get_translated_document", params, callback)

    # ------------------------------------------------------------------ #
    def close(self) -> None:
        if self._owns_executor:
            self.executor.shutdown(wait=True)
        close = getattr(self.http, "close", None)
        if close is not None:
            close()

    def __enter__(self) -> "LanguageTranslatorV3":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()


def _translated_document_method(name: str, media_type: str):
    def method(self, params: Any = None, callback: Optional[Callback] = None):
        return self.documents.call(name, params, callback)

    method.__name__ = name
    method.__qualname__ = f"LanguageTranslatorV3.{name}"
    method.__doc__ = f"Download a translated document as ``{media_type}``."
    return method


for _suffix, _media_type in TRANSLATED_DOCUMENT_VARIANTS.items():
    _name = f"{TRANSLATED_DOCUMENT_PREFIX}{_suffix}"
    setattr(LanguageTranslatorV3, _name, _translated_document_method(_name, _media_type))
