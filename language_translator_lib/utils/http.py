"""
Thin wrapper around ``requests`` that executes bound requests with logging,
retries and unified error handling.

The :class:`HttpRequester` class is the transport behind every operation.  It
centralises:

* construction of absolute URLs from the service base URL,
* authentication (HTTP basic with ``username``/``password`` or a bearer token),
* the ``version`` query parameter required by the service,
* a configurable retry policy via ``urllib3.Retry``,
* translation of a :class:`RequestDescriptor` into ``requests`` arguments
  (JSON body, raw body, or multipart form-data),
* conversion of HTTP error codes into the library exception hierarchy.

JSON operations return the decoded body; ``stream`` operations return the raw
``requests.Response`` with its body left unread.
"""

import logging
from typing import Any, Dict, Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from language_translator_lib.data_models.constants import (
    CONTENT_TYPE_HEADER,
    MULTIPART_FORM_DATA,
)
from language_translator_lib.data_models.operation import (
    FormPart,
    RequestDescriptor,
    ResponseMode,
)
from language_translator_lib.exceptions import (
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    TransportError,
    ValidationError,
)


class HttpRequester:
    """
    Helper for making HTTP calls with built-in retries and error translation.

    Parameters
    ----------
    base_url : str
        Base URL of the service.  A trailing slash is stripped automatically.
    version : Optional[str]
        API version date added as the ``version`` query parameter to every
        request (unless the request already carries one).
    username, password : Optional[str]
        Credentials for HTTP basic authentication.
    token : Optional[str]
        Bearer token; takes precedence over basic credentials.
    timeout : int, default ``30``
        Per-request timeout in seconds.
    retries : int, default ``2``
        Number of retry attempts for transient failures (status codes in
        ``status_forcelist``).  The back-off factor is ``0.5`` seconds.
    verify : bool, default ``True``
        Whether TLS certificates are verified.
    default_headers : Optional[Dict[str, str]]
        Headers attached to every request (e.g. ``User-Agent``).
    logger : Optional[logging.Logger]
        Logger instance; if omitted, a module-level logger is created.
    """

    def __init__(
        self,
        base_url: str,
        version: Optional[str] = None,
        username: Optional[str] = None,
        password: Optional[str] = None,
        token: Optional[str] = None,
        timeout: int = 30,
        retries: int = 2,
        verify: bool = True,
        default_headers: Optional[Dict[str, str]] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.version = version
        self.timeout = timeout
        self.session = requests.Session()
        self.session.verify = verify

        if token:
            self.session.headers.update({"Authorization": f"Bearer {token}"})
        elif username and password:
            self.session.auth = (username, password)

        if default_headers:
            self.session.headers.update(default_headers)

        self.logger = logger or logging.getLogger(__name__)

        # retry-policy
        retry_strategy = Retry(
            total=retries,
            backoff_factor=0.5,
            status_forcelist=[429, 500, 502, 503, 504],
            allowed_methods=["GET", "POST", "PUT", "DELETE"],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("https://", adapter)
        self.session.mount("http://", adapter)

    def _full_url(self, path: str) -> str:
        """
        Build the absolute URL for a request, ensuring exactly one ``/``
        separates the base URL and ``path``.
        """
        return f"{self.base_url}{path if path.startswith('/') else '/' + path}"

    @staticmethod
    def _handle_response(resp: requests.Response) -> requests.Response:
        """
        Translate HTTP error codes into library-specific exceptions.

        * ``401``/``403`` -> :class:`AuthenticationError`
        * ``400`` -> :class:`ValidationError`
        * ``404`` -> :class:`NotFoundError`
        * ``429`` -> :class:`RateLimitError`
        * any other 4xx/5xx -> :class:`TransportError`

        Successful responses are returned unchanged.
        """
        status = resp.status_code
        if status in (401, 403):
            raise AuthenticationError("Invalid or missing credentials", status)
        if status == 400:
            raise ValidationError(f"HTTP 400: {resp.text}", status)
        if status == 404:
            raise NotFoundError(f"HTTP 404: {resp.text}", status)
        if status == 429:
            raise RateLimitError("Rate limit exceeded", status)
        if 400 <= status < 600:
            raise TransportError(f"HTTP {status}: {resp.text}", status)
        return resp

    def prepare_kwargs(self, request: RequestDescriptor) -> Dict[str, Any]:
        """
        Convert ``request`` into keyword arguments for ``Session.request``.

        ``None`` values are dropped from the query string and headers, and
        booleans are sent as ``true``/``false``.  A bare ``multipart/form-data``
        content type is removed: ``requests`` adds its own boundary when there
        are form parts, and without parts there is no multipart body at all.
        """
        params = {
            k: str(v).lower() if isinstance(v, bool) else v
            for k, v in request.qs.items()
            if v is not None
        }
        if self.version and "version" not in params:
            params["version"] = self.version

        headers = {k: v for k, v in request.headers.items() if v is not None}
        kwargs: Dict[str, Any] = {"params": params, "headers": headers}

        if request.form_data:
            files, data = {}, {}
            for name, part in request.form_data.items():
                if isinstance(part, FormPart):
                    files[name] = (part.filename or name, part.data, part.content_type)
                else:
                    data[name] = part
            kwargs["files"] = files or None
            kwargs["data"] = data or None
        elif isinstance(request.body, (dict, list)):
            kwargs["json"] = request.body
        elif isinstance(request.body, str):
            kwargs["data"] = request.body.encode("utf-8")
        elif request.body is not None:
            kwargs["data"] = request.body

        content_type = headers.get(CONTENT_TYPE_HEADER, "")
        if content_type.startswith(MULTIPART_FORM_DATA) and (
            "boundary" not in content_type
        ):
            headers.pop(CONTENT_TYPE_HEADER)

        return kwargs

    def execute(self, request: RequestDescriptor) -> Any:
        """
        Perform ``request`` and return its result.

        Returns
        -------
        Any
            The decoded JSON body (``None`` for an empty body) in ``json`` mode,
            or the unread :class:`requests.Response` in ``stream`` mode.

        Raises
        ------
        TransportError
            For 4xx/5xx statuses (see :meth:`_handle_response`) or a body that
            is not valid JSON.
        """
        url = self._full_url(request.path)
        stream = request.response_mode == ResponseMode.STREAM
        kwargs = self.prepare_kwargs(request)

        self.logger.debug("%s %s | params=%s", request.method, url, kwargs["params"])
        resp = self.session.request(
            request.method, url, timeout=self.timeout, stream=stream, **kwargs
        )
        try:
            self._handle_response(resp)
        except TransportError:
            resp.close()
            raise

        if stream:
            return resp
        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as exc:
            raise TransportError(
                f"Invalid response format: {exc}", resp.status_code
            ) from exc

    def close(self) -> None:
        self.session.close()
