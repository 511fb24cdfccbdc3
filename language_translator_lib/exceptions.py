"""
Custom exception hierarchy for the Language Translator client.

All public exceptions inherit from :class:`LanguageTranslatorError`, allowing
callers to catch a single base class for any client failure while still being
able to differentiate the local (pre-dispatch) failures from the ones reported
by the remote service.
"""

from typing import Iterable, Optional


class LanguageTranslatorError(Exception):
    """Base exception for all Language-Translator-specific errors."""

    pass


class MissingParameterError(LanguageTranslatorError):
    """
    Raised (or delivered to the callback) when an operation is invoked
    without one or more of its required parameters.

    Attributes
    ----------
    missing_params : list[str]
        Names of the required parameters that were absent or ``None``.
    """

    def __init__(self, missing_params: Iterable[str]):
        self.missing_params = list(missing_params)
        super().__init__(
            f"Missing required parameters: {', '.join(self.missing_params)}"
        )


class UnknownOperationError(LanguageTranslatorError):
    """Raised when an operation name is not present in the operations table."""

    pass


class TransportError(LanguageTranslatorError):
    """
    Raised when the service answers with a 4xx/5xx status code or with a body
    that cannot be decoded.
    """

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)


class AuthenticationError(TransportError):
    """Raised when the server returns HTTP 401/403 – invalid or missing credentials."""

    pass


class ValidationError(TransportError):
    """Raised when the server returns HTTP 400 – malformed request."""

    pass


class NotFoundError(TransportError):
    """Raised when the server returns HTTP 404 – unknown model or document."""

    pass


class RateLimitError(TransportError):
    """Raised when the server returns HTTP 429 – request rate limit exceeded."""

    pass
