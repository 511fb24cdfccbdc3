from language_translator_lib.client import LanguageTranslatorV3
from language_translator_lib.exceptions import (
    LanguageTranslatorError,
    MissingParameterError,
    UnknownOperationError,
    TransportError,
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    ValidationError,
)

__all__ = [
    "LanguageTranslatorV3",
    "LanguageTranslatorError",
    "MissingParameterError",
    "UnknownOperationError",
    "TransportError",
    "AuthenticationError",
    "NotFoundError",
    "RateLimitError",
    "ValidationError",
]
