"""
Default configuration for the Language Translator client.

All values are loaded from environment variables, so a deployment can point
the library at another service instance (or tune timeouts) without code
changes.  Arguments passed explicitly to :class:`LanguageTranslatorV3` always
take precedence over the values defined here.
"""

import os


class _DontChangeMe:
    MAIN_ENV_PREFIX = "LANGUAGE_TRANSLATOR_"


# Base url of the translation service
DEFAULT_SERVICE_URL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}URL",
    "https://gateway.watsonplatform.net/language-translator/api",
).strip()

# API version date sent as the ``version`` query parameter
DEFAULT_API_VERSION = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}VERSION", "2018-05-01"
).strip()

# Per-request timeout (seconds)
DEFAULT_TIMEOUT = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}TIMEOUT", "30").strip()
)

# Number of retries for transient HTTP failures
DEFAULT_RETRIES = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}RETRIES", "2").strip()
)

# Size of the thread pool used to dispatch requests
DEFAULT_MAX_WORKERS = int(
    os.environ.get(f"{_DontChangeMe.MAIN_ENV_PREFIX}MAX_WORKERS", "4").strip()
)

# Default logging level
DEFAULT_LOG_LEVEL = os.environ.get(
    f"{_DontChangeMe.MAIN_ENV_PREFIX}LOG_LEVEL", "INFO"
).strip()

# Credentials (used by the CLI and the smoke scripts)
ENV_USERNAME = f"{_DontChangeMe.MAIN_ENV_PREFIX}USERNAME"
ENV_PASSWORD = f"{_DontChangeMe.MAIN_ENV_PREFIX}PASSWORD"
ENV_TOKEN = f"{_DontChangeMe.MAIN_ENV_PREFIX}TOKEN"
