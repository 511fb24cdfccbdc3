"""
Service wrapper for document translation.

Besides the submit / status / delete operations it exposes the translated
document download in every negotiated media type.  Downloads use the
``stream`` response mode, so callers receive the unread
``requests.Response`` and consume it with ``iter_content``.
"""

from language_translator_lib.data_models.constants import TRANSLATED_DOCUMENT_VARIANTS
from language_translator_lib.services.operations import TRANSLATED_DOCUMENT_PREFIX
from language_translator_lib.services.service_interface import BaseServiceInterface


class DocumentsService(BaseServiceInterface):
    operations = (
        "list_documents",
        "translate_document",
        "get_document_status",
        "get_document_status_as_json",
        "delete_document",
        "get_translated_document",
    ) + tuple(
        f"{TRANSLATED_DOCUMENT_PREFIX}{suffix}" for suffix in TRANSLATED_DOCUMENT_VARIANTS
    )
