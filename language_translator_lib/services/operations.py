"""
Operations table of the Language Translator v3 API.

Each entry maps an operation name to its immutable
:class:`OperationDescriptor`.  The table is the single source of truth for
verbs, URL templates, parameter bindings and default media types; the
services and the client facade only look names up here.
"""

from types import MappingProxyType
from typing import Dict

from language_translator_lib.data_models.constants import (
    ANY_MEDIA_TYPE,
    APPLICATION_JSON,
    FILE_CONTENT_TYPE_PARAM,
    MULTIPART_FORM_DATA,
    TEXT_PLAIN,
    TRANSLATED_DOCUMENT_DEFAULT_ACCEPT,
    TRANSLATED_DOCUMENT_VARIANTS,
)
from language_translator_lib.data_models.operation import (
    Binding,
    OperationDescriptor,
    ParameterSpec,
    ResponseMode,
)

TRANSLATE_URL = "/v3/translate"
IDENTIFIABLE_LANGUAGES_URL = "/v3/identifiable_languages"
IDENTIFY_URL = "/v3/identify"
MODELS_URL = "/v3/models"
MODEL_URL = "/v3/models/{model_id}"
DOCUMENTS_URL = "/v3/documents"
DOCUMENT_URL = "/v3/documents/{document_id}"
TRANSLATED_DOCUMENT_URL = "/v3/documents/{document_id}/translated_document"

TRANSLATED_DOCUMENT_PREFIX = "get_translated_document_as_"


def _param(name: str, binding: Binding, **kwargs) -> ParameterSpec:
    return ParameterSpec(name=name, binding=binding, **kwargs)


_MODEL_ID_PATH = _param("model_id", Binding.PATH, required=True)
_DOCUMENT_ID_PATH = _param("document_id", Binding.PATH, required=True)


def _translated_document(name: str, accept: str, **kwargs) -> OperationDescriptor:
    return OperationDescriptor(
        name=name,
        method="GET",
        url=TRANSLATED_DOCUMENT_URL,
        accept=accept,
        response_mode=ResponseMode.STREAM,
        **kwargs,
    )


def _build_operations() -> Dict[str, OperationDescriptor]:
    operations = [
        # --------------------------------------------------------------
        # Translation
        # --------------------------------------------------------------
        OperationDescriptor(
            name="translate",
            method="POST",
            url=TRANSLATE_URL,
            parameters=(
                _param("text", Binding.BODY, required=True),
                _param("model_id", Binding.BODY),
                _param("source", Binding.BODY),
                _param("target", Binding.BODY),
            ),
            accept=APPLICATION_JSON,
            content_type=APPLICATION_JSON,
        ),
        # --------------------------------------------------------------
        # Identification
        # --------------------------------------------------------------
        OperationDescriptor(
            name="list_identifiable_languages",
            method="GET",
            url=IDENTIFIABLE_LANGUAGES_URL,
            accept=APPLICATION_JSON,
        ),
        OperationDescriptor(
            name="identify",
            method="POST",
            url=IDENTIFY_URL,
            parameters=(_param("text", Binding.BODY_RAW, required=True),),
            accept=APPLICATION_JSON,
            content_type=TEXT_PLAIN,
        ),
        # --------------------------------------------------------------
        # Models
        # --------------------------------------------------------------
        OperationDescriptor(
            name="list_models",
            method="GET",
            url=MODELS_URL,
            parameters=(
                _param("source", Binding.QUERY),
                _param("target", Binding.QUERY),
                _param("default_models", Binding.QUERY, wire_name="default"),
            ),
            accept=APPLICATION_JSON,
        ),
        OperationDescriptor(
            name="create_model",
            method="POST",
            url=MODELS_URL,
            parameters=(
                _param("base_model_id", Binding.QUERY, required=True),
                _param("forced_glossary", Binding.FORM_DATA, file=True),
                _param("parallel_corpus", Binding.FORM_DATA, file=True),
                _param("name", Binding.QUERY),
            ),
            accept=APPLICATION_JSON,
            content_type=MULTIPART_FORM_DATA,
        ),
        OperationDescriptor(
            name="delete_model",
            method="DELETE",
            url=MODEL_URL,
            parameters=(_MODEL_ID_PATH,),
            accept=APPLICATION_JSON,
        ),
        OperationDescriptor(
            name="get_model",
            method="GET",
            url=MODEL_URL,
            parameters=(_MODEL_ID_PATH,),
            accept=APPLICATION_JSON,
        ),
        # --------------------------------------------------------------
        # Documents
        # --------------------------------------------------------------
        OperationDescriptor(
            name="list_documents",
            method="GET",
            url=DOCUMENTS_URL,
            accept=APPLICATION_JSON,
        ),
        OperationDescriptor(
            name="translate_document",
            method="POST",
            url=DOCUMENTS_URL,
            parameters=(
                _param(
                    "file",
                    Binding.FORM_DATA,
                    required=True,
                    file=True,
                    content_type_param=FILE_CONTENT_TYPE_PARAM,
                ),
                _param("model_id", Binding.FORM_DATA),
                _param("source", Binding.FORM_DATA),
                _param("target", Binding.FORM_DATA),
                _param("document_id", Binding.FORM_DATA),
            ),
            accept=APPLICATION_JSON,
            content_type=MULTIPART_FORM_DATA,
        ),
        OperationDescriptor(
            name="get_document_status",
            method="GET",
            url=DOCUMENT_URL,
            parameters=(_DOCUMENT_ID_PATH,),
            accept=ANY_MEDIA_TYPE,
        ),
        OperationDescriptor(
            name="get_document_status_as_json",
            method="GET",
            url=DOCUMENT_URL,
            parameters=(_DOCUMENT_ID_PATH,),
            accept=APPLICATION_JSON,
        ),
        OperationDescriptor(
            name="delete_document",
            method="DELETE",
            url=DOCUMENT_URL,
            parameters=(_DOCUMENT_ID_PATH,),
        ),
        _translated_document(
            "get_translated_document",
            TRANSLATED_DOCUMENT_DEFAULT_ACCEPT,
            parameters=(
                _DOCUMENT_ID_PATH,
                _param("accept", Binding.HEADER, wire_name="Accept"),
            ),
        ),
    ]

    for suffix, media_type in TRANSLATED_DOCUMENT_VARIANTS.items():
        operations.append(
            _translated_document(
                f"{TRANSLATED_DOCUMENT_PREFIX}{suffix}",
                media_type,
                parameters=(_DOCUMENT_ID_PATH,),
            )
        )

    return {op.name: op for op in operations}


OPERATIONS = MappingProxyType(_build_operations())
