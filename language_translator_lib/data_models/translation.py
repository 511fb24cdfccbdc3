"""
Pydantic request models for the Language Translator operations.

Every client method accepts either a plain ``dict`` or one of these models;
models contribute their field values as-is (file objects are not serialized)
and ``None`` fields are dropped, so unset optional fields never reach the
request.  The constants that follow each model enumerate the required and
optional argument names of the corresponding operation.
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict


class BaseRequestModel(BaseModel):
    """
    Options shared by every request.

    Attributes
    ----------
    headers : Optional[Dict[str, str]]
        Extra HTTP headers; they override the operation defaults
        (including ``Accept`` and ``Content-Type``).
    """

    model_config = ConfigDict(protected_namespaces=())

    headers: Optional[Dict[str, str]] = None


# -------------------------------------------------------------------
# Translate
# -------------------------------------------------------------------
class TranslateTextModel(BaseRequestModel):
    """
    Payload for the ``translate`` operation.

    Attributes
    ----------
    text : str | List[str]
        Input text(s) in UTF-8.
    model_id : Optional[str]
        Model to use; when given, ``source`` and ``target`` are ignored.
    source : Optional[str]
        Source language code (e.g. ``"en"``).
    target : Optional[str]
        Target language code (e.g. ``"es"``).
    """

    text: Union[str, List[str]]
    model_id: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None


TRANSLATE_REQ = ["text"]
TRANSLATE_OPT = ["model_id", "source", "target"]


# -------------------------------------------------------------------
# Identify
# -------------------------------------------------------------------
class IdentifyTextModel(BaseRequestModel):
    """Payload for ``identify``; the text is sent as a raw ``text/plain`` body."""

    text: str


IDENTIFY_REQ = ["text"]
IDENTIFY_OPT = []


# -------------------------------------------------------------------
# Models
# -------------------------------------------------------------------
class ListModelsModel(BaseRequestModel):
    """
    Filters for ``list_models``.

    ``default_models`` is sent as the ``default`` query parameter.
    """

    source: Optional[str] = None
    target: Optional[str] = None
    default_models: Optional[bool] = None


LIST_MODELS_REQ = []
LIST_MODELS_OPT = ["source", "target", "default_models"]


class CreateModelModel(BaseRequestModel):
    """
    Payload for ``create_model``.

    Attributes
    ----------
    base_model_id : str
        Model to customize.
    forced_glossary : Any
        TMX glossary (bytes or file object) uploaded as a multipart part.
    parallel_corpus : Any
        TMX parallel corpus uploaded as a multipart part.
    name : Optional[str]
        Name of the custom model.
    """

    base_model_id: str
    forced_glossary: Any = None
    parallel_corpus: Any = None
    name: Optional[str] = None


CREATE_MODEL_REQ = ["base_model_id"]
CREATE_MODEL_OPT = ["forced_glossary", "parallel_corpus", "name"]


# -------------------------------------------------------------------
# Documents
# -------------------------------------------------------------------
class TranslateDocumentModel(BaseRequestModel):
    """
    Payload for ``translate_document``.

    Attributes
    ----------
    file : Any
        Document to translate (bytes or file object).
    file_content_type : Optional[str]
        Content type of ``file``; ``application/octet-stream`` when omitted.
    model_id : Optional[str]
    source : Optional[str]
    target : Optional[str]
    document_id : Optional[str]
        Id of a previously submitted document to reuse.
    """

    file: Any
    file_content_type: Optional[str] = None
    model_id: Optional[str] = None
    source: Optional[str] = None
    target: Optional[str] = None
    document_id: Optional[str] = None


TRANSLATE_DOCUMENT_REQ = ["file"]
TRANSLATE_DOCUMENT_OPT = [
    "file_content_type",
    "model_id",
    "source",
    "target",
    "document_id",
]
