"""
Descriptor models shared by the binder, the services and the transport.

An :class:`OperationDescriptor` is the static shape of one API endpoint
(verb, URL template, declared parameters and default media types).  The
binder combines it with the caller's parameters into a
:class:`RequestDescriptor`, which is the only thing the transport ever sees.
"""

from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict


class Binding(str, Enum):
    """Part of the HTTP request a declared parameter is written into."""

    PATH = "path"
    QUERY = "query"
    HEADER = "header"
    BODY = "body"
    BODY_RAW = "bodyRaw"
    FORM_DATA = "formData"


class ResponseMode(str, Enum):
    JSON = "json"
    STREAM = "stream"


class ParameterSpec(BaseModel):
    """
    Declaration of a single operation parameter.

    Attributes
    ----------
    name : str
        Key under which the caller passes the value.
    binding : Binding
        Target location in the request.
    required : bool, default ``False``
        Whether the operation refuses to dispatch without this value.
    wire_name : Optional[str]
        Name used on the wire when it differs from ``name``
        (e.g. ``default_models`` is sent as the ``default`` query key).
    file : bool, default ``False``
        Marks binary-like multipart parts which always carry a content type.
    content_type_param : Optional[str]
        Name of a companion parameter holding the content type of this part.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    binding: Binding
    required: bool = False
    wire_name: Optional[str] = None
    file: bool = False
    content_type_param: Optional[str] = None

    @property
    def key(self) -> str:
        return self.wire_name or self.name


class OperationDescriptor(BaseModel):
    """
    Static, immutable description of one endpoint.

    ``accept`` and ``content_type`` are the default media headers; ``None``
    means the header is not sent unless the caller provides it.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    method: str
    url: str
    parameters: Tuple[ParameterSpec, ...] = ()
    accept: Optional[str] = None
    content_type: Optional[str] = None
    response_mode: ResponseMode = ResponseMode.JSON

    @property
    def required_params(self) -> List[str]:
        return [p.name for p in self.parameters if p.required]

    @property
    def param_names(self) -> List[str]:
        """Names the operation accepts, companion parameters included."""
        names = []
        for p in self.parameters:
            names.append(p.name)
            if p.content_type_param:
                names.append(p.content_type_param)
        return names


class FormPart(BaseModel):
    """A multipart part that carries its own content type (files, corpora)."""

    data: Any
    content_type: Optional[str] = None
    filename: Optional[str] = None


class RequestDescriptor(BaseModel):
    """
    Fully bound request handed to the transport.

    Attributes
    ----------
    operation : str
        Name of the operation the request was built for.
    url : str
        URL template, e.g. ``/v3/models/{model_id}``.
    path : str
        Template with every placeholder substituted (values URL-encoded).
    method : str
        HTTP verb.
    headers : Dict[str, Any]
        Merged headers; caller-supplied values have already won.
    qs : Dict[str, Any]
        Query string parameters.
    path_params : Dict[str, Any]
        Raw (not encoded) values used for placeholder substitution.
    body : Any
        JSON object, raw value, or ``None``.
    form_data : Dict[str, Any]
        Multipart parts: :class:`FormPart` for files, plain values otherwise.
    response_mode : ResponseMode
        ``stream`` responses are handed back unparsed.
    """

    operation: str
    url: str
    path: str
    method: str
    headers: Dict[str, Any] = {}
    qs: Dict[str, Any] = {}
    path_params: Dict[str, Any] = {}
    body: Any = None
    form_data: Dict[str, Any] = {}
    response_mode: ResponseMode = ResponseMode.JSON
