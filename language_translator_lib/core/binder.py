"""
Parameter validation and request binding.

:func:`get_missing_params` is the parameter validator shared by every
operation.  :class:`RequestBinder` turns an :class:`OperationDescriptor` and
the caller's parameters into a :class:`RequestDescriptor`.  Both are pure and
synchronous; nothing here touches the network.
"""

import logging
import os
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional
from urllib.parse import quote

from pydantic import BaseModel
from requests.structures import CaseInsensitiveDict

from language_translator_lib.data_models.constants import (
    ACCEPT_HEADER,
    APPLICATION_OCTET_STREAM,
    CONTENT_TYPE_HEADER,
    HEADERS_PARAM,
)
from language_translator_lib.data_models.operation import (
    Binding,
    FormPart,
    OperationDescriptor,
    ParameterSpec,
    RequestDescriptor,
)

_PLACEHOLDER = re.compile(r"\{(\w+)\}")


def get_missing_params(required: Iterable[str], params: Mapping[str, Any]) -> List[str]:
    """
    Return the names from ``required`` that are absent (or ``None``) in ``params``.

    The order of ``required`` is preserved.
    """
    return [name for name in required if params.get(name) is None]


def normalize_params(params: Any) -> Dict[str, Any]:
    """
    Bring caller parameters to a plain ``dict``.

    ``None`` becomes an empty mapping.  Pydantic models contribute their
    attribute values as-is (file objects included) with ``None`` fields left
    out.  The caller's object is never mutated.
    """
    if params is None:
        return {}
    if isinstance(params, BaseModel):
        return {k: v for k, v in params if v is not None}
    return dict(params)


def resolve_path(url: str, path_params: Mapping[str, Any]) -> str:
    """Substitute ``{name}`` tokens of ``url`` with URL-encoded values."""
    return _PLACEHOLDER.sub(
        lambda m: quote(str(path_params[m.group(1)]), safe=""), url
    )


class RequestBinder:
    """
    Builds request descriptors from operation descriptors.

    Parameters
    ----------
    logger : Optional[logging.Logger]
        Logger used to trace bound requests; a module logger by default.
    """

    def __init__(self, logger: Optional[logging.Logger] = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def bind(
        self, operation: OperationDescriptor, params: Mapping[str, Any]
    ) -> RequestDescriptor:
        """
        Map every declared parameter of ``operation`` onto its request location.

        Values that are ``None`` are skipped for every binding target and
        keys the operation does not declare are logged and ignored.  The
        caller must have validated required parameters already (see
        :func:`get_missing_params`).

        Parameters
        ----------
        operation : OperationDescriptor
            Static shape of the endpoint.
        params : Mapping[str, Any]
            Normalized call parameters.

        Returns
        -------
        RequestDescriptor
            The request ready to be executed by the transport.
        """
        path_params: Dict[str, Any] = {}
        qs: Dict[str, Any] = {}
        bound_headers: Dict[str, str] = {}
        body_fields: Dict[str, Any] = {}
        form_data: Dict[str, Any] = {}
        raw_body = None

        undeclared = sorted(
            set(params) - set(operation.param_names) - {HEADERS_PARAM}
        )
        if undeclared:
            self.logger.warning(
                "%s: ignoring undeclared parameters %s", operation.name, undeclared
            )

        for spec in operation.parameters:
            value = params.get(spec.name)
            if value is None:
                continue

            if spec.binding == Binding.PATH:
                path_params[spec.key] = value
            elif spec.binding == Binding.QUERY:
                qs[spec.key] = value
            elif spec.binding == Binding.HEADER:
                bound_headers[spec.key] = value
            elif spec.binding == Binding.BODY:
                body_fields[spec.key] = value
            elif spec.binding == Binding.BODY_RAW:
                raw_body = value
            elif spec.binding == Binding.FORM_DATA:
                form_data[spec.key] = self._form_part(spec, value, params)

        body = raw_body if raw_body is not None else (body_fields or None)
        headers = self.merge_headers(
            operation, bound_headers, params.get(HEADERS_PARAM)
        )

        request = RequestDescriptor(
            operation=operation.name,
            url=operation.url,
            path=resolve_path(operation.url, path_params),
            method=operation.method,
            headers=headers,
            qs=qs,
            path_params=path_params,
            body=body,
            form_data=form_data,
            response_mode=operation.response_mode,
        )
        self.logger.debug(
            "Bound %s -> %s %s", operation.name, request.method, request.path
        )
        return request

    @staticmethod
    def merge_headers(
        operation: OperationDescriptor,
        bound_headers: Mapping[str, str],
        user_headers: Optional[Mapping[str, str]],
    ) -> Dict[str, str]:
        """
        Merge headers in increasing priority: operation defaults, header-bound
        parameters, caller-supplied ``headers``.  Keys are compared
        case-insensitively and defaults that are ``None`` are left out.
        """
        headers = CaseInsensitiveDict()
        if operation.accept is not None:
            headers[ACCEPT_HEADER] = operation.accept
        if operation.content_type is not None:
            headers[CONTENT_TYPE_HEADER] = operation.content_type
        headers.update(bound_headers)
        if user_headers:
            headers.update(user_headers)
        return dict(headers)

    @staticmethod
    def _form_part(spec: ParameterSpec, value: Any, params: Mapping[str, Any]) -> Any:
        if not spec.file:
            return value

        content_type = None
        if spec.content_type_param:
            content_type = params.get(spec.content_type_param)

        name = getattr(value, "name", None)
        return FormPart(
            data=value,
            content_type=content_type or APPLICATION_OCTET_STREAM,
            filename=os.path.basename(name) if isinstance(name, str) else None,
        )
