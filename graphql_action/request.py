"""
Extraction of the GraphQL query, variables and operation name from a request.

Sources, first non-empty query wins:

1. ``query`` from the query string, else from a form-encoded body; the
   variables and operation name come from the same places.
2. The raw body: the query text itself for ``application/graphql``,
   otherwise a JSON object ``{query, variables, operationName}``.
"""

import json
import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional

from django.http import HttpRequest
from django.http.multipartparser import MultiPartParserError
from django.http.request import RawPostDataException

from .exceptions import MalformedRequestError, VariablesParseError

logger = logging.getLogger(__name__)

GRAPHQL_CONTENT_TYPE = "application/graphql"
FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")

# "operation" is the legacy parameter name.
OPERATION_KEYS = ("operationName", "operation")


@dataclass(frozen=True)
class QueryRequest:
    query: str
    variables: Dict[str, Any] = field(default_factory=dict)
    operation_name: Optional[str] = None


def _form_data(request: HttpRequest) -> Mapping:
    if getattr(request, "content_type", "") not in FORM_CONTENT_TYPES:
        return {}
    try:
        return request.POST
    except MultiPartParserError as exc:
        raise MalformedRequestError(f"Invalid multipart body: {exc}") from exc


def _first_param(sources: Iterable[Mapping], keys: Iterable[str]) -> Any:
    keys = tuple(keys)
    for source in sources:
        for key in keys:
            if key in source:
                return source.get(key)
    return None


def _read_body(request: HttpRequest) -> str:
    try:
        raw_body = request.body
    except RawPostDataException as exc:
        raise MalformedRequestError("Request body is unavailable.") from exc
    try:
        return raw_body.decode(request.encoding or "utf-8")
    except (UnicodeDecodeError, LookupError) as exc:
        raise MalformedRequestError("Request body could not be decoded.") from exc


def _read_json_body(request: HttpRequest) -> Dict[str, Any]:
    body = _read_body(request)
    if not body.strip():
        raise MalformedRequestError()
    try:
        payload = json.loads(body)
    except ValueError as exc:
        raise MalformedRequestError("Request body is not valid JSON.") from exc
    if not isinstance(payload, dict):
        raise MalformedRequestError("Request body must be a JSON object.")
    return payload


def decode_variables(raw: Any) -> Dict[str, Any]:
    """Decode a JSON encoded variables object."""
    try:
        variables = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise VariablesParseError(f"Variables are not valid JSON: {exc}") from exc
    if not isinstance(variables, dict):
        raise VariablesParseError("Variables must be a JSON object.")
    return variables


def normalize_variables(variables: Any) -> Dict[str, Any]:
    """Return variables as a dict; unparsable input counts as no variables."""
    if not variables:
        return {}
    if isinstance(variables, Mapping):
        return dict(variables)
    if isinstance(variables, (str, bytes)):
        try:
            return decode_variables(variables)
        except VariablesParseError as exc:
            logger.debug("Ignoring GraphQL variables: %s", exc)
            return {}
    return {}


def parse_request(request: HttpRequest) -> QueryRequest:
    """Build a QueryRequest or raise MalformedRequestError."""
    sources = (request.GET, _form_data(request))
    query = _first_param(sources, ("query",))
    variables = _first_param(sources, ("variables",))
    operation_name = _first_param(sources, OPERATION_KEYS)

    if not query:
        if getattr(request, "content_type", "") == GRAPHQL_CONTENT_TYPE:
            query = _read_body(request)
        else:
            payload = _read_json_body(request)
            query = payload.get("query")
            variables = payload.get("variables") or {}
            operation_name = _first_param((payload,), OPERATION_KEYS)

    if not query or not isinstance(query, str) or not query.strip():
        raise MalformedRequestError()

    if operation_name is not None and not isinstance(operation_name, str):
        operation_name = None

    return QueryRequest(
        query=query,
        variables=normalize_variables(variables),
        operation_name=operation_name or None,
    )
