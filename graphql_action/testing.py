"""
Testing helpers for graphql-action.

Small helpers for building requests against GraphQLActionView in unit and
integration tests.
"""

from __future__ import annotations

import json
from typing import Any, Mapping, Optional

from django.test import Client, RequestFactory
from django.utils.http import urlencode


def _normalize_headers(headers: Optional[Mapping[str, str]]) -> dict[str, str]:
    if not headers:
        return {}
    normalized: dict[str, str] = {}
    for key, value in headers.items():
        if not key:
            continue
        name = key.replace("-", "_").upper()
        if name not in {"CONTENT_TYPE", "CONTENT_LENGTH"} and not name.startswith("HTTP_"):
            name = f"HTTP_{name}"
        normalized[name] = value
    return normalized


def build_request(
    path: str = "/graphql/",
    method: str = "POST",
    *,
    headers: Optional[Mapping[str, str]] = None,
    data: Optional[dict[str, Any]] = None,
    body: Optional[str] = None,
    content_type: str = "application/json",
    user: Any = None,
):
    """
    Build a request for a GraphQL view.

    GET requests carry ``data`` in the query string. Other methods send
    ``body`` verbatim, ``data`` form-encoded when ``content_type`` is a form
    type, or ``data`` as JSON.
    """
    rf = RequestFactory()
    method_upper = method.upper()
    request_headers = _normalize_headers(headers)

    if method_upper in {"GET", "HEAD", "OPTIONS", "TRACE"}:
        request = rf.get(path, data=data or {}, **request_headers)
    elif body is None and content_type == "application/x-www-form-urlencoded":
        request = rf.generic(
            method_upper,
            path,
            data=urlencode(data or {}),
            content_type=content_type,
            **request_headers,
        )
    elif body is None and content_type.startswith("multipart/form-data"):
        request = rf.post(path, data=data or {}, **request_headers)
    else:
        if body is None:
            body = json.dumps(data or {})
        request = rf.generic(
            method_upper,
            path,
            data=body,
            content_type=content_type,
            **request_headers,
        )

    if user is not None:
        request.user = user
    return request


def graphql_post(
    client: Client,
    path: str = "/graphql/",
    *,
    query: str,
    variables: Optional[dict[str, Any]] = None,
    operation_name: Optional[str] = None,
) -> tuple[Any, dict[str, Any]]:
    """POST a JSON GraphQL payload and return the response with its decoded body."""
    payload: dict[str, Any] = {"query": query}
    if variables is not None:
        payload["variables"] = variables
    if operation_name:
        payload["operationName"] = operation_name
    response = client.post(path, data=json.dumps(payload), content_type="application/json")
    body = json.loads(response.content.decode("utf-8"))
    return response, body
