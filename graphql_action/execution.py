"""
Query execution and result serialization.
"""

import logging
import traceback
from typing import Any, Dict, Iterable, Optional, Sequence

from graphql import ExecutionResult, GraphQLError, GraphQLSchema, graphql_sync

from .request import QueryRequest

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Internal server error"


def report_errors(errors: Iterable[GraphQLError], reporter) -> None:
    """Hand every error to ``reporter``; reporter failures are swallowed."""
    for error in errors:
        try:
            reporter.report(error)
        except Exception as exc:
            logger.debug("Failed to report GraphQL error '%s': %s", error.message, exc)


def execute_query(
    schema: GraphQLSchema,
    query_request: QueryRequest,
    *,
    root_value: Any = None,
    context_value: Any = None,
    middleware: Optional[Sequence[Any]] = None,
    reporter=None,
) -> ExecutionResult:
    """
    Validate and execute ``query_request`` against ``schema``.

    Syntax, validation and resolver errors come back in ``result.errors``;
    nothing raised by the document or the resolvers escapes.
    """
    result = graphql_sync(
        schema,
        query_request.query,
        root_value=root_value,
        context_value=context_value,
        variable_values=query_request.variables or None,
        operation_name=query_request.operation_name or None,
        middleware=middleware,
    )
    if result.errors and reporter is not None:
        report_errors(result.errors, reporter)
    return result


def is_client_safe(error: GraphQLError) -> bool:
    """Whether the error message may be shown outside debug mode."""
    original = error.original_error
    if original is None or isinstance(original, GraphQLError):
        return True
    return bool(getattr(original, "client_safe", False))


def format_error(
    error: GraphQLError,
    debug: bool = False,
    include_debug_message: bool = True,
    include_trace: bool = True,
) -> Dict[str, Any]:
    formatted: Dict[str, Any] = dict(error.formatted)
    original = error.original_error

    if debug:
        if original is not None:
            if include_debug_message:
                formatted["debugMessage"] = str(original)
            if include_trace and original.__traceback__ is not None:
                formatted["trace"] = [
                    line.rstrip() for line in traceback.format_tb(original.__traceback__)
                ]
        return formatted

    if not is_client_safe(error):
        formatted["message"] = INTERNAL_ERROR_MESSAGE
        formatted.pop("extensions", None)
    return formatted


def format_result(
    result: ExecutionResult,
    debug: bool = False,
    include_debug_message: bool = True,
    include_trace: bool = True,
) -> Dict[str, Any]:
    """Serialize ``result`` to the standard ``{data, errors, extensions}`` shape."""
    payload: Dict[str, Any] = {}
    if result.errors:
        payload["errors"] = [
            format_error(
                error,
                debug=debug,
                include_debug_message=include_debug_message,
                include_trace=include_trace,
            )
            for error in result.errors
        ]
    if result.data is not None:
        payload["data"] = result.data
    if result.extensions:
        payload["extensions"] = result.extensions
    return payload
