"""
Exception hierarchy for graphql-action.

Construction-time errors (bad field declarations, duplicate type names) are
programmer errors and abort schema building. Per-request errors are either
returned to the client before execution (MalformedRequestError) or surface
inside the GraphQL ``errors`` array (ForbiddenError).
"""

from typing import Any, Optional


class GraphQLActionError(Exception):
    """Base class for every error raised by graphql-action."""

    default_message = "GraphQL action error"
    code = "GRAPHQL_ACTION_ERROR"
    # Client safe errors keep their message when results are sanitized.
    client_safe = False

    def __init__(self, message: Optional[str] = None, **extensions: Any):
        self.message = message or self.default_message
        self.extensions = {"code": self.code, **extensions}
        super().__init__(self.message)


class MalformedRequestError(GraphQLActionError):
    """The request carries no usable GraphQL query."""

    default_message = "Request must provide a GraphQL query."
    code = "MALFORMED_REQUEST"
    client_safe = True


class VariablesParseError(GraphQLActionError):
    """Raw ``variables`` text is not a JSON object. Recovered by the parser."""

    default_message = "Variables are not a valid JSON object."
    code = "INVALID_VARIABLES"
    client_safe = True


class InvalidFieldConfigError(GraphQLActionError):
    """A declared field cannot be interpreted as a GraphQL field."""

    default_message = "Invalid field configuration."
    code = "INVALID_FIELD_CONFIG"

    def __init__(
        self,
        message: Optional[str] = None,
        type_name: Optional[str] = None,
        field_name: Optional[str] = None,
    ):
        if type_name and field_name:
            message = f"{type_name}.{field_name}: {message or self.default_message}"
        super().__init__(message)
        self.type_name = type_name
        self.field_name = field_name


class DuplicateTypeError(GraphQLActionError):
    """Two descriptor classes claim the same GraphQL type name."""

    default_message = "GraphQL type names must be unique."
    code = "DUPLICATE_TYPE"


class ForbiddenError(GraphQLActionError):
    """The authorization hook rejected access to a field."""

    default_message = "You are not allowed to perform this action."
    code = "FORBIDDEN"
    client_safe = True
