"""
Expose GraphQL endpoints from Django views and declare GraphQL types from
plain field maps.

Usage:
    from graphql_action import FieldDescriptor, TypeDescriptor
    from graphql_action.views import GraphQLActionView
"""

from .exceptions import (
    DuplicateTypeError,
    ForbiddenError,
    GraphQLActionError,
    InvalidFieldConfigError,
    MalformedRequestError,
)
from .types import FieldDescriptor, TypeDescriptor, TypeRegistry, type_registry

__version__ = "0.1.0"

__all__ = [
    "DuplicateTypeError",
    "FieldDescriptor",
    "ForbiddenError",
    "GraphQLActionError",
    "InvalidFieldConfigError",
    "MalformedRequestError",
    "TypeDescriptor",
    "TypeRegistry",
    "type_registry",
]
