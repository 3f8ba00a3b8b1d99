"""
Declarative GraphQL type and field descriptors.
"""

from .base import TypeDescriptor
from .field import FieldDescriptor, resolve_field_descriptor
from .registry import TypeRegistry, type_registry

__all__ = [
    "FieldDescriptor",
    "TypeDescriptor",
    "TypeRegistry",
    "resolve_field_descriptor",
    "type_registry",
]
