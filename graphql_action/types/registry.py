"""
TypeRegistry implementation.

graphql-core requires every reference to a named type inside one schema to be
the very same object. The registry builds each descriptor's type once and
hands out that instance for every later lookup.
"""

import logging
import threading
from typing import TYPE_CHECKING, Callable, Optional, Type

from graphql import GraphQLNamedType

from ..exceptions import DuplicateTypeError

if TYPE_CHECKING:
    from .base import TypeDescriptor

logger = logging.getLogger(__name__)


class TypeRegistry:
    """
    Mapping from descriptor class identity to its constructed GraphQL type.

    Entries are created lazily on first request and never evicted.
    Population is single-flight: concurrent first lookups of the same
    descriptor build exactly one type.
    """

    def __init__(self):
        self._types: dict[str, GraphQLNamedType] = {}
        self._names: dict[str, str] = {}
        # Reentrant: a descriptor may look up other descriptors while building.
        self._lock = threading.RLock()

    @staticmethod
    def key_for(descriptor_class: Type["TypeDescriptor"]) -> str:
        """Return the stable identifier for a descriptor class."""
        return f"{descriptor_class.__module__}.{descriptor_class.__qualname__}"

    def get(self, descriptor_class: Type["TypeDescriptor"]) -> Optional[GraphQLNamedType]:
        return self._types.get(self.key_for(descriptor_class))

    def get_or_create(
        self,
        descriptor_class: Type["TypeDescriptor"],
        factory: Callable[[], GraphQLNamedType],
    ) -> GraphQLNamedType:
        """Return the cached type for ``descriptor_class``, building it once."""
        key = self.key_for(descriptor_class)
        cached = self._types.get(key)
        if cached is not None:
            return cached

        with self._lock:
            cached = self._types.get(key)
            if cached is not None:
                return cached

            type_name = getattr(descriptor_class, "name", None)
            owner = self._names.get(type_name) if type_name else None
            if owner is not None and owner != key:
                raise DuplicateTypeError(
                    f"GraphQL type '{type_name}' is declared by both '{owner}' and '{key}'."
                )

            graphql_type = factory()
            self._types[key] = graphql_type
            self._names[graphql_type.name] = key
            logger.debug("Registered GraphQL type '%s' for %s", graphql_type.name, key)
            return graphql_type

    def clear(self) -> None:
        """Drop every cached type."""
        with self._lock:
            self._types.clear()
            self._names.clear()

    def __contains__(self, descriptor_class) -> bool:
        return self.key_for(descriptor_class) in self._types

    def __len__(self) -> int:
        return len(self._types)


# Process-wide default registry.
type_registry = TypeRegistry()
