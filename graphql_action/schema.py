"""
Root schema construction from query and mutation field maps.
"""

import logging
from typing import Any, Mapping, Optional

from graphql import GraphQLError, GraphQLSchema

from .exceptions import GraphQLActionError
from .types.base import TypeDescriptor
from .types.registry import TypeRegistry, type_registry

logger = logging.getLogger(__name__)


class RootType(TypeDescriptor):
    """Uncached descriptor for a root operation type built from a field map."""

    def __init__(
        self,
        name: str,
        fields: Optional[Mapping[str, Any]] = None,
        registry: Optional[TypeRegistry] = None,
        description: Optional[str] = None,
    ):
        super().__init__(registry=registry)
        self.name = name
        self.description = description
        self._fields = dict(fields or {})

    def fields(self) -> Mapping[str, Any]:
        return self._fields


def build_schema(
    query_fields: Optional[Mapping[str, Any]] = None,
    mutation_fields: Optional[Mapping[str, Any]] = None,
    registry: Optional[TypeRegistry] = None,
) -> GraphQLSchema:
    """
    Build an executable schema with a ``Query`` root and, when mutation
    fields are given, a ``Mutation`` root.

    Field declarations follow TypeDescriptor rules. An empty query map gives
    a ``Query`` type without fields, which graphql-core reports when the
    schema is validated at execution time.
    """
    registry = registry if registry is not None else type_registry
    query = RootType("Query", query_fields, registry=registry).build()
    mutation = None
    if mutation_fields:
        mutation = RootType("Mutation", mutation_fields, registry=registry).build()

    try:
        schema = GraphQLSchema(query=query, mutation=mutation)
    except (TypeError, GraphQLError) as error:
        # graphql-core wraps exceptions raised while resolving field thunks.
        # Nested descriptor types resolve their thunks inside the same
        # collection pass, so the cause is always one level deep.
        cause = error.__cause__
        if isinstance(cause, GraphQLActionError):
            raise cause
        raise
    logger.debug(
        "Built GraphQL schema with %s query and %s mutation fields",
        len(query_fields or {}),
        len(mutation_fields or {}),
    )
    return schema
