"""
TypeDescriptor: declarative base class for GraphQL object and input types.

Subclasses declare a ``name`` and a ``fields()`` map; resolvers are inferred
for every field that does not provide one::

    class UserType(TypeDescriptor):
        name = "User"
        description = "A registered user"

        def fields(self):
            return {
                "id": GraphQLNonNull(GraphQLID),
                "user_id": GraphQLInt,
                "city": {"type": GraphQLString, "alias": "profile.city"},
                "posts": PostsField,
                "manager": UserType,
            }

        def resolveUserIdField(self, root, args, context, info):
            return root.pk

        def authorize_field(self, field_name, root, args, context, info):
            return field_name != "city" or context.user.is_staff

``UserType.type()`` returns the graphql-core type, built once per registry.
"""

import logging
from collections.abc import Mapping
from typing import Any, Dict, Optional, Union

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLInputField,
    GraphQLInputObjectType,
    GraphQLObjectType,
    Undefined,
    is_type,
)

from ..exceptions import ForbiddenError, InvalidFieldConfigError
from .field import resolve_field_descriptor
from .registry import TypeRegistry, type_registry
from .resolvers import RESOLVER_CHAIN, Resolver, as_engine_resolver, select_resolver

logger = logging.getLogger(__name__)


class TypeDescriptor:
    """Template for one GraphQL object or input-object type."""

    # Must be unique across the schema.
    name: str = ""
    description: Optional[str] = None
    input_object: bool = False
    resolver_chain = RESOLVER_CHAIN
    # Never used as field resolvers.
    internal_methods = frozenset({"resolve_fields", "resolve_type"})

    def __init__(self, registry: Optional[TypeRegistry] = None):
        self.registry = registry if registry is not None else type_registry

    def fields(self) -> Mapping:
        """Return the ordered field declarations of the type."""
        raise NotImplementedError(f"{type(self).__name__} must define fields().")

    def authorize_field(self, field_name: str, root, args, context, info) -> bool:
        """
        Decide whether ``field_name`` may be resolved.

        Anything other than ``True`` denies access and the field fails with
        ForbiddenError. Allows everything by default.
        """
        return True

    @classmethod
    def type(cls, registry: Optional[TypeRegistry] = None) -> Union[GraphQLObjectType, GraphQLInputObjectType]:
        """Return the cached graphql-core type for this descriptor."""
        registry = registry if registry is not None else type_registry
        return registry.get_or_create(cls, lambda: cls(registry=registry).build())

    def to_config(self) -> Dict[str, Any]:
        if not self.name:
            raise InvalidFieldConfigError(f"{type(self).__name__} must declare a name.")
        config: Dict[str, Any] = {
            "name": self.name,
            # Resolved by graphql-core on first access to the type's fields.
            "fields": self.resolve_fields,
        }
        if self.description is not None:
            config["description"] = self.description
        return config

    def build(self) -> Union[GraphQLObjectType, GraphQLInputObjectType]:
        config = self.to_config()
        if self.input_object:
            return GraphQLInputObjectType(**config)
        return GraphQLObjectType(**config)

    def resolve_fields(self) -> Dict[str, Union[GraphQLField, GraphQLInputField]]:
        declared = self.fields()
        if not isinstance(declared, Mapping):
            raise InvalidFieldConfigError(f"{self.name}.fields() must return a mapping.")

        resolved: Dict[str, Union[GraphQLField, GraphQLInputField]] = {}
        for name, field in declared.items():
            config = self.compose_field(name, field)
            if self.input_object:
                resolved[name] = self.build_input_field(config)
            else:
                resolver = self.authorize(name, config["resolve"])
                resolved[name] = self.build_output_field(name, config, resolver)
        logger.debug("Resolved %s fields for GraphQL type '%s'", len(resolved), self.name)
        return resolved

    def compose_field(self, name: str, field: Any) -> Dict[str, Any]:
        """Turn one field declaration into a config dict with ``type`` and ``resolve``."""
        descriptor_class = self._field_descriptor(name, field)
        if descriptor_class is not None:
            config = descriptor_class(name=name).to_config()
        elif isinstance(field, Mapping):
            descriptor_class = self._field_descriptor(name, field.get("type"))
            if descriptor_class is not None:
                overrides = {key: value for key, value in field.items() if key != "type"}
                config = descriptor_class(name=name, config=overrides).to_config()
            else:
                config = dict(field)
                config["resolve"] = self.get_field_resolver(name, config)
        elif self._is_type_reference(field):
            config = {"type": field}
            config["resolve"] = self.get_field_resolver(name, config)
        else:
            raise InvalidFieldConfigError(
                f"unsupported field declaration {field!r}.", self.name, name
            )

        if config.get("type") is None:
            raise InvalidFieldConfigError("field declaration has no 'type'.", self.name, name)
        config["type"] = self.resolve_type(name, config["type"])
        if self.input_object:
            config.pop("resolve", None)
        return config

    def get_field_resolver(self, name: str, field: Mapping) -> Resolver:
        return select_resolver(self, name, field, self.resolver_chain)

    def authorize(self, name: str, resolver: Resolver) -> Resolver:
        """Guard ``resolver`` with the authorization hook."""

        def resolve(root, args, context, info):
            if self.authorize_field(name, root, args, context, info) is not True:
                raise ForbiddenError()
            return resolver(root, args, context, info)

        return resolve

    def resolve_type(self, name: str, reference: Any):
        if isinstance(reference, type) and issubclass(reference, TypeDescriptor):
            return reference.type(self.registry)
        if is_type(reference):
            return reference
        raise InvalidFieldConfigError(f"{reference!r} is not a GraphQL type.", self.name, name)

    def build_arguments(self, name: str, args: Any) -> Optional[Dict[str, GraphQLArgument]]:
        if not args:
            return None
        if not isinstance(args, Mapping):
            raise InvalidFieldConfigError("'args' must be a mapping.", self.name, name)

        arguments: Dict[str, GraphQLArgument] = {}
        for arg_name, arg in args.items():
            if isinstance(arg, GraphQLArgument):
                arguments[arg_name] = arg
            elif isinstance(arg, Mapping):
                arguments[arg_name] = GraphQLArgument(
                    self.resolve_type(name, arg.get("type")),
                    default_value=arg.get("default_value", Undefined),
                    description=arg.get("description"),
                    out_name=arg.get("alias"),
                )
            else:
                arguments[arg_name] = GraphQLArgument(self.resolve_type(name, arg))
        return arguments

    def build_output_field(self, name: str, config: Mapping, resolver: Resolver) -> GraphQLField:
        return GraphQLField(
            config["type"],
            args=self.build_arguments(name, config.get("args")),
            resolve=as_engine_resolver(resolver),
            description=config.get("description"),
            deprecation_reason=config.get("deprecation_reason"),
        )

    def build_input_field(self, config: Mapping) -> GraphQLInputField:
        return GraphQLInputField(
            config["type"],
            default_value=config.get("default_value", Undefined),
            description=config.get("description"),
            deprecation_reason=config.get("deprecation_reason"),
            out_name=config.get("alias"),
        )

    def _field_descriptor(self, name: str, value: Any):
        try:
            return resolve_field_descriptor(value)
        except InvalidFieldConfigError as exc:
            raise InvalidFieldConfigError(exc.message, self.name, name) from exc

    @staticmethod
    def _is_type_reference(value: Any) -> bool:
        if isinstance(value, type) and issubclass(value, TypeDescriptor):
            return True
        return is_type(value)
