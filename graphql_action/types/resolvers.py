"""
Resolver selection for descriptor fields.

Resolvers take ``(root, args, context, info)``. The lookup chain is evaluated
when fields are resolved, in order, and the first lookup returning a callable
wins. When none matches, the default resolver reads the field (or its alias)
from the parent value.
"""

from typing import Any, Callable, Mapping, Optional, Sequence

from ..utils import camel_case, get_value, ucfirst

Resolver = Callable[[Any, dict, Any, Any], Any]
ResolverLookup = Callable[[Any, str, Mapping[str, Any]], Optional[Resolver]]


def capitalized_resolver_name(name: str) -> str:
    """``user_id`` -> ``resolveUser_id``."""
    return f"resolve{ucfirst(name)}"


def camel_case_resolver_name(name: str) -> str:
    """``user_id`` -> ``resolveUserIdField``."""
    return f"resolve{camel_case(name)}Field"


def _method(descriptor: Any, method_name: str) -> Optional[Resolver]:
    # Fields such as ``_type`` would otherwise pick up the descriptor's own
    # ``resolve_type``.
    if method_name in getattr(descriptor, "internal_methods", ()):
        return None
    method = getattr(descriptor, method_name, None)
    return method if callable(method) else None


def explicit_resolver(descriptor: Any, name: str, field: Mapping[str, Any]) -> Optional[Resolver]:
    return field.get("resolve")


def capitalized_method_resolver(descriptor: Any, name: str, field: Mapping[str, Any]) -> Optional[Resolver]:
    return _method(descriptor, capitalized_resolver_name(name))


def camel_case_method_resolver(descriptor: Any, name: str, field: Mapping[str, Any]) -> Optional[Resolver]:
    return _method(descriptor, camel_case_resolver_name(name))


RESOLVER_CHAIN: tuple[ResolverLookup, ...] = (
    explicit_resolver,
    capitalized_method_resolver,
    camel_case_method_resolver,
)


def attribute_resolver(name: str, field: Mapping[str, Any]) -> Resolver:
    """Read ``alias`` (or ``name``) from the parent mapping or object."""
    column = field.get("alias") or name

    def resolve(root, args, context, info):
        return get_value(root, column)

    return resolve


def select_resolver(
    descriptor: Any,
    name: str,
    field: Mapping[str, Any],
    chain: Sequence[ResolverLookup] = RESOLVER_CHAIN,
) -> Resolver:
    for lookup in chain:
        resolver = lookup(descriptor, name, field)
        if resolver is not None:
            return resolver
    return attribute_resolver(name, field)


def as_engine_resolver(resolver: Resolver) -> Callable[..., Any]:
    """Adapt a ``(root, args, context, info)`` resolver to graphql-core's call shape."""

    def resolve(root, info, **args):
        return resolver(root, args, info.context, info)

    return resolve
