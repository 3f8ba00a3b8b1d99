"""
FieldDescriptor: a reusable template for a single GraphQL field.

A type descriptor can reference a field descriptor in place of a plain
field declaration, either as the class itself or as a dotted import path::

    class PostsField(FieldDescriptor):
        description = "Latest posts"

        def type(self):
            return GraphQLList(PostType.type())

        def args(self):
            return {"limit": GraphQLInt}

        def resolve(self, root, args, context, info):
            limit = args.get("limit") or self.config.get("limit", 10)
            return Post.objects.all()[:limit]

    class UserType(TypeDescriptor):
        name = "User"

        def fields(self):
            return {
                "posts": PostsField,
                "recent_posts": {"type": "blog.fields.PostsField", "limit": 3},
            }

Every key of a structured entry except ``type`` ends up in ``config``.
"""

from typing import Any, Dict, Mapping, Optional, Type

from django.utils.module_loading import import_string

from ..exceptions import InvalidFieldConfigError
from ..utils import get_value


class FieldDescriptor:
    """Base class for field descriptors."""

    description: Optional[str] = None
    deprecation_reason: Optional[str] = None

    def __init__(self, name: Optional[str] = None, config: Optional[Mapping[str, Any]] = None):
        self.name = name
        self.config: Dict[str, Any] = dict(config or {})

    def type(self) -> Any:
        """Return the GraphQL type reference of the field."""
        raise NotImplementedError(f"{type(self).__name__} must define type().")

    def args(self) -> Dict[str, Any]:
        return {}

    def resolve(self, root, args, context, info):
        return get_value(root, self.config.get("alias") or self.name)

    def to_config(self) -> Dict[str, Any]:
        config: Dict[str, Any] = {
            "type": self.type(),
            "args": {**self.args(), **(self.config.get("args") or {})},
            "resolve": self.resolve,
        }
        description = self.config.get("description", self.description)
        if description is not None:
            config["description"] = description
        deprecation_reason = self.config.get("deprecation_reason", self.deprecation_reason)
        if deprecation_reason is not None:
            config["deprecation_reason"] = deprecation_reason
        if self.config.get("alias"):
            config["alias"] = self.config["alias"]
        return config


def resolve_field_descriptor(value: Any) -> Optional[Type[FieldDescriptor]]:
    """
    Return the FieldDescriptor subclass ``value`` refers to, or None.

    Strings are always treated as dotted import paths, so a string that does
    not lead to a FieldDescriptor subclass is a configuration error.
    """
    if isinstance(value, str):
        try:
            imported = import_string(value)
        except ImportError as exc:
            raise InvalidFieldConfigError(
                f"Cannot import field descriptor '{value}': {exc}"
            ) from exc
        if not (isinstance(imported, type) and issubclass(imported, FieldDescriptor)):
            raise InvalidFieldConfigError(f"'{value}' is not a FieldDescriptor subclass.")
        return imported
    if isinstance(value, type) and issubclass(value, FieldDescriptor):
        return value
    return None
