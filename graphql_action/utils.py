"""
Small helpers shared by the type descriptors and the request parser.
"""

from collections.abc import Mapping
from typing import Any

_MISSING = object()


def ucfirst(value: str) -> str:
    """Upper-case the first character only; ``"user_id"`` -> ``"User_id"``."""
    return value[:1].upper() + value[1:]


def camel_case(value: str) -> str:
    """Join underscore separated parts, each with its first character upper-cased."""
    return "".join(ucfirst(part) for part in value.split("_"))


def _lookup(source: Any, key: str) -> Any:
    if source is None:
        return _MISSING
    if isinstance(source, Mapping):
        return source.get(key, _MISSING)
    return getattr(source, key, _MISSING)


def get_value(source: Any, key: str, default: Any = None) -> Any:
    """
    Read ``key`` from a mapping or an object attribute.

    A key containing dots that is not found directly is walked segment by
    segment (``"profile.city"``), across mappings and objects alike.

    Examples:
        >>> get_value({"user_id": 42}, "user_id")
        42
        >>> get_value({"profile": {"city": "Oran"}}, "profile.city")
        'Oran'
    """
    value = _lookup(source, key)
    if value is not _MISSING:
        return value
    if "." not in key:
        return default

    current = source
    for segment in key.split("."):
        current = _lookup(current, segment)
        if current is _MISSING:
            return default
    return current
