"""
Default configuration for graphql-action.

Values are layered as library defaults, then environment overrides, then the
project's ``GRAPHQL_ACTION`` Django setting. Each key maps onto a field of
``graphql_action.settings.ActionSettings``.
"""

from __future__ import annotations

from typing import Any

LIBRARY_NAME = "django-graphql-action"
SETTINGS_NAME = "GRAPHQL_ACTION"

LIBRARY_DEFAULTS: dict[str, Any] = {
    # None means "derive from the environment".
    "debug": None,
    "include_debug_message": True,
    "include_trace": True,
    "report_errors": True,
    "capture_with_sentry": True,
    "error_reporter": "graphql_action.reporting.ErrorReporter",
    "queries": {},
    "mutations": {},
}

ENVIRONMENT_DEFAULTS: dict[str, dict[str, Any]] = {
    "development": {
        "capture_with_sentry": False,
    },
    "testing": {
        "capture_with_sentry": False,
    },
    "production": {
        "include_trace": False,
    },
}


def get_environment_defaults(environment: str) -> dict[str, Any]:
    """Return environment-specific overrides."""
    return ENVIRONMENT_DEFAULTS.get(environment, {}).copy()


def merge_settings(*settings_dicts: dict[str, Any]) -> dict[str, Any]:
    """
    Merge multiple settings dictionaries with deep merging for nested dicts.
    Later dictionaries override earlier ones.
    """
    result: dict[str, Any] = {}
    for settings_dict in settings_dicts:
        if not settings_dict:
            continue
        for key, value in settings_dict.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = merge_settings(result[key], value)
            else:
                result[key] = value
    return result
