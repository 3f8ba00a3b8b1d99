"""
ActionSettings implementation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from django.conf import settings as django_settings

from .defaults import (
    LIBRARY_DEFAULTS,
    SETTINGS_NAME,
    get_environment_defaults,
    merge_settings,
)


def get_environment() -> str:
    """Return the deployment environment name."""
    environment = getattr(django_settings, "ENVIRONMENT", None)
    if environment:
        return str(environment).strip().lower()
    return "development" if getattr(django_settings, "DEBUG", False) else "production"


def _get_project_settings() -> dict[str, Any]:
    configured = getattr(django_settings, SETTINGS_NAME, None) or {}
    if not isinstance(configured, dict):
        return {}
    return configured


@dataclass
class ActionSettings:
    """Settings for the GraphQL endpoint and its error handling."""

    debug: Optional[bool] = None
    include_debug_message: bool = True
    include_trace: bool = True
    report_errors: bool = True
    capture_with_sentry: bool = True
    error_reporter: str = "graphql_action.reporting.ErrorReporter"
    queries: Dict[str, Any] = field(default_factory=dict)
    mutations: Dict[str, Any] = field(default_factory=dict)
    environment: str = "production"

    @classmethod
    def from_django(cls) -> "ActionSettings":
        environment = get_environment()
        merged = merge_settings(
            LIBRARY_DEFAULTS,
            get_environment_defaults(environment),
            _get_project_settings(),
        )
        merged["environment"] = environment
        valid_fields = set(cls.__dataclass_fields__.keys())
        return cls(**{k: v for k, v in merged.items() if k in valid_fields})

    @property
    def debug_enabled(self) -> bool:
        """Whether error entries carry debug information."""
        if self.debug is not None:
            return bool(self.debug)
        return self.environment == "development"


def get_action_settings() -> ActionSettings:
    return ActionSettings.from_django()
