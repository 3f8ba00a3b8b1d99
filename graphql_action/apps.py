"""
Django app configuration for graphql-action.
"""

import logging

from django.apps import AppConfig as BaseAppConfig
from django.utils.module_loading import import_string

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for graphql-action."""

    name = "graphql_action"
    verbose_name = "GraphQL Action"
    label = "graphql_action"

    def ready(self):
        """Validate the library configuration once Django has loaded."""
        try:
            self._validate_configuration()
        except Exception as e:
            logger.error("Invalid GraphQL action configuration: %s", e)
            if self._is_debug_mode():
                raise

    def _validate_configuration(self):
        from .settings import get_action_settings

        action_settings = get_action_settings()
        if action_settings.report_errors:
            import_string(action_settings.error_reporter)
        for section in ("queries", "mutations"):
            if not isinstance(getattr(action_settings, section), dict):
                raise TypeError(f"GRAPHQL_ACTION['{section}'] must be a dict.")
        logger.debug(
            "GraphQL action configured for the '%s' environment (debug=%s)",
            action_settings.environment,
            action_settings.debug_enabled,
        )

    def _is_debug_mode(self):
        from django.conf import settings as django_settings

        return getattr(django_settings, "DEBUG", False)
