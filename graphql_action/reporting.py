"""
Out-of-band reporting of GraphQL execution errors.

The default reporter writes every error to the ``graphql_action`` logger and
forwards resolver exceptions to Sentry. Projects can swap it through the
``GRAPHQL_ACTION["error_reporter"]`` setting; any class taking
``capture_with_sentry`` and exposing ``report(error)`` works.
"""

import logging
from typing import Optional

import sentry_sdk
from django.utils.module_loading import import_string
from graphql import GraphQLError

from .exceptions import ForbiddenError
from .settings import ActionSettings, get_action_settings

logger = logging.getLogger(__name__)


def _format_path(error: GraphQLError) -> str:
    if not error.path:
        return "<document>"
    return ".".join(str(segment) for segment in error.path)


class ErrorReporter:
    """Log GraphQL errors and capture resolver exceptions in Sentry."""

    def __init__(self, capture_with_sentry: bool = True):
        self.capture_with_sentry = capture_with_sentry

    def report(self, error: GraphQLError) -> None:
        original = error.original_error
        if original is None or isinstance(original, GraphQLError):
            logger.warning("GraphQL error at %s: %s", _format_path(error), error.message)
            return
        if isinstance(original, ForbiddenError):
            logger.info("GraphQL field access denied at %s", _format_path(error))
            return

        logger.error(
            "GraphQL resolver error at %s: %s",
            _format_path(error),
            error.message,
            exc_info=(type(original), original, original.__traceback__),
        )
        if self.capture_with_sentry:
            sentry_sdk.capture_exception(original)


def get_error_reporter(action_settings: Optional[ActionSettings] = None):
    """Instantiate the configured reporter, or None when reporting is off or it cannot be built."""
    action_settings = action_settings or get_action_settings()
    if not action_settings.report_errors:
        return None
    try:
        reporter_class = import_string(action_settings.error_reporter)
        return reporter_class(capture_with_sentry=action_settings.capture_with_sentry)
    except Exception:
        logger.exception(
            "Could not build GraphQL error reporter %r; errors will not be reported",
            action_settings.error_reporter,
        )
        return None
