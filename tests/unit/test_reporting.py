"""
Unit tests for the error reporter.
"""

import logging

import pytest
from graphql import GraphQLError

from graphql_action import reporting
from graphql_action.exceptions import ForbiddenError
from graphql_action.reporting import ErrorReporter, get_error_reporter
from graphql_action.settings import ActionSettings

pytestmark = pytest.mark.unit


def _located(original=None, message="failure"):
    return GraphQLError(message, path=["viewer", "email"], original_error=original)


@pytest.fixture
def captured(monkeypatch):
    calls = []
    monkeypatch.setattr(reporting.sentry_sdk, "capture_exception", calls.append)
    return calls


def test_resolver_exceptions_are_logged_and_captured(caplog, captured):
    original = RuntimeError("database exploded")
    with caplog.at_level(logging.ERROR, logger="graphql_action.reporting"):
        ErrorReporter(capture_with_sentry=True).report(_located(original, "database exploded"))

    assert "GraphQL resolver error at viewer.email: database exploded" in caplog.text
    assert caplog.records[0].exc_info[1] is original
    assert captured == [original]


def test_sentry_capture_can_be_disabled(captured):
    ErrorReporter(capture_with_sentry=False).report(_located(RuntimeError("boom")))
    assert captured == []


def test_client_errors_are_warnings_only(caplog, captured):
    with caplog.at_level(logging.WARNING, logger="graphql_action.reporting"):
        ErrorReporter().report(GraphQLError("Cannot query field 'x' on type 'Query'."))

    assert caplog.records[0].levelno == logging.WARNING
    assert "at <document>" in caplog.text
    assert captured == []


def test_forbidden_errors_are_not_captured(caplog, captured):
    with caplog.at_level(logging.INFO, logger="graphql_action.reporting"):
        ErrorReporter().report(_located(ForbiddenError()))

    assert caplog.records[0].levelno == logging.INFO
    assert captured == []


def test_get_error_reporter_follows_settings():
    reporter = get_error_reporter(ActionSettings(capture_with_sentry=False))
    assert isinstance(reporter, ErrorReporter)
    assert reporter.capture_with_sentry is False

    assert get_error_reporter(ActionSettings(report_errors=False)) is None


def test_get_error_reporter_imports_custom_class():
    reporter = get_error_reporter(
        ActionSettings(error_reporter="tests.unit.test_reporting.ListReporter")
    )
    assert isinstance(reporter, ListReporter)


def test_get_error_reporter_survives_broken_reporters(caplog):
    with caplog.at_level(logging.ERROR, logger="graphql_action.reporting"):
        missing = get_error_reporter(ActionSettings(error_reporter="tests.schema.DoesNotExist"))
        failing = get_error_reporter(
            ActionSettings(error_reporter="tests.unit.test_reporting.FailingReporter")
        )

    assert missing is None
    assert failing is None
    assert "tests.schema.DoesNotExist" in caplog.text
    assert "tests.unit.test_reporting.FailingReporter" in caplog.text


class ListReporter:
    def __init__(self, capture_with_sentry=True):
        self.errors = []

    def report(self, error):
        self.errors.append(error)


class FailingReporter:
    def __init__(self, capture_with_sentry=True):
        raise RuntimeError("reporter misconfigured")

    def report(self, error):
        pass
