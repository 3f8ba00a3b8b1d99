"""
Unit tests for query execution and result formatting.
"""

import pytest

from graphql_action.execution import (
    INTERNAL_ERROR_MESSAGE,
    execute_query,
    format_error,
    format_result,
    is_client_safe,
)
from graphql_action.request import QueryRequest
from graphql_action.schema import build_schema
from tests.schema import MUTATIONS, QUERIES

pytestmark = pytest.mark.unit


class RecordingReporter:
    def __init__(self):
        self.errors = []

    def report(self, error):
        self.errors.append(error)


class ExplodingReporter:
    def report(self, error):
        raise RuntimeError("reporter down")


@pytest.fixture
def schema(registry):
    return build_schema(QUERIES, MUTATIONS, registry=registry)


class TestExecuteQuery:
    def test_variables_and_operation_name(self, schema):
        request = QueryRequest(
            query="query A { name } query B($text: String) { echo(text: $text) }",
            variables={"text": "hi"},
            operation_name="B",
        )
        result = execute_query(schema, request)
        assert result.errors is None
        assert result.data == {"echo": "hi"}

    def test_every_error_is_reported(self, schema):
        reporter = RecordingReporter()
        result = execute_query(schema, QueryRequest(query="{ boom account { secret } }"), reporter=reporter)

        assert len(result.errors) == 2
        assert reporter.errors == result.errors

    def test_syntax_errors_are_returned_not_raised(self, schema):
        reporter = RecordingReporter()
        result = execute_query(schema, QueryRequest(query="{ name "), reporter=reporter)

        assert result.data is None
        assert len(result.errors) == 1
        assert "Syntax Error" in result.errors[0].message
        assert len(reporter.errors) == 1

    def test_reporter_failures_do_not_abort(self, schema):
        result = execute_query(schema, QueryRequest(query="{ name boom }"), reporter=ExplodingReporter())
        assert result.data == {"name": "Ada", "boom": None}
        assert result.errors[0].message == "database exploded"

    def test_context_and_root_value_reach_resolvers(self, schema):
        result = execute_query(schema, QueryRequest(query="{ name }"), context_value=object(), root_value={})
        assert result.data == {"name": "Ada"}


class TestFormatting:
    def test_successful_result_has_no_errors_key(self, schema):
        result = execute_query(schema, QueryRequest(query="{ name }"))
        assert format_result(result) == {"data": {"name": "Ada"}}

    def test_internal_errors_are_sanitized(self, schema):
        result = execute_query(schema, QueryRequest(query="{ boom }"))
        payload = format_result(result)

        assert payload["data"] == {"boom": None}
        error = payload["errors"][0]
        assert error["message"] == INTERNAL_ERROR_MESSAGE
        assert error["path"] == ["boom"]
        assert "debugMessage" not in error
        assert "trace" not in error

    def test_client_safe_errors_keep_their_message(self, schema):
        result = execute_query(schema, QueryRequest(query="{ account { name secret } }"))
        error = result.errors[0]

        assert is_client_safe(error) is True
        formatted = format_error(error)
        assert formatted["message"] == "You are not allowed to perform this action."
        assert formatted["path"] == ["account", "secret"]

    def test_validation_errors_are_client_safe(self, schema):
        result = execute_query(schema, QueryRequest(query="{ unknown }"))
        payload = format_result(result)

        assert "data" not in payload
        assert "unknown" in payload["errors"][0]["message"]
        assert payload["errors"][0]["locations"] == [{"line": 1, "column": 3}]

    def test_debug_adds_message_and_trace(self, schema):
        result = execute_query(schema, QueryRequest(query="{ boom }"))
        error = format_result(result, debug=True)["errors"][0]

        assert error["message"] == "database exploded"
        assert error["debugMessage"] == "database exploded"
        assert isinstance(error["trace"], list)
        assert any("resolve_boom" in line for line in error["trace"])

    def test_debug_trace_can_be_disabled(self, schema):
        result = execute_query(schema, QueryRequest(query="{ boom }"))
        error = format_result(result, debug=True, include_trace=False)["errors"][0]

        assert error["debugMessage"] == "database exploded"
        assert "trace" not in error

        error = format_result(result, debug=True, include_debug_message=False, include_trace=False)["errors"][0]
        assert "debugMessage" not in error
