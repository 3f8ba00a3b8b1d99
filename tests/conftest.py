import pytest

from graphql_action.types import TypeRegistry


@pytest.fixture
def registry():
    """A fresh type registry, isolated from the process-wide default."""
    return TypeRegistry()
