"""
Unit tests for the resolver lookup chain.
"""

from types import SimpleNamespace

import pytest
from graphql import GraphQLString, graphql_sync

from graphql_action import TypeDescriptor
from graphql_action.schema import build_schema
from graphql_action.types.resolvers import (
    as_engine_resolver,
    attribute_resolver,
    camel_case_resolver_name,
    capitalized_resolver_name,
    select_resolver,
)

pytestmark = pytest.mark.unit


class Conventions:
    def resolveUser_id(self, root, args, context, info):
        return "capitalized"

    def resolveUserIdField(self, root, args, context, info):
        return "camel"

    def resolveEmailField(self, root, args, context, info):
        return "camel-only"


def test_resolver_names():
    assert capitalized_resolver_name("user_id") == "resolveUser_id"
    assert capitalized_resolver_name("firstName") == "resolveFirstName"
    assert camel_case_resolver_name("user_id") == "resolveUserIdField"
    assert camel_case_resolver_name("name") == "resolveNameField"


def test_explicit_resolver_wins():
    explicit = lambda root, args, context, info: "explicit"  # noqa: E731
    resolver = select_resolver(Conventions(), "user_id", {"resolve": explicit})
    assert resolver is explicit


def test_capitalized_method_precedes_camel_case_method():
    resolver = select_resolver(Conventions(), "user_id", {})
    assert resolver(None, {}, None, None) == "capitalized"


def test_camel_case_method_is_used_when_alone():
    resolver = select_resolver(Conventions(), "email", {})
    assert resolver(None, {}, None, None) == "camel-only"


def test_default_resolver_reads_name_or_alias():
    resolver = select_resolver(Conventions(), "nickname", {})
    assert resolver({"nickname": "ada"}, {}, None, None) == "ada"
    assert resolver(SimpleNamespace(nickname="ada"), {}, None, None) == "ada"
    assert resolver({}, {}, None, None) is None

    aliased = attribute_resolver("nickname", {"alias": "handle"})
    assert aliased({"nickname": "ignored", "handle": "@ada"}, {}, None, None) == "@ada"


def test_custom_chain_is_honoured():
    def always(descriptor, name, field):
        return lambda root, args, context, info: "custom"

    resolver = select_resolver(Conventions(), "user_id", {}, chain=(always,))
    assert resolver(None, {}, None, None) == "custom"


def test_engine_resolver_receives_args_and_context():
    calls = []

    def resolver(root, args, context, info):
        calls.append((root, args, context, info))
        return "ok"

    info = SimpleNamespace(context="ctx")
    assert as_engine_resolver(resolver)("root", info, limit=3) == "ok"
    assert calls == [("root", {"limit": 3}, "ctx", info)]


def test_internal_methods_are_not_field_resolvers():
    class Reserved(Conventions):
        internal_methods = frozenset({"resolveUser_id"})

    resolver = select_resolver(Reserved(), "user_id", {})
    assert resolver(None, {}, None, None) == "camel"


def test_fields_named_like_descriptor_internals_use_default_lookup(registry):
    class ThingType(TypeDescriptor):
        name = "Thing"

        def fields(self):
            return {"_type": GraphQLString, "_fields": GraphQLString, "label": GraphQLString}

    schema = build_schema(
        {
            "thing": {
                "type": ThingType,
                "resolve": lambda root, args, context, info: {"_type": "A", "_fields": "B", "label": "C"},
            }
        },
        registry=registry,
    )
    result = graphql_sync(schema, "{ thing { _type _fields label } }")

    assert result.errors is None
    assert result.data == {"thing": {"_type": "A", "_fields": "B", "label": "C"}}
