"""Tests for the federation directive catalog."""

from types import SimpleNamespace

import pytest
from graphql import GraphQLField, GraphQLObjectType, GraphQLString

from strawberry_subgraph import (
    APPLIED_DIRECTIVES,
    AppliedDirective,
    AppliedDirectiveArgument,
    compose_directive,
    contact,
    external,
    get_applied_directives,
    has_applied_directive,
    inaccessible,
    key,
    link,
    override,
    provides,
    requires,
    shareable,
    tag,
)
from strawberry_subgraph.directives import (
    FEDERATION_DIRECTIVES,
    ComposeDirective,
    ContactDirective,
    ExternalDirective,
    InaccessibleDirective,
    KeyDirective,
    LinkDirective,
    OverrideDirective,
    ProvidesDirective,
    RequiresDirective,
    ShareableDirective,
    TagDirective,
)
from strawberry_subgraph.printer import print_applied_directive, print_directive


@pytest.mark.parametrize(
    ("directive", "expected"),
    [
        (
            ComposeDirective,
            "directive @composeDirective(name: String!) repeatable on SCHEMA",
        ),
        (
            ContactDirective,
            "directive @contact(name: String!, url: String, description: String) "
            "on SCHEMA",
        ),
        (ExternalDirective, "directive @external on FIELD_DEFINITION"),
        (
            InaccessibleDirective,
            "directive @inaccessible on FIELD_DEFINITION | OBJECT | INTERFACE "
            "| UNION | ENUM | ENUM_VALUE | SCALAR | INPUT_OBJECT "
            "| INPUT_FIELD_DEFINITION | ARGUMENT_DEFINITION",
        ),
        (
            KeyDirective,
            "directive @key(fields: FieldSet!, resolvable: Boolean) "
            "repeatable on OBJECT | INTERFACE",
        ),
        (
            LinkDirective,
            "directive @link(url: String!, import: [String]) repeatable on SCHEMA",
        ),
        (OverrideDirective, "directive @override(from: String!) on FIELD_DEFINITION"),
        (
            ProvidesDirective,
            "directive @provides(fields: FieldSet!) on FIELD_DEFINITION",
        ),
        (
            RequiresDirective,
            "directive @requires(fields: FieldSet!) on FIELD_DEFINITION",
        ),
        (ShareableDirective, "directive @shareable on FIELD_DEFINITION | OBJECT"),
        (
            TagDirective,
            "directive @tag(name: String!) repeatable on FIELD_DEFINITION | OBJECT "
            "| INTERFACE | UNION | ARGUMENT_DEFINITION | SCALAR | ENUM | ENUM_VALUE "
            "| INPUT_OBJECT | INPUT_FIELD_DEFINITION",
        ),
    ],
)
def test_directive_definition(directive, expected):
    assert print_directive(directive).splitlines()[-1] == expected


def test_federation_directives():
    assert [d.name for d in FEDERATION_DIRECTIVES] == [
        "composeDirective",
        "external",
        "inaccessible",
        "key",
        "link",
        "override",
        "provides",
        "requires",
        "shareable",
        "tag",
    ]


@pytest.mark.parametrize(
    ("directive", "expected"),
    [
        (compose_directive("@custom"), '@composeDirective(name: "@custom")'),
        (contact("team"), '@contact(name: "team")'),
        (
            contact("team", url="https://example.com", description="Owners"),
            '@contact(name: "team", url: "https://example.com", '
            'description: "Owners")',
        ),
        (external(), "@external"),
        (inaccessible(), "@inaccessible"),
        (key("id"), '@key(fields: "id", resolvable: true)'),
        (
            key("id sku", resolvable=False),
            '@key(fields: "id sku", resolvable: false)',
        ),
        (
            link("https://specs.apollo.dev/federation/v2.1", ["@key", "FieldSet"]),
            '@link(url: "https://specs.apollo.dev/federation/v2.1", '
            'import: ["@key", "FieldSet"])',
        ),
        (override("products"), '@override(from: "products")'),
        (provides("name"), '@provides(fields: "name")'),
        (requires("weight"), '@requires(fields: "weight")'),
        (shareable(), "@shareable"),
        (tag("public"), '@tag(name: "public")'),
    ],
)
def test_applied_directive(directive, expected):
    assert print_applied_directive(directive) == expected


def test_applied_directive_of():
    directive = AppliedDirective.of("foo", {"b": 1, "a": "x"})

    assert directive.args == (
        AppliedDirectiveArgument(name="b", value=1),
        AppliedDirectiveArgument(name="a", value="x"),
    )
    assert directive.get_argument("a") == "x"
    assert directive.get_argument("missing") is None
    assert directive.get_argument("missing", "default") == "default"


def test_applied_directives_are_values():
    assert key("id") == key("id")
    assert key("id") != key("id", resolvable=False)
    assert hash(link("url", ["@key"])) == hash(link("url", ("@key",)))


def test_get_applied_directives():
    field = GraphQLField(
        GraphQLString,
        extensions={APPLIED_DIRECTIVES: [shareable(), tag("public")]},
    )
    type_ = GraphQLObjectType("Foo", {"foo": field})

    assert get_applied_directives(field) == [shareable(), tag("public")]
    assert get_applied_directives(type_) == []
    assert get_applied_directives(SimpleNamespace(extensions=None)) == []
    assert get_applied_directives(object()) == []


def test_has_applied_directive():
    type_ = GraphQLObjectType(
        "Foo",
        {"foo": GraphQLField(GraphQLString)},
        extensions={APPLIED_DIRECTIVES: [key("foo")]},
    )

    assert has_applied_directive(type_, "key")
    assert not has_applied_directive(type_, "shareable")
