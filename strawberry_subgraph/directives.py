"""Apollo Federation v2 directive catalog.

Each federation directive is exposed twice:

- as a `GraphQLDirective` definition (e.g. `KeyDirective`), registered on the
  schema so its SDL can be printed;
- as a constructor of `AppliedDirective` values (e.g. `key("id")`), attached
  to schema elements through their `extensions`.

Placement is not validated here, callers are responsible for only applying a
directive where its definition allows it.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any

from graphql import (
    DirectiveLocation,
    GraphQLArgument,
    GraphQLBoolean,
    GraphQLDeprecatedDirective,
    GraphQLDirective,
    GraphQLIncludeDirective,
    GraphQLList,
    GraphQLNonNull,
    GraphQLSkipDirective,
    GraphQLString,
)

from .types import FieldSetType

if TYPE_CHECKING:
    from collections.abc import Mapping, Sequence

    from strawberry_subgraph.utils.typing import DirectiveArgumentValue

__all__ = [
    "APPLIED_DIRECTIVES",
    "BUILTIN_DIRECTIVES",
    "FEDERATION_DIRECTIVES",
    "AppliedDirective",
    "AppliedDirectiveArgument",
    "ComposeDirective",
    "ContactDirective",
    "ExternalDirective",
    "InaccessibleDirective",
    "KeyDirective",
    "LinkDirective",
    "OverrideDirective",
    "ProvidesDirective",
    "RequiresDirective",
    "ShareableDirective",
    "TagDirective",
    "compose_directive",
    "contact",
    "external",
    "get_applied_directives",
    "has_applied_directive",
    "inaccessible",
    "key",
    "link",
    "override",
    "provides",
    "requires",
    "shareable",
    "tag",
]

#: `extensions` key holding the directives applied to a schema element
APPLIED_DIRECTIVES = "applied_directives"


@dataclasses.dataclass(frozen=True)
class AppliedDirectiveArgument:
    name: str
    value: DirectiveArgumentValue


@dataclasses.dataclass(frozen=True)
class AppliedDirective:
    """A directive invocation, e.g. `@key(fields: "id", resolvable: true)`.

    Arguments keep their declaration order, which is also the order they
    are printed in.
    """

    name: str
    args: tuple[AppliedDirectiveArgument, ...] = ()

    @classmethod
    def of(
        cls,
        name: str,
        args: Mapping[str, DirectiveArgumentValue] | None = None,
    ) -> AppliedDirective:
        return cls(
            name=name,
            args=tuple(
                AppliedDirectiveArgument(name=arg_name, value=value)
                for arg_name, value in (args or {}).items()
            ),
        )

    def get_argument(
        self,
        name: str,
        default: DirectiveArgumentValue = None,
    ) -> DirectiveArgumentValue:
        for arg in self.args:
            if arg.name == name:
                return arg.value

        return default


def get_applied_directives(element: Any) -> list[AppliedDirective]:
    """Return the directives applied to a schema element.

    Works for anything carrying `graphql-core` `extensions`: the schema itself,
    named types, fields, arguments, input fields and enum values.
    """
    extensions = getattr(element, "extensions", None) or {}
    return list(extensions.get(APPLIED_DIRECTIVES, ()))


def has_applied_directive(element: Any, name: str) -> bool:
    return any(d.name == name for d in get_applied_directives(element))


#
# directive definitions
#

# directive @composeDirective(name: String!) repeatable on SCHEMA
ComposeDirective = GraphQLDirective(
    name="composeDirective",
    locations=[DirectiveLocation.SCHEMA],
    args={
        "name": GraphQLArgument(GraphQLNonNull(GraphQLString)),
    },
    is_repeatable=True,
)

# directive @contact(name: String!, url: String, description: String) on SCHEMA
ContactDirective = GraphQLDirective(
    name="contact",
    description=(
        "Provides contact information of the owner responsible for this "
        "subgraph schema."
    ),
    locations=[DirectiveLocation.SCHEMA],
    args={
        "name": GraphQLArgument(
            GraphQLNonNull(GraphQLString),
            description="Contact title of the subgraph owner",
        ),
        "url": GraphQLArgument(
            GraphQLString,
            description="URL where the subgraph's owner can be reached",
        ),
        "description": GraphQLArgument(
            GraphQLString,
            description=(
                "Other relevant notes can be included here; supports markdown links"
            ),
        ),
    },
)

# directive @external on FIELD_DEFINITION
ExternalDirective = GraphQLDirective(
    name="external",
    description=(
        "Marks target field as external meaning it will be resolved by "
        "federated schema"
    ),
    locations=[DirectiveLocation.FIELD_DEFINITION],
)

# directive @inaccessible on FIELD_DEFINITION | OBJECT | INTERFACE | UNION
#   | ENUM | ENUM_VALUE | SCALAR | INPUT_OBJECT | INPUT_FIELD_DEFINITION
#   | ARGUMENT_DEFINITION
InaccessibleDirective = GraphQLDirective(
    name="inaccessible",
    description="Marks location within schema as inaccessible from the GraphQL Gateway",
    locations=[
        DirectiveLocation.FIELD_DEFINITION,
        DirectiveLocation.OBJECT,
        DirectiveLocation.INTERFACE,
        DirectiveLocation.UNION,
        DirectiveLocation.ENUM,
        DirectiveLocation.ENUM_VALUE,
        DirectiveLocation.SCALAR,
        DirectiveLocation.INPUT_OBJECT,
        DirectiveLocation.INPUT_FIELD_DEFINITION,
        DirectiveLocation.ARGUMENT_DEFINITION,
    ],
)

# directive @key(fields: FieldSet!, resolvable: Boolean)
#   repeatable on OBJECT | INTERFACE
KeyDirective = GraphQLDirective(
    name="key",
    description="Space separated list of primary keys needed to access federated object",
    locations=[
        DirectiveLocation.OBJECT,
        DirectiveLocation.INTERFACE,
    ],
    args={
        "fields": GraphQLArgument(GraphQLNonNull(FieldSetType)),
        "resolvable": GraphQLArgument(GraphQLBoolean, default_value=True),
    },
    is_repeatable=True,
)

# directive @link(url: String!, import: [String]) repeatable on SCHEMA
LinkDirective = GraphQLDirective(
    name="link",
    locations=[DirectiveLocation.SCHEMA],
    args={
        "url": GraphQLArgument(GraphQLNonNull(GraphQLString)),
        "import": GraphQLArgument(GraphQLList(GraphQLString)),
    },
    is_repeatable=True,
)

# directive @override(from: String!) on FIELD_DEFINITION
OverrideDirective = GraphQLDirective(
    name="override",
    description=(
        "Overrides fields resolution logic from other subgraph. "
        "Used for migrating fields from one subgraph to another."
    ),
    locations=[DirectiveLocation.FIELD_DEFINITION],
    args={
        "from": GraphQLArgument(GraphQLNonNull(GraphQLString)),
    },
)

# directive @provides(fields: FieldSet!) on FIELD_DEFINITION
ProvidesDirective = GraphQLDirective(
    name="provides",
    description="Specifies locally selectable fields on a given entity",
    locations=[DirectiveLocation.FIELD_DEFINITION],
    args={
        "fields": GraphQLArgument(GraphQLNonNull(FieldSetType)),
    },
)

# directive @requires(fields: FieldSet!) on FIELD_DEFINITION
RequiresDirective = GraphQLDirective(
    name="requires",
    description=(
        "Specifies external federated fields required for computing this field value"
    ),
    locations=[DirectiveLocation.FIELD_DEFINITION],
    args={
        "fields": GraphQLArgument(GraphQLNonNull(FieldSetType)),
    },
)

# directive @shareable on FIELD_DEFINITION | OBJECT
ShareableDirective = GraphQLDirective(
    name="shareable",
    description=(
        "Indicates that given object and/or field can be resolved by multiple subgraphs"
    ),
    locations=[
        DirectiveLocation.FIELD_DEFINITION,
        DirectiveLocation.OBJECT,
    ],
)

# directive @tag(name: String!) repeatable on FIELD_DEFINITION | OBJECT
#   | INTERFACE | UNION | ARGUMENT_DEFINITION | SCALAR | ENUM | ENUM_VALUE
#   | INPUT_OBJECT | INPUT_FIELD_DEFINITION
TagDirective = GraphQLDirective(
    name="tag",
    description=(
        "Allows users to annotate fields and types with additional metadata "
        "information"
    ),
    locations=[
        DirectiveLocation.FIELD_DEFINITION,
        DirectiveLocation.OBJECT,
        DirectiveLocation.INTERFACE,
        DirectiveLocation.UNION,
        DirectiveLocation.ARGUMENT_DEFINITION,
        DirectiveLocation.SCALAR,
        DirectiveLocation.ENUM,
        DirectiveLocation.ENUM_VALUE,
        DirectiveLocation.INPUT_OBJECT,
        DirectiveLocation.INPUT_FIELD_DEFINITION,
    ],
    args={
        "name": GraphQLArgument(GraphQLNonNull(GraphQLString)),
    },
    is_repeatable=True,
)

#: Execution directives kept alongside the federation ones, since passing
#: `directives` to `GraphQLSchema` replaces the specified set
BUILTIN_DIRECTIVES: tuple[GraphQLDirective, ...] = (
    GraphQLDeprecatedDirective,
    GraphQLIncludeDirective,
    GraphQLSkipDirective,
)

#: Directives registered on every federated schema
FEDERATION_DIRECTIVES: tuple[GraphQLDirective, ...] = (
    ComposeDirective,
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


#
# applied directives
#


def compose_directive(name: str) -> AppliedDirective:
    """`@composeDirective(name: "@myDirective")`."""
    return AppliedDirective.of("composeDirective", {"name": name})


def contact(
    name: str,
    url: str | None = None,
    description: str | None = None,
) -> AppliedDirective:
    """`@contact(name: "my team", url: "slack url", description: "more info")`.

    Arguments left as `None` are omitted.
    """
    args: dict[str, DirectiveArgumentValue] = {"name": name}
    if url is not None:
        args["url"] = url
    if description is not None:
        args["description"] = description

    return AppliedDirective.of("contact", args)


def external() -> AppliedDirective:
    return AppliedDirective("external")


def inaccessible() -> AppliedDirective:
    return AppliedDirective("inaccessible")


def key(fields: str, resolvable: bool = True) -> AppliedDirective:
    """`@key(fields: "id", resolvable: true)`.

    Both arguments are always emitted, even when `resolvable` has its
    default value.
    """
    return AppliedDirective.of("key", {"fields": fields, "resolvable": resolvable})


def link(url: str, imports: Sequence[str]) -> AppliedDirective:
    """`@link(url: "https://specs.apollo.dev/federation/v2.1", import: ["@key"])`."""
    return AppliedDirective.of("link", {"url": url, "import": tuple(imports)})


def override(from_: str) -> AppliedDirective:
    """`@override(from: "subgraphA")`."""
    return AppliedDirective.of("override", {"from": from_})


def provides(fields: str) -> AppliedDirective:
    return AppliedDirective.of("provides", {"fields": fields})


def requires(fields: str) -> AppliedDirective:
    return AppliedDirective.of("requires", {"fields": fields})


def shareable() -> AppliedDirective:
    return AppliedDirective("shareable")


def tag(name: str) -> AppliedDirective:
    return AppliedDirective.of("tag", {"name": name})
