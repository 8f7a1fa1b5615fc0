"""Federated schema composition.

`build_federated_schema` turns a plain `graphql-core` schema configuration
into an Apollo Federation v2 subgraph: it registers the federation
directives and scalars, links the federation specification from the schema
block, and adds the `_entities` and `_service` fields to the query type.

The federation fields are added to the caller's query type in place, so any
type referring to it keeps pointing at the query root of the built schema.
The other caller objects are left untouched.
"""

from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, Optional

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLID,
    GraphQLList,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLSchema,
    GraphQLUnionType,
    is_object_type,
    validate_schema,
)

from .directives import (
    APPLIED_DIRECTIVES,
    BUILTIN_DIRECTIVES,
    FEDERATION_DIRECTIVES,
    external,
    get_applied_directives,
    link,
)
from .exceptions import DuplicateDirectiveError, FederatedSchemaBuildError
from .printer import PrinterOptions, print_schema
from .resolve import resolve_entity_references
from .settings import strawberry_subgraph_settings
from .types import AnyType, FieldSetType, ServiceType

if TYPE_CHECKING:
    from collections.abc import Sequence

    from graphql import (
        GraphQLAbstractType,
        GraphQLDirective,
        GraphQLNamedType,
        GraphQLResolveInfo,
        GraphQLTypeResolver,
    )

    from .directives import AppliedDirective
    from .utils.typing import EntitiesResolver, EntityTypeResolver, Representation

__all__ = [
    "ENTITY_UNION_NAME",
    "FEDERATION_IMPORTS",
    "FederatedSchemaConfig",
    "build_federated_schema",
    "find_entity_types",
    "is_entity",
]

ENTITY_UNION_NAME = "_Entity"

#: Names imported from the federation specification by the schema `@link`
FEDERATION_IMPORTS: tuple[str, ...] = (
    "@composeDirective",
    "@external",
    "@inaccessible",
    "@key",
    "@override",
    "@provides",
    "@requires",
    "@shareable",
    "@tag",
    "FieldSet",
)

#: `extensions` key flagging an object type as an extension of a type owned
#: by another subgraph
EXTEND = "extend"


@dataclasses.dataclass
class FederatedSchemaConfig:
    """Base schema configuration plus the federation resolver hooks.

    Mirrors the `GraphQLSchema` constructor arguments. Schema level directives
    go in `applied_directives`.

    Hooks:
        resolve_entity_type: maps a value returned by `_entities` to its
            entity type (or type name). `graphql-core`'s default type resolver
            (`__typename`, then `is_type_of`) is used when not given.
        resolve_entities: resolves the `representations` passed to
            `_entities`. Defaults to `resolve_entity_references`, which
            dispatches to each entity type's reference resolver.
    """

    query: Optional[GraphQLObjectType] = None
    mutation: Optional[GraphQLObjectType] = None
    subscription: Optional[GraphQLObjectType] = None
    types: Sequence[GraphQLNamedType] = ()
    directives: Sequence[GraphQLDirective] = ()
    applied_directives: Sequence[AppliedDirective] = ()
    description: Optional[str] = None
    extensions: Optional[dict[str, Any]] = None
    resolve_entity_type: Optional[EntityTypeResolver] = None
    resolve_entities: Optional[EntitiesResolver] = None


def is_entity(type_: GraphQLObjectType) -> bool:
    if (type_.extensions or {}).get(EXTEND):
        return False

    return any(d.name == "key" for d in get_applied_directives(type_))


def find_entity_types(schema: GraphQLSchema) -> list[GraphQLObjectType]:
    return sorted(
        (
            type_
            for type_ in schema.type_map.values()
            if is_object_type(type_) and is_entity(type_)
        ),
        key=lambda type_: type_.name,
    )


def build_federated_schema(
    config: FederatedSchemaConfig,
    *,
    printer_options: PrinterOptions | None = None,
) -> GraphQLSchema:
    """Build a federated subgraph schema out of the given configuration.

    The SDL served by `_service` is printed once, right after composition, and
    never changes afterwards.

    `_service` and `_entities` are added to `config.query` itself. Building
    two schemas out of the same query type makes both serve the fields of
    the last build.

    Raises:
        FederatedSchemaBuildError: the configuration does not produce a valid
            schema. This is a configuration error, there is no partially
            built schema to fall back to.

    """
    settings = strawberry_subgraph_settings()
    if printer_options is None:
        printer_options = PrinterOptions(
            include_directive_definitions=settings["SDL_INCLUDE_DIRECTIVE_DEFINITIONS"],
            include_schema_definition=settings["SDL_INCLUDE_SCHEMA_DEFINITION"],
        )

    query = _with_service_field(config.query)
    types = [*config.types]
    types.extend([AnyType, FieldSetType, ServiceType])

    extensions = dict(config.extensions or {})
    extensions[APPLIED_DIRECTIVES] = [
        *config.applied_directives,
        link(settings["FEDERATION_SPEC_URL"], FEDERATION_IMPORTS),
    ]

    try:
        schema = GraphQLSchema(
            query=query,
            mutation=config.mutation,
            subscription=config.subscription,
            types=types,
            directives=_merge_directives(config.directives),
            description=config.description,
            extensions=extensions,
        )
    except TypeError as e:
        raise FederatedSchemaBuildError([str(e)]) from e

    errors = validate_schema(schema)
    if errors:
        raise FederatedSchemaBuildError([error.message for error in errors])

    entities = find_entity_types(schema)
    if not entities:
        # A union requires at least one member
        placeholder = GraphQLObjectType(
            name="_ExtendHelper",
            fields={
                "id": GraphQLField(
                    GraphQLNonNull(GraphQLID),
                    extensions={APPLIED_DIRECTIVES: [external()]},
                ),
            },
        )
        schema.type_map[placeholder.name] = placeholder
        entities = [placeholder]

    entity_union = GraphQLUnionType(
        name=ENTITY_UNION_NAME,
        types=entities,
        resolve_type=_entity_type_resolver(config.resolve_entity_type),
    )
    # The schema is already built, register the union by hand
    schema.type_map[entity_union.name] = entity_union

    resolve_entities = config.resolve_entities or resolve_entity_references

    def resolve_entities_field(
        _root: Any,
        info: GraphQLResolveInfo,
        representations: list[Representation],
    ) -> Sequence[Any]:
        return resolve_entities(representations, info)

    query_fields = schema.query_type.fields  # type: ignore[union-attr]
    query_fields["_entities"] = GraphQLField(
        GraphQLNonNull(GraphQLList(entity_union)),
        args={
            "representations": GraphQLArgument(
                GraphQLNonNull(GraphQLList(GraphQLNonNull(AnyType))),
            ),
        },
        resolve=resolve_entities_field,
    )

    sdl = print_schema(schema, printer_options)
    service = {"sdl": sdl}

    query_fields["_service"] = GraphQLField(
        ServiceType,
        resolve=lambda _root, _info: service,
    )

    return schema


def _with_service_field(query: GraphQLObjectType | None) -> GraphQLObjectType:
    if query is None:
        return GraphQLObjectType(
            name="Query",
            fields={"_service": GraphQLField(ServiceType)},
        )

    # `fields` is resolved once and cached, the schema sees this same mapping
    query.fields["_service"] = GraphQLField(ServiceType)
    return query


def _merge_directives(
    directives: Sequence[GraphQLDirective],
) -> list[GraphQLDirective]:
    provided = [*BUILTIN_DIRECTIVES, *FEDERATION_DIRECTIVES]
    provided_by_name = {directive.name: directive for directive in provided}

    merged: list[GraphQLDirective] = []
    duplicated: list[str] = []
    seen: set[str] = set()
    for directive in directives:
        known = provided_by_name.get(directive.name)
        if known is directive:
            # Already one of ours, it is added below
            continue
        if known is not None or directive.name in seen:
            duplicated.append(directive.name)
            continue

        seen.add(directive.name)
        merged.append(directive)

    if duplicated:
        raise DuplicateDirectiveError(duplicated)

    return [*merged, *provided]


def _entity_type_resolver(
    resolve_entity_type: EntityTypeResolver | None,
) -> GraphQLTypeResolver | None:
    if resolve_entity_type is None:
        return None

    def resolve_type(
        value: Any,
        info: GraphQLResolveInfo,
        _abstract_type: GraphQLAbstractType,
    ) -> str | None:
        type_ = resolve_entity_type(value, info)
        if is_object_type(type_):
            return type_.name

        return type_

    return resolve_type

