"""Reference resolution for the `_entities` field.

Used when the schema owner does not provide its own `resolve_entities` hook:
each representation is dispatched to the `resolve_reference` callable stored
in the `extensions` of the entity type named by its `__typename`.

    product_type = GraphQLObjectType(
        "Product",
        {...},
        extensions={
            APPLIED_DIRECTIVES: [key("id")],
            REFERENCE_RESOLVER: lambda info, id: {"id": id, ...},
        },
    )
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from graphql import GraphQLError, is_object_type

from .directives import get_applied_directives

if TYPE_CHECKING:
    from graphql import GraphQLObjectType, GraphQLResolveInfo

    from .utils.typing import ReferenceResolver, Representation


__all__ = [
    "REFERENCE_RESOLVER",
    "get_key_fields",
    "resolve_entity_references",
]

#: `extensions` key holding the reference resolver of an entity type
REFERENCE_RESOLVER = "resolve_reference"


def get_key_fields(type_: GraphQLObjectType) -> list[str]:
    """Extract unique top-level key field names from the type's @key directives.

    Nested selections (`organization { id }`) contribute their parent field
    only.
    """
    key_fields: list[str] = []
    for directive in get_applied_directives(type_):
        if directive.name != "key":
            continue

        depth = 0
        for token in str(directive.get_argument("fields", "")).replace(
            "{", " { "
        ).replace("}", " } ").split():
            if token == "{":
                depth += 1
            elif token == "}":
                depth -= 1
            elif depth == 0:
                key_fields.append(token)

    # Remove duplicates while preserving order
    return list(dict.fromkeys(key_fields))


def get_reference_resolver(type_: GraphQLObjectType) -> ReferenceResolver | None:
    return (type_.extensions or {}).get(REFERENCE_RESOLVER)


def resolve_entity_references(
    representations: list[Representation],
    info: GraphQLResolveInfo,
) -> list[Any]:
    """Resolve every representation through its type's reference resolver.

    Only key fields are forwarded to the resolver, representations may carry
    extra fields (e.g. the ones needed by @requires). Representations that
    cannot be resolved, including the ones whose resolver raises, yield a
    `GraphQLError` in their slot, so that entry becomes `null` and the error
    is reported without failing the others.
    """
    results: list[Any] = []
    for representation in representations:
        type_name = representation.get("__typename")
        type_ = info.schema.get_type(type_name) if type_name else None
        if not is_object_type(type_):
            results.append(
                GraphQLError(f"Unknown entity type in representation: {type_name!r}")
            )
            continue

        resolver = get_reference_resolver(type_)
        if resolver is None:
            results.append(
                GraphQLError(f"Entity type {type_name!r} has no reference resolver")
            )
            continue

        key_fields = get_key_fields(type_)
        try:
            result = resolver(
                info,
                **{k: v for k, v in representation.items() if k in key_fields},
            )
        except Exception as e:  # noqa: BLE001
            # The other representations still resolve
            results.append(GraphQLError(str(e), original_error=e))
            continue

        # Let the default type resolver find the entity type
        if isinstance(result, Mapping) and "__typename" not in result:
            result = {**result, "__typename": type_name}

        results.append(result)

    return results
