"""Scalar and object types every federated subgraph exposes.

- `_Any` carries entity representations into the `_entities` field.
- `FieldSet` is the selection set taken by `@key`, `@requires` and `@provides`.
- `_Service` exposes the subgraph SDL through the `_service` field.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from graphql import (
    GraphQLError,
    GraphQLField,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLScalarType,
    GraphQLString,
    StringValueNode,
    print_ast,
    value_from_ast_untyped,
)

if TYPE_CHECKING:
    from graphql import ValueNode

__all__ = [
    "AnyType",
    "FieldSetType",
    "ServiceType",
]


def _serialize_any(output_value: Any) -> dict[str, Any]:
    if isinstance(output_value, Mapping):
        return dict(output_value)

    raise GraphQLError(f"_Any cannot represent a non-object value: {output_value!r}")


def _parse_any_literal(
    value_node: ValueNode,
    variables: dict[str, Any] | None = None,
) -> Any:
    return value_from_ast_untyped(value_node, variables)


AnyType = GraphQLScalarType(
    name="_Any",
    description=(
        "The `_Any` scalar is used to pass representations of entities from "
        "external services into the root _entities field for execution."
    ),
    serialize=_serialize_any,
    parse_value=lambda value: value,
    parse_literal=_parse_any_literal,
)


def _parse_field_set_literal(
    value_node: ValueNode,
    _variables: dict[str, Any] | None = None,
) -> str:
    if not isinstance(value_node, StringValueNode):
        raise GraphQLError(
            f"FieldSet cannot represent a non string value: {print_ast(value_node)}",
            value_node,
        )

    return value_node.value


# Coercion is the same as String
FieldSetType = GraphQLScalarType(
    name="FieldSet",
    description=(
        "String-serialized scalar represents a set of fields that's passed to a "
        "federated directive, such as @key, @requires, or @provides"
    ),
    serialize=GraphQLString.serialize,
    parse_value=GraphQLString.parse_value,
    parse_literal=_parse_field_set_literal,
)


ServiceType = GraphQLObjectType(
    name="_Service",
    fields={
        "sdl": GraphQLField(GraphQLNonNull(GraphQLString)),
    },
)
