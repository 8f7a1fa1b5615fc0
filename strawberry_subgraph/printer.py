"""Deterministic SDL printer.

Prints a `graphql-core` schema together with the directives applied to its
elements, which `graphql.print_schema` leaves out. The output is the SDL
served by the `_service` field, so it must stay byte-for-byte stable:

- types are grouped by kind (enums, input objects, interfaces, objects,
  unions, scalars) and every group is sorted by name;
- fields, input fields, enum values, union members, implemented interfaces
  and applied directives are sorted by name;
- arguments keep their declaration order, both in definitions and in
  applied directives.

Nothing here relies on the iteration order of the schema's type map.
"""

from __future__ import annotations

import dataclasses
import warnings
from operator import attrgetter, itemgetter
from typing import TYPE_CHECKING, Any, Union

from graphql import (
    StringValueNode,
    is_enum_type,
    is_input_object_type,
    is_interface_type,
    is_object_type,
    is_scalar_type,
    is_union_type,
    print_ast,
)

from .directives import get_applied_directives
from .exceptions import MissingQueryTypeError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from graphql import (
        GraphQLArgument,
        GraphQLDirective,
        GraphQLEnumType,
        GraphQLInputField,
        GraphQLInputObjectType,
        GraphQLInterfaceType,
        GraphQLObjectType,
        GraphQLScalarType,
        GraphQLSchema,
        GraphQLUnionType,
    )

    from .directives import AppliedDirective
    from .utils.typing import DirectiveArgumentValue

__all__ = [
    "BUILTIN_SCALARS",
    "DEFAULT_PRINTER_OPTIONS",
    "PrinterOptions",
    "print_applied_directive",
    "print_argument_value",
    "print_directive",
    "print_schema",
]

BUILTIN_SCALARS = frozenset({"Boolean", "Float", "ID", "Int", "String"})


@dataclasses.dataclass(frozen=True)
class PrinterOptions:
    #: Print the definitions of every directive registered on the schema.
    include_directive_definitions: bool = False
    #: Always print the `schema { ... }` block. It is printed anyway when a
    #: root type does not use its default name.
    include_schema_definition: bool = False


DEFAULT_PRINTER_OPTIONS = PrinterOptions(
    include_directive_definitions=True,
    include_schema_definition=True,
)


def print_schema(
    schema: GraphQLSchema,
    options: PrinterOptions | None = None,
) -> str:
    """Print the schema as canonical SDL.

    Introspection types and the built-in scalars are never printed. The same
    schema always yields the same text.
    """
    options = options or PrinterOptions()

    enums: list[GraphQLEnumType] = []
    input_objects: list[GraphQLInputObjectType] = []
    interfaces: list[GraphQLInterfaceType] = []
    objects: list[GraphQLObjectType] = []
    unions: list[GraphQLUnionType] = []
    scalars: list[GraphQLScalarType] = []

    for name, type_ in schema.type_map.items():
        if name.startswith("__") or name in BUILTIN_SCALARS:
            continue

        if is_enum_type(type_):
            enums.append(type_)
        elif is_input_object_type(type_):
            input_objects.append(type_)
        elif is_interface_type(type_):
            interfaces.append(type_)
        elif is_object_type(type_):
            objects.append(type_)
        elif is_union_type(type_):
            unions.append(type_)
        elif is_scalar_type(type_):
            scalars.append(type_)

    sections: list[str] = []
    if options.include_schema_definition or _is_schema_definition_needed(schema):
        sections.append(print_schema_definition(schema))
    if options.include_directive_definitions:
        sections.extend(
            print_directive(directive) for directive in _by_name(schema.directives)
        )
    sections.extend(print_enum(type_) for type_ in _by_name(enums))
    sections.extend(print_input_object(type_) for type_ in _by_name(input_objects))
    sections.extend(print_interface(type_) for type_ in _by_name(interfaces))
    sections.extend(print_object(type_) for type_ in _by_name(objects))
    sections.extend(print_union(type_) for type_ in _by_name(unions))
    sections.extend(print_scalar(type_) for type_ in _by_name(scalars))

    return "\n\n".join(sections).strip()


def _by_name(items: Iterable[Any]) -> list[Any]:
    return sorted(items, key=attrgetter("name"))


def _is_schema_definition_needed(schema: GraphQLSchema) -> bool:
    root_types = (
        (schema.query_type, "Query"),
        (schema.mutation_type, "Mutation"),
        (schema.subscription_type, "Subscription"),
    )
    return any(
        root_type is not None and root_type.name != default_name
        for root_type, default_name in root_types
    )


# schema


def print_schema_definition(schema: GraphQLSchema) -> str:
    if schema.query_type is None:
        raise MissingQueryTypeError

    operation_types = [f"  query: {schema.query_type.name}"]
    if schema.mutation_type is not None:
        operation_types.append(f"  mutation: {schema.mutation_type.name}")
    if schema.subscription_type is not None:
        operation_types.append(f"  subscription: {schema.subscription_type.name}")

    return (
        print_description(schema.description)
        + "schema"
        + print_applied_directives(get_applied_directives(schema))
        + " {\n"
        + "\n".join(operation_types)
        + "\n}"
    )


# directives


def print_directive(directive: GraphQLDirective) -> str:
    """Print a directive definition.

    Example:
        "Marks an element of a GraphQL schema as no longer supported."
        directive @deprecated(reason: String) on ...

    Locations keep their declaration order.
    """
    args = ""
    if directive.args:
        args = (
            "("
            + ", ".join(
                print_input_value(name, arg) for name, arg in directive.args.items()
            )
            + ")"
        )

    repeatable = " repeatable" if directive.is_repeatable else ""
    locations = " | ".join(location.name for location in directive.locations)

    return (
        print_description(directive.description)
        + f"directive @{directive.name}{args}{repeatable} on {locations}"
    )


def print_applied_directives(
    directives: Sequence[AppliedDirective],
    deprecation_reason: str | None = None,
) -> str:
    printed: list[str] = []

    # Deprecation is rendered as a directive, ahead of the applied ones
    if deprecation_reason:
        printed.append(
            f"@deprecated(reason: {print_string_literal(deprecation_reason)})"
        )

    printed.extend(
        print_applied_directive(directive)
        for directive in sorted(directives, key=attrgetter("name"))
        if not (deprecation_reason and directive.name == "deprecated")
    )

    return "".join(f" {directive}" for directive in printed)


def print_applied_directive(directive: AppliedDirective) -> str:
    if not directive.args:
        return f"@{directive.name}"

    args = ", ".join(
        f"{arg.name}: {print_argument_value(arg.value)}" for arg in directive.args
    )
    return f"@{directive.name}({args})"


def print_argument_value(value: DirectiveArgumentValue) -> str:
    """Print an applied directive argument as a GraphQL literal."""
    if isinstance(value, str):
        return print_string_literal(value)
    # str(True) would print `True`
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(print_argument_value(v) for v in _flatten(value)) + "]"

    return str(value)


def _flatten(values: Sequence[DirectiveArgumentValue]) -> list[DirectiveArgumentValue]:
    flattened: list[DirectiveArgumentValue] = []
    for value in values:
        if isinstance(value, (list, tuple)):
            # TODO: print nested lists as nested GraphQL list literals once
            # multi-dimensional directive arguments need to round-trip
            warnings.warn(
                "Nested lists in applied directive arguments are flattened "
                "into a single list when printed",
                UserWarning,
                stacklevel=2,
            )
            flattened.extend(_flatten(value))
        else:
            flattened.append(value)

    return flattened


# types


def print_enum(type_: GraphQLEnumType) -> str:
    values = [
        print_description(value.description, "  ")
        + f"  {name}"
        + print_applied_directives(
            get_applied_directives(value),
            value.deprecation_reason,
        )
        for name, value in sorted(type_.values.items(), key=itemgetter(0))
    ]

    return (
        print_description(type_.description)
        + f"enum {type_.name}"
        + print_applied_directives(get_applied_directives(type_))
        + print_block(values)
    )


def print_input_object(type_: GraphQLInputObjectType) -> str:
    fields = [
        print_description(field.description, "  ")
        + "  "
        + print_input_value(name, field)
        for name, field in sorted(type_.fields.items(), key=itemgetter(0))
    ]

    return (
        print_description(type_.description)
        + f"input {type_.name}"
        + print_applied_directives(get_applied_directives(type_))
        + print_block(fields)
    )


def print_interface(type_: GraphQLInterfaceType) -> str:
    return (
        print_description(type_.description)
        + f"interface {type_.name}"
        + print_implemented_interfaces(type_)
        + print_applied_directives(get_applied_directives(type_))
        + print_fields(type_)
    )


def print_object(type_: GraphQLObjectType) -> str:
    return (
        print_description(type_.description)
        + f"type {type_.name}"
        + print_implemented_interfaces(type_)
        + print_applied_directives(get_applied_directives(type_))
        + print_fields(type_)
    )


def print_union(type_: GraphQLUnionType) -> str:
    members = sorted(member.name for member in type_.types)
    possible_types = f" = {' | '.join(members)}" if members else ""

    return (
        print_description(type_.description)
        + f"union {type_.name}"
        + print_applied_directives(get_applied_directives(type_))
        + possible_types
    )


def print_scalar(type_: GraphQLScalarType) -> str:
    return (
        print_description(type_.description)
        + f"scalar {type_.name}"
        + print_applied_directives(get_applied_directives(type_))
    )


def print_implemented_interfaces(
    type_: Union[GraphQLObjectType, GraphQLInterfaceType],
) -> str:
    interfaces = sorted(interface.name for interface in type_.interfaces)
    return " implements " + " & ".join(interfaces) if interfaces else ""


def print_fields(type_: Union[GraphQLObjectType, GraphQLInterfaceType]) -> str:
    fields = [
        print_description(field.description, "  ")
        + f"  {name}"
        + print_args(field.args)
        + f": {field.type}"
        + print_applied_directives(
            get_applied_directives(field),
            field.deprecation_reason,
        )
        for name, field in sorted(type_.fields.items(), key=itemgetter(0))
    ]

    return print_block(fields)


def print_block(items: Sequence[str]) -> str:
    return " {\n" + "".join(f"{item}\n" for item in items) + "}"


def print_args(args: dict[str, GraphQLArgument]) -> str:
    if not args:
        return ""

    return (
        "(" + ", ".join(print_input_value(name, arg) for name, arg in args.items()) + ")"
    )


def print_input_value(
    name: str,
    arg: Union[GraphQLArgument, GraphQLInputField],
) -> str:
    # Default values are not part of the printed definition
    return f"{name}: {arg.type}" + print_applied_directives(
        get_applied_directives(arg),
        getattr(arg, "deprecation_reason", None),
    )


# descriptions


def print_description(description: str | None, indentation: str = "") -> str:
    if not description:
        return ""

    if "\n" not in description:
        return f"{indentation}{print_string_literal(description)}\n"

    lines = description.replace('"""', '\\"""').split("\n")
    block = [
        f'{indentation}"""',
        *(f"{indentation}{line}" for line in lines),
        f'{indentation}"""',
    ]
    return "\n".join(block) + "\n"


def print_string_literal(value: str) -> str:
    return print_ast(StringValueNode(value=value))
