from .directives import (
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
from .exceptions import (
    DuplicateDirectiveError,
    FederatedSchemaBuildError,
    MissingQueryTypeError,
)
from .printer import DEFAULT_PRINTER_OPTIONS, PrinterOptions, print_schema
from .resolve import REFERENCE_RESOLVER, resolve_entity_references
from .schema import (
    EXTEND,
    FederatedSchemaConfig,
    build_federated_schema,
    find_entity_types,
    is_entity,
)
from .types import AnyType, FieldSetType, ServiceType

__all__ = [
    "APPLIED_DIRECTIVES",
    "DEFAULT_PRINTER_OPTIONS",
    "EXTEND",
    "REFERENCE_RESOLVER",
    "AnyType",
    "AppliedDirective",
    "AppliedDirectiveArgument",
    "DuplicateDirectiveError",
    "FederatedSchemaBuildError",
    "FederatedSchemaConfig",
    "FieldSetType",
    "MissingQueryTypeError",
    "PrinterOptions",
    "ServiceType",
    "build_federated_schema",
    "compose_directive",
    "contact",
    "external",
    "find_entity_types",
    "get_applied_directives",
    "has_applied_directive",
    "inaccessible",
    "is_entity",
    "key",
    "link",
    "override",
    "print_schema",
    "provides",
    "requires",
    "resolve_entity_references",
    "shareable",
    "tag",
]
