from __future__ import annotations

from functools import cached_property
from typing import TYPE_CHECKING

from strawberry.exceptions.exception import StrawberryException

if TYPE_CHECKING:
    from collections.abc import Sequence

    from strawberry.exceptions.exception_source import ExceptionSource


class FederatedSchemaBuildError(StrawberryException):
    """The base schema could not be turned into a federated schema.

    Raised while composing, never at query time. There is no usable partial
    schema when this happens, so callers should treat it as a fatal
    misconfiguration.
    """

    def __init__(self, reasons: Sequence[str]):
        self.reasons = list(reasons)

        self.message = "Failed to build federated schema: " + "; ".join(self.reasons)
        self.rich_message = (
            "[bold red]Failed to build federated schema:[/] "
            + "; ".join(self.reasons)
        )
        self.suggestion = "To fix this error, fix the base schema configuration"
        self.annotation_message = "invalid federated schema"

        super().__init__(self.message)

    @cached_property
    def exception_source(self) -> ExceptionSource | None:  # pragma: no cover
        return None


class DuplicateDirectiveError(FederatedSchemaBuildError):
    def __init__(self, names: Sequence[str]):
        self.names = list(names)

        super().__init__(
            [f'Directive "@{name}" is defined more than once' for name in self.names],
        )

        self.rich_message = (
            f"Found duplicated {self.names_str} in "
            "`[underline]FederatedSchemaConfig.directives[/]`"
        )
        self.suggestion = (
            "To fix this error, remove the offending definition(s), federation "
            "directives are registered automatically"
        )
        self.annotation_message = "duplicated directive"

    @property
    def names_str(self) -> str:
        names = [f"@{name}" for name in self.names]

        if len(names) == 1:
            return f'directive "{names[0]}"'

        head = ", ".join(names[:-1])
        return f'directives "{head}" and "{names[-1]}"'


class MissingQueryTypeError(StrawberryException):
    def __init__(self):
        self.message = "Invalid schema: a schema definition requires a query type"
        self.rich_message = (
            "[bold red]Invalid schema:[/] the schema block requires a "
            "`[underline]query[/]` type"
        )
        self.suggestion = "To fix this error, add a query type to the schema"
        self.annotation_message = "missing query type"

        super().__init__(self.message)

    @cached_property
    def exception_source(self) -> ExceptionSource | None:  # pragma: no cover
        return None
