from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    List,
    Optional,
    Sequence,
    Union,
)

from typing_extensions import Protocol, TypeAlias

if TYPE_CHECKING:
    from graphql import GraphQLObjectType, GraphQLResolveInfo

DirectiveArgumentValue: TypeAlias = Union[
    str,
    bool,
    int,
    float,
    None,
    Sequence["DirectiveArgumentValue"],
]
Representation: TypeAlias = Dict[str, Any]


class EntityTypeResolver(Protocol):
    """Map a value returned by `_entities` to one of the entity types."""

    def __call__(
        self,
        value: Any,
        info: GraphQLResolveInfo,
    ) -> Optional[Union[GraphQLObjectType, str]]: ...


class EntitiesResolver(Protocol):
    """Resolve `_entities` representations into values."""

    def __call__(
        self,
        representations: List[Representation],
        info: GraphQLResolveInfo,
    ) -> Sequence[Any]: ...


class ReferenceResolver(Protocol):
    def __call__(self, info: GraphQLResolveInfo, **key_fields: Any) -> Any: ...
