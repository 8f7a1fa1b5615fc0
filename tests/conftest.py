import pytest
from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLID,
    GraphQLNonNull,
    GraphQLObjectType,
    GraphQLString,
)

from strawberry_subgraph import APPLIED_DIRECTIVES, REFERENCE_RESOLVER, key


def resolve_product_reference(info, id):  # noqa: A002
    return {"id": id, "description": "Federated Description"}


@pytest.fixture
def product_type():
    return GraphQLObjectType(
        "Product",
        {
            "id": GraphQLField(GraphQLNonNull(GraphQLID)),
            "description": GraphQLField(GraphQLString),
        },
        extensions={
            APPLIED_DIRECTIVES: [key("id")],
            REFERENCE_RESOLVER: resolve_product_reference,
        },
    )


@pytest.fixture
def query_type(product_type):
    return GraphQLObjectType(
        "Query",
        {
            "product": GraphQLField(
                product_type,
                args={"id": GraphQLArgument(GraphQLNonNull(GraphQLID))},
                resolve=lambda _root, info, id: resolve_product_reference(info, id),
            ),
        },
    )
