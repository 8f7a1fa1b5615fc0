from typing import Any, Optional

from graphql import GraphQLSchema, graphql_sync
from strawberry.test import BaseGraphQLTestClient


class TestClient(BaseGraphQLTestClient):
    """Execute operations against a schema in-process.

    There is no HTTP layer involved: the request body goes straight to
    `graphql-core`, and the formatted result is returned as the response.
    """

    __test__ = False

    def __init__(self, schema: GraphQLSchema, root_value: Any = None):
        self.root_value = root_value
        super().__init__(schema)

    @property
    def schema(self) -> GraphQLSchema:
        return self._client

    def request(
        self,
        body: dict[str, object],
        headers: Optional[dict[str, object]] = None,
        files: Optional[dict[str, object]] = None,
    ):
        result = graphql_sync(
            self.schema,
            body["query"],  # type: ignore
            root_value=self.root_value,
            variable_values=body.get("variables"),  # type: ignore
        )
        return result.formatted

    def _decode(self, response: Any, type: str):  # noqa: A002
        return response
