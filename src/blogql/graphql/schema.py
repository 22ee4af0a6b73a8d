"""
Main GraphQL schema definition using Strawberry
"""

from typing import Any

import strawberry
from graphql import GraphQLError
from graphql import validate_schema as gql_validate_schema
from strawberry.fastapi import GraphQLRouter
from strawberry.types import ExecutionContext

from ..errors import BlogError
from ..logging import get_logger
from .context import get_context
from .mutations.root import Mutation
from .queries.root import Query

logger = get_logger(__name__)


class BlogSchema(strawberry.Schema):
    """Schema that logs domain errors quietly and defers the rest to Strawberry."""

    def process_errors(
        self,
        errors: list[GraphQLError],
        execution_context: ExecutionContext | None = None,
    ) -> None:
        unexpected = []
        for error in errors:
            if isinstance(error.original_error, BlogError):
                logger.info(
                    "GraphQL request error",
                    code=error.original_error.code,
                    error=error.message,
                    path=error.path,
                )
            else:
                unexpected.append(error)

        if unexpected:
            super().process_errors(unexpected, execution_context)


# Create the GraphQL schema
schema = BlogSchema(query=Query, mutation=Mutation)


def validate_schema() -> None:
    """Validate the GraphQL schema at startup.

    Catches unresolved type references early so the server fails fast
    instead of erroring on the first request.

    Raises:
        Exception: If the schema is invalid or introspection fails
    """
    try:
        graphql_schema = schema._schema

        errors = gql_validate_schema(graphql_schema)
        if errors:
            error_messages = [str(e) for e in errors]
            raise Exception(f"GraphQL schema validation failed: {'; '.join(error_messages)}")

        from graphql import get_introspection_query, graphql_sync

        result = graphql_sync(graphql_schema, get_introspection_query())
        if result.errors:
            error_messages = [str(e) for e in result.errors]
            raise Exception(f"GraphQL introspection failed: {'; '.join(error_messages)}")

        logger.info("GraphQL schema validation successful")

    except Exception as e:
        logger.error("GraphQL schema validation failed", error=str(e))
        raise


def export_schema() -> str:
    """Return the schema in GraphQL SDL form."""
    return schema.as_str()


def create_graphql_router(graphiql: bool = True) -> GraphQLRouter[dict[str, Any], None]:
    """Create a GraphQL router for FastAPI."""
    return GraphQLRouter(
        schema,
        path="/graphql",
        graphql_ide="graphiql" if graphiql else None,
        context_getter=get_context,
    )
