from __future__ import annotations
from io import BytesIO
from logging import getLogger
from fastapi import APIRouter, FastAPI, Request
from fastapi.responses import PlainTextResponse, Response, StreamingResponse
from graphql import print_schema
from ariadne.types import SchemaBindable
from gqlroute.config.endpoint import DEFAULT_GQL_ROUTE, DEFAULT_SCHEMA_FILE
from gqlroute.endpoint import ContextProvider, GraphQLEndpoint
from gqlroute.exceptions import MalformedRequest
from gqlroute.schema import build_schema

logger = getLogger(__name__)

MALFORMED_REQUEST_MESSAGE = "The GraphQL query could not be parsed"


def graphql_router(
    endpoint: GraphQLEndpoint,
    path: str = DEFAULT_GQL_ROUTE,
    expose_schema: bool = False,
) -> APIRouter:
    """
    Serves the endpoint on both GET and POST at the given path, following
    https://graphql.org/learn/serving-over-http/#http-methods-headers-and-body
    """
    base = path.rstrip("/")
    router = APIRouter()

    @router.api_route(base or "/", methods=["GET", "POST"])
    async def graphql_request(request: Request):
        try:
            result = await endpoint.handle(request)
        except MalformedRequest as e:
            logger.info("Malformed GraphQL request: %r", e.__cause__)
            return PlainTextResponse(MALFORMED_REQUEST_MESSAGE, status_code=400)
        return Response(content=result, media_type="application/json")

    if expose_schema:

        @router.get(f"{base}/schema.graphql")
        async def graphql_schema():
            headers = {"Content-Disposition": 'attachment; filename="schema.graphql"'}
            return StreamingResponse(
                BytesIO(print_schema(endpoint.schema).encode()),
                headers=headers,
                media_type="text/plain",
            )

    return router


def include_graphql(
    router: APIRouter | FastAPI,
    *bindables: SchemaBindable,
    path: str = DEFAULT_GQL_ROUTE,
    schema_file: str = DEFAULT_SCHEMA_FILE,
    provide_context: ContextProvider | None = None,
    endpoint: GraphQLEndpoint | None = None,
    expose_schema: bool = False,
) -> GraphQLEndpoint:
    # Without a context provider the request itself becomes the context
    if endpoint is None:
        endpoint = GraphQLEndpoint(
            build_schema(schema_file, *bindables), provide_context
        )
    router.include_router(graphql_router(endpoint, path, expose_schema))
    return endpoint
