from __future__ import annotations
from typing import Any, Awaitable, Callable
from inspect import isawaitable
from logging import getLogger
from fastapi import Request
from graphql import GraphQLSchema, graphql
from gqlroute.extractor import extract_request
from gqlroute.interfaces.codecs import JsonCodec, default_codec

logger = getLogger(__name__)

ROOT_VALUE = "Root"

ContextProvider = Callable[[Request], Any | Awaitable[Any]]


def request_as_context(request: Request) -> Request:
    return request


class GraphQLEndpoint:
    schema: GraphQLSchema
    provide_context: ContextProvider
    codec: JsonCodec

    def __init__(
        self,
        schema: GraphQLSchema,
        provide_context: ContextProvider | None = None,
        codec: JsonCodec = default_codec,
    ):
        self.schema = schema
        self.provide_context = provide_context or request_as_context
        self.codec = codec

    async def handle(self, request: Request) -> str:
        """
        Extracts a GraphQL request from the HTTP request, executes it and
        returns the result in its specification form as JSON text.
        Raises MalformedRequest when the payload cannot be decoded.
        """
        body = await extract_request(request, self.codec)
        setattr(request.state, "graphql_operation", body.operationName)
        context = self.provide_context(request)
        if isawaitable(context):
            context = await context
        result = await graphql(
            self.schema,
            body.query,
            root_value=ROOT_VALUE,
            context_value=context,
            variable_values=body.variables,
            operation_name=body.operationName,
        )
        if result.errors:
            logger.debug(
                "operation=%s finished with %d error(s)",
                body.operationName,
                len(result.errors),
            )
        return self.codec.dumps(result.formatted)
