from typing import Any
from fastapi import Request
from pydantic import ValidationError
from gqlroute.exceptions import MalformedRequest
from gqlroute.interfaces.codecs import JsonCodec, default_codec
from gqlroute.interfaces.schemas import GraphQLRequest


def content_subtype(request: Request) -> str:
    content_type = request.headers.get("content-type", "")
    media_type = content_type.split(";", 1)[0].strip().lower()
    _, _, subtype = media_type.partition("/")
    return subtype


async def extract_request(
    request: Request, codec: JsonCodec = default_codec
) -> GraphQLRequest:
    """
    Pulls query, operationName and variables out of an HTTP request following
    https://graphql.org/learn/serving-over-http/#http-methods-headers-and-body

    URL parameters win over the body, an application/graphql body is taken as
    the raw query text, anything else must be a JSON envelope.
    """
    try:
        if "query" in request.query_params:
            return request_from_parameters(request, codec)
        if content_subtype(request) == "graphql":
            return GraphQLRequest(query=(await request.body()).decode("utf-8"))
        payload: Any = codec.loads((await request.body()).decode("utf-8"))
        return GraphQLRequest.model_validate(payload)
    except (ValueError, TypeError, ValidationError) as e:
        raise MalformedRequest() from e


def request_from_parameters(request: Request, codec: JsonCodec) -> GraphQLRequest:
    params = request.query_params
    variables = None
    if "variables" in params:
        variables = codec.loads(params["variables"])
        if not isinstance(variables, dict):
            raise TypeError("variables parameter must be a JSON object")
    return GraphQLRequest(
        query=params["query"],
        operationName=params.get("operationName"),
        variables=variables,
    )
