from os.path import join, dirname, abspath
import pytest
from ariadne import MutationType, QueryType
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from gqlroute.endpoint import GraphQLEndpoint
from gqlroute.routers.graphql import include_graphql
from gqlroute.schema import build_schema

SCHEMA_FILE = join(dirname(abspath(__file__)), "schema.graphqls")

query = QueryType()
mutation = MutationType()


@query.field("hello")
def resolve_hello(*_):
    return "world"


@query.field("echo")
def resolve_echo(*_, x):
    return x


@query.field("root")
def resolve_root(obj, *_):
    return obj


@query.field("who")
def resolve_who(_, info):
    context = info.context
    if isinstance(context, Request):
        return context.headers.get("x-user", "anonymous")
    return context.get("user")


@mutation.field("ping")
async def resolve_ping(*_):
    return "pong"


def make_request(
    body: bytes = b"",
    query_string: str = "",
    content_type: str | None = None,
    method: str = "POST",
) -> Request:
    headers = []
    if content_type is not None:
        headers.append((b"content-type", content_type.encode()))
    scope = {
        "type": "http",
        "method": method,
        "path": "/graphql",
        "root_path": "",
        "query_string": query_string.encode(),
        "headers": headers,
    }
    sent = False

    async def receive():
        nonlocal sent
        if sent:
            raise AssertionError("request body read twice")
        sent = True
        return {"type": "http.request", "body": body, "more_body": False}

    return Request(scope, receive)


@pytest.fixture
def schema():
    return build_schema(SCHEMA_FILE, query, mutation)


@pytest.fixture
def endpoint(schema):
    return GraphQLEndpoint(schema)


@pytest.fixture
def client(endpoint):
    app = FastAPI()
    include_graphql(app, endpoint=endpoint, expose_schema=True)
    with TestClient(app) as test_client:
        yield test_client
