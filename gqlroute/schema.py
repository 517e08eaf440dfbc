from __future__ import annotations
from logging import getLogger
from ariadne import load_schema_from_path, make_executable_schema
from ariadne.types import SchemaBindable
from graphql import GraphQLSchema

logger = getLogger(__name__)

SCHEMA_FILE_EXTENSIONS = (".graphql", ".graphqls", ".gql")


def is_schema_path(schema_source: str) -> bool:
    # SDL text always declares at least one type body
    return schema_source.endswith(SCHEMA_FILE_EXTENSIONS) or "{" not in schema_source


def build_schema(schema_source: str, *bindables: SchemaBindable) -> GraphQLSchema:
    # Accepts a .graphql/.graphqls file, a directory of them, or raw SDL text
    if is_schema_path(schema_source):
        logger.info("Loading GraphQL schema from %s", schema_source)
        type_defs = load_schema_from_path(schema_source)
    else:
        type_defs = schema_source
    return make_executable_schema(type_defs, *bindables)
