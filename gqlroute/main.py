from __future__ import annotations
from logging import getLogger
from fastapi.middleware.cors import CORSMiddleware
from fastapi_offline import FastAPIOffline
from ariadne.types import SchemaBindable
from graphql import GraphQLSchema
from gqlroute.middleware.requestlogger import RequestLogger
from gqlroute.endpoint import ContextProvider, GraphQLEndpoint
from gqlroute.routers.graphql import include_graphql
from gqlroute.schema import build_schema
from gqlroute.config.general import general
from gqlroute.config.endpoint import endpoint_settings

logger = getLogger(__name__)


def create_app(
    schema: GraphQLSchema | None = None,
    *bindables: SchemaBindable,
    provide_context: ContextProvider | None = None,
) -> FastAPIOffline:
    app = FastAPIOffline(
        title=general.PROJECT_NAME,
        version=general.API_VERSION,
        root_path=general.MOUNT_PATH,
        debug=endpoint_settings.DEBUG,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestLogger)

    if schema is None:
        schema = build_schema(endpoint_settings.SCHEMA_FILE, *bindables)
    include_graphql(
        app,
        path=endpoint_settings.GRAPHQL_PATH,
        endpoint=GraphQLEndpoint(schema, provide_context),
        expose_schema=endpoint_settings.EXPOSE_SCHEMA,
    )
    logger.info(
        "Serving GraphQL at %s%s", general.MOUNT_PATH, endpoint_settings.GRAPHQL_PATH
    )
    return app
