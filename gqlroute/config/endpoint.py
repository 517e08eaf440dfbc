# This software is provided to the United States Government (USG) with SBIR Data Rights as defined at Federal Acquisition Regulation 52.227-14, "Rights in Data-SBIR Program" (May 2014) SBIR Rights Notice (Dec 2023-2024) These SBIR data are furnished with SBIR rights under Contract No. H9241522D0001. For a period of 19 years, unless extended in accordance with FAR 27.409(h), after acceptance of all items to be delivered under this contract, the Government will use these data for Government purposes only, and they shall not be disclosed outside the Government (including disclosure for procurement purposes) during such period without permission of the Contractor, except that, subject to the foregoing use and disclosure prohibitions, these data may be disclosed for use by support Contractors. After the protection period, the Government has a paid-up license to use, and to authorize others to use on its behalf, these data for Government purposes, but is relieved of all disclosure prohibitions and assumes no liability for unauthorized use of these data by third parties. This notice shall be affixed to any reproductions of these data, in whole or in part.
from __future__ import annotations
from pydantic import model_validator
from gqlroute.config._base import Base


DEFAULT_GQL_ROUTE = "/graphql"
DEFAULT_SCHEMA_FILE = "schema.graphqls"


class Endpoint(Base):
    # GraphQL endpoint config
    GRAPHQL_PATH: str = DEFAULT_GQL_ROUTE
    SCHEMA_FILE: str = DEFAULT_SCHEMA_FILE
    EXPOSE_SCHEMA: bool = True
    DEBUG: bool = False

    @model_validator(mode="after")
    def valid_graphql_path(self):
        if not self.GRAPHQL_PATH.startswith("/"):
            raise ValueError("GRAPHQL_PATH must start with '/'")
        self.GRAPHQL_PATH = self.GRAPHQL_PATH.rstrip("/")
        if not self.GRAPHQL_PATH:
            raise ValueError("GRAPHQL_PATH cannot be the application root")
        return self


endpoint_settings = Endpoint()
