from pydantic import BaseModel, ConfigDict
from pydantic.types import JsonValue


class GraphQLRequest(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    query: str
    operationName: str | None = None
    variables: dict[str, JsonValue] | None = None
