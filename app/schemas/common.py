"""Common/shared schemas."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model that serializes snake_case fields as camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )


class NodeHealthResponse(CamelModel):
    api_url: str
    reachable: bool
    latest_block: int | None = None
    error: str | None = None
