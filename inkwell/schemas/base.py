"""Shared pydantic base for request and response bodies."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

SLUG_PATTERN = r"^[a-zA-Z0-9][a-zA-Z0-9-]*$"


class CamelModel(BaseModel):
    """Model that reads snake_case or camelCase and writes camelCase."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )
