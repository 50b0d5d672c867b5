"""Base pydantic model shared by the API wire models."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class APIBaseModel(BaseModel):
    """Base class for all API models.

    Fields are declared in snake_case and read from / written to the camelCase
    keys the API uses. Unknown keys in responses are ignored.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    def to_wire(self) -> dict:
        """Return the model as a JSON-compatible dict keyed like the API."""
        return self.model_dump(mode="json", by_alias=True)

    def __str__(self) -> str:
        """Return a formatted JSON representation of the model."""
        return self.model_dump_json(indent=2, by_alias=True)
