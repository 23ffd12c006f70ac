"""Common Pydantic schemas shared by the REST client and the web views."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """
    Base model for REST payloads.

    Fields are snake_case in Python and camelCase on the wire:
    `text_direction` <-> `"textDirection"`. Both spellings are accepted when
    constructing a model.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )

    def to_body(self, exclude_unset: bool = False) -> dict[str, Any]:
        """
        Serialize to a JSON request body with camelCase keys.

        Args:
            exclude_unset: Omit fields the caller never set (for PATCH bodies)
        """
        return self.model_dump(mode="json", by_alias=True, exclude_unset=exclude_unset)


class HealthResponse(BaseModel):
    """Response of the web app's health check."""

    status: str = Field(description="Service status")
    version: str = Field(description="Application version")
