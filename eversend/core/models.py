"""Pydantic base model shared by every wire DTO and parameter model."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict


class EversendModel(BaseModel):
    """
    Base for request parameters and response records.

    Field aliases hold the remote casing; Python names work on input too.
    Instances are frozen once built.
    """

    model_config = ConfigDict(
        populate_by_name=True,
        extra='ignore',
        frozen=True,
    )

    def to_wire(self) -> Dict[str, Any]:
        """Serialize using the remote field names, leaving out unset optionals."""
        return self.model_dump(mode='json', by_alias=True, exclude_none=True)
