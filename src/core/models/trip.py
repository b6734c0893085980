from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TripRecord(BaseModel):
    """A trip entry. Only ``id`` is known; every other attribute is kept as sent."""

    model_config = ConfigDict(extra="allow")

    id: str = Field(..., min_length=1)

    def to_item(self) -> dict[str, Any]:
        return {"id": self.id, **(self.model_extra or {})}


class TripKey(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., min_length=1)


class TripPage(BaseModel):
    items: list[dict[str, Any]]
    next_cursor: str | None = None
