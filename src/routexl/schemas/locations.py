"""Location payload schemas."""

from __future__ import annotations

import json
from typing import Any, Iterable, Optional

from pydantic import BaseModel, ConfigDict, Field


class Restrictions(BaseModel):
    """Time window, in minutes from the start of the tour, for servicing a location."""

    model_config = ConfigDict(frozen=True, extra="allow")

    ready: int
    due: int


class Location(BaseModel):
    model_config = ConfigDict(frozen=True, extra="allow")

    name: str
    lat: float
    lng: float
    servicetime: int = Field(default=0, description="Minutes spent at the location.")
    restrictions: Optional[Restrictions] = None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def serialize_itinerary(locations: Iterable[Location]) -> str:
    """Encode locations as the JSON array expected in the ``locations`` form field."""
    payload: list[dict[str, Any]] = [location.to_payload() for location in locations]
    return json.dumps(payload)
