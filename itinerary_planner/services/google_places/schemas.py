from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from itinerary_planner.core.schemas import PlaceDetails


class SearchText(BaseModel):
    """Request body accepted by the Places Text Search (New) endpoint."""
    textQuery: str = Field(min_length=1)
    maxResultCount: int = Field(default=1, ge=1, le=20)

    model_config = ConfigDict(extra="forbid")


LookupStatus = Literal["found", "not_found", "error"]


class PlaceLookupResult(BaseModel):
    """Outcome of a single place lookup.

    Exactly one of three states: ``found`` carries ``details``, ``not_found``
    means the service had no reliable match, ``error`` carries a diagnostic
    message in ``error``.
    """
    query: str
    status: LookupStatus
    details: Optional[PlaceDetails] = None
    error: Optional[str] = None

    @classmethod
    def found(cls, query: str, details: PlaceDetails) -> "PlaceLookupResult":
        return cls(query=query, status="found", details=details)

    @classmethod
    def not_found(cls, query: str) -> "PlaceLookupResult":
        return cls(query=query, status="not_found")

    @classmethod
    def failure(cls, query: str, error: str) -> "PlaceLookupResult":
        return cls(query=query, status="error", error=error)
