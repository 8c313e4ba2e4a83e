from pydantic import BaseModel, Field

from itinerary_planner.core.schemas import DailyOptionsRequest


class PlanRequest(BaseModel):
    """Request payload used to generate a new trip plan."""

    prompt: str = Field(min_length=1, description="e.g. 'Plan a 3 day trip to Rome'")


class DailyOptionsPayload(DailyOptionsRequest):
    """Request payload used to generate alternatives for one day."""
