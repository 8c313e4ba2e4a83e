"""Pydantic data models for generated and enriched itineraries.

The generation step produces a :class:`TripPlan` (or a :class:`DailyOptionsPlan`
for the "alternatives" variant). Enrichment later fills the ``place_details``
slot of each :class:`Hotel` and :class:`Activity` with a :class:`PlaceDetails`
record resolved through Google Places. Enrichment is purely additive: no model
in this module is ever restructured by it.

Key model categories:
- PlaceDetails: verified metadata for a named place (immutable)
- Hotel / Activity: named places that own one enrichment slot each
- Day / TripPlan: the itinerary tree handed to the assembler
- DailyOptionsPlan / DailyOptionsRequest: alternative single-day plans
"""
from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from itinerary_planner.core.types import Lat, Lon, Rating

MAX_PHOTO_URLS = 3


class PlaceDetails(BaseModel):
    """Verified place metadata returned by the Google Places lookup.

    Attributes:
        place_id: Google Place ID, always present on a resolved record
        formatted_address: Human-readable address
        lat/lng: Geographic coordinates (0.0 when the service omitted them)
        website: Official website URI, if any
        rating: Average user rating, 0.0 when unknown
        phone_number: National-format phone number
        price_level: Google price tier tag, e.g. ``PRICE_LEVEL_MODERATE``
        photo_urls: Up to three media URLs in service order
    """

    place_id: str
    formatted_address: Optional[str] = None
    lat: Lat = 0.0
    lng: Lon = 0.0
    website: Optional[str] = None
    rating: Rating = 0.0
    phone_number: Optional[str] = None
    price_level: Optional[str] = None
    photo_urls: List[str] = Field(default_factory=list, max_length=MAX_PHOTO_URLS)

    model_config = ConfigDict(frozen=True, extra="forbid")


class Weather(BaseModel):
    """Daily forecast produced by the generation step."""

    temperature: Optional[float] = Field(default=None, description="Temperature in Celsius")
    condition: Optional[str] = Field(default=None, description="e.g. Sunny, Cloudy")


class Hotel(BaseModel):
    """Hotel suggested for one day of the trip."""

    hotel_name: Optional[str] = Field(default=None, description="Specific hotel name")
    location: Optional[str] = Field(default=None, description="Neighbourhood or area")
    price_per_night: float = Field(default=0.0, description="Estimated nightly price")
    place_details: Optional[PlaceDetails] = Field(
        default=None, description="Filled by enrichment, leave empty"
    )


class Activity(BaseModel):
    """Single activity scheduled within a day."""

    name: Optional[str] = Field(
        default=None, description="Specific place name, e.g. 'Louvre Museum'"
    )
    price: float = Field(default=0.0, description="Estimated price")
    duration: Optional[str] = Field(default=None, description="e.g. '2 hours'")
    place_details: Optional[PlaceDetails] = Field(
        default=None, description="Filled by enrichment, leave empty"
    )


class Day(BaseModel):
    """One day of the itinerary with its weather, hotel and activities."""

    day_number: int = 1
    date: Optional[str] = Field(default=None, description="ISO date, e.g. 2025-10-30")
    weather: Optional[Weather] = None
    hotel: Optional[Hotel] = None
    activities: Optional[List[Activity]] = Field(default_factory=list)


class TripPlan(BaseModel):
    """Top-level itinerary returned by the generation step.

    ``location`` doubles as the disambiguating hint appended to every place
    lookup query during enrichment.
    """

    location: Optional[str] = Field(default=None, description="Destination city or region")
    budget: float = Field(default=0.0, description="Total trip budget")
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    number_of_people: int = 1
    theme: Optional[str] = Field(default=None, description="e.g. honeymoon, historic, beach")
    days: Optional[List[Day]] = None


class DailyOptionsPlan(BaseModel):
    """Wrapper for several alternative plans for a single day."""

    daily_options: Optional[List[Day]] = None


class DailyOptionsRequest(BaseModel):
    """Parameters of an alternatives request for one day."""

    location: str
    day_number: int = Field(default=1, ge=1)
    preferences: str = ""
    number_of_options: int = Field(default=3, ge=1, le=10)


__all__ = [
    "MAX_PHOTO_URLS",
    "PlaceDetails",
    "Weather",
    "Hotel",
    "Activity",
    "Day",
    "TripPlan",
    "DailyOptionsPlan",
    "DailyOptionsRequest",
]
