"""Google Places (New) integration.

Resolves a free-text place query to a single verified
:class:`~itinerary_planner.core.schemas.PlaceDetails` record through the
Text Search endpoint.

Public API:
    - GooglePlaces: Async HTTP client for the Places API
    - create_google_places_client: Factory building the client from settings
    - PlaceLookupResult: Tagged outcome of one lookup (found / not_found / error)
"""
from itinerary_planner.services.google_places.client import (
    FIELD_MASK,
    GooglePlaces,
    create_google_places_client,
)
from itinerary_planner.services.google_places.schemas import (
    LookupStatus,
    PlaceLookupResult,
    SearchText,
)

__all__ = [
    "FIELD_MASK",
    "GooglePlaces",
    "create_google_places_client",
    "LookupStatus",
    "PlaceLookupResult",
    "SearchText",
]
