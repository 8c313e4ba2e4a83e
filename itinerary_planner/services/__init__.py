"""External service integrations for itinerary planning.

- Google Places: verified metadata (address, coordinates, rating, photos)
  for hotels and activities named in a generated itinerary

Example Usage:
    >>> from itinerary_planner.services import create_google_places_client
    >>> from itinerary_planner.core.config import ApiSettings
    >>>
    >>> settings = ApiSettings.from_env()
    >>> client = create_google_places_client(settings)
    >>> result = await client.lookup("Colosseum, Rome")
"""

from itinerary_planner.services.google_places import (
    GooglePlaces,
    PlaceLookupResult,
    create_google_places_client,
)

__all__ = [
    "GooglePlaces",
    "PlaceLookupResult",
    "create_google_places_client",
]
