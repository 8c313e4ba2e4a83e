import logging
from typing import Any, Dict, List, Optional

import httpx
from pydantic import ValidationError

from itinerary_planner.core.config import ApiSettings
from itinerary_planner.core.schemas import MAX_PHOTO_URLS, PlaceDetails
from itinerary_planner.services.google_places.schemas import PlaceLookupResult, SearchText

logger = logging.getLogger(__name__)

PLACES_BASE_URL = "https://places.googleapis.com/v1"
PLACEHOLDER_API_KEY = "YOUR_PLACES_API_KEY_HERE"
PHOTO_MAX_HEIGHT_PX = 800

FIELD_MASK = ",".join(
    [
        "places.id",
        "places.displayName",
        "places.formattedAddress",
        "places.location",
        "places.websiteUri",
        "places.rating",
        "places.photos",
        "places.priceLevel",
        "places.nationalPhoneNumber",
    ]
)


def _safe_text(node: Any, field: str) -> Optional[str]:
    if not isinstance(node, dict):
        return None
    value = node.get(field)
    return value if isinstance(value, str) else None


def _safe_float(node: Any, field: str, low: float, high: float) -> float:
    if not isinstance(node, dict):
        return 0.0
    value = node.get(field)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0.0
    if not low <= value <= high:
        return 0.0
    return float(value)


class GooglePlaces:
    """Thin async wrapper around the Google Places API (New) text search."""

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = PLACES_BASE_URL,
        timeout_s: float = 15.0,
    ) -> None:
        if not api_key or api_key == PLACEHOLDER_API_KEY:
            logger.warning("Google Places API key is missing; lookups will fail")

        self.api_key = api_key or ""
        self.base_url = base_url.rstrip("/")
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            headers={
                "Content-Type": "application/json",
                "X-Goog-Api-Key": self.api_key,
            },
            timeout=httpx.Timeout(timeout_s, connect=10.0),
        )

    async def aclose(self) -> None:
        """Close the underlying HTTPX client."""

        await self._client.aclose()

    async def __aenter__(self) -> "GooglePlaces":
        """Support async context-manager usage."""

        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        """Ensure the HTTP client is closed when leaving a context."""

        await self._client.aclose()

    async def _apost(self, path: str, payload: Dict[str, Any], *, field_mask: str) -> Any:
        """Execute an authenticated POST request and return the parsed JSON."""

        response = await self._client.post(
            path,
            json=payload,
            headers={"X-Goog-FieldMask": field_mask},
        )
        response.raise_for_status()
        return response.json()

    async def lookup(self, query: str) -> PlaceLookupResult:
        """Resolve ``query`` to the single best-ranked place.

        Never raises: transport, status and payload problems are reported as an
        ``error`` result, an empty candidate list as ``not_found``.
        """

        if not query or not query.strip():
            return PlaceLookupResult.failure(query or "", "empty query")

        request = SearchText(textQuery=query, maxResultCount=1)
        try:
            data = await self._apost(
                "/places:searchText",
                request.model_dump(),
                field_mask=FIELD_MASK,
            )
        except httpx.HTTPStatusError as exc:
            message = f"HTTP {exc.response.status_code}: {exc.response.text}"
            logger.error("Places API returned an error for query [%s]: %s", query, message)
            return PlaceLookupResult.failure(query, message)
        except httpx.HTTPError as exc:
            message = f"{type(exc).__name__}: {exc}"
            logger.error("Error calling Places API for query [%s]: %s", query, message)
            return PlaceLookupResult.failure(query, message)
        except ValueError as exc:
            logger.error("Places API sent malformed JSON for query [%s]: %s", query, exc)
            return PlaceLookupResult.failure(query, f"malformed response: {exc}")

        logger.debug("Places API response for [%s]: %s", query, data)

        if not isinstance(data, dict):
            return PlaceLookupResult.failure(
                query, f"malformed response: expected object, got {type(data).__name__}"
            )

        places = data.get("places")
        if not isinstance(places, list) or not places:
            logger.warning("No 'places' data found for query [%s]", query)
            return PlaceLookupResult.not_found(query)

        try:
            details = self._parse_place(places[0])
        except ValidationError as exc:
            logger.error("Could not build place details for query [%s]: %s", query, exc)
            return PlaceLookupResult.failure(query, f"invalid place record: {exc}")

        if details is None:
            logger.warning("Top candidate for query [%s] has no place id", query)
            return PlaceLookupResult.not_found(query)
        return PlaceLookupResult.found(query, details)

    def _parse_place(self, place: Any) -> Optional[PlaceDetails]:
        """Convert the first candidate into :class:`PlaceDetails`."""

        place_id = _safe_text(place, "id")
        if not place_id:
            return None

        location = place.get("location")
        return PlaceDetails(
            place_id=place_id,
            formatted_address=_safe_text(place, "formattedAddress"),
            lat=_safe_float(location, "latitude", -90.0, 90.0),
            lng=_safe_float(location, "longitude", -180.0, 180.0),
            website=_safe_text(place, "websiteUri"),
            rating=_safe_float(place, "rating", 0.0, 5.0),
            phone_number=_safe_text(place, "nationalPhoneNumber"),
            price_level=_safe_text(place, "priceLevel"),
            photo_urls=self._photo_urls(place.get("photos")),
        )

    def _photo_urls(self, photos: Any) -> List[str]:
        """Build media URLs for the first photos that carry a resource name."""

        if not isinstance(photos, list):
            return []
        urls: List[str] = []
        for photo in photos:
            name = _safe_text(photo, "name")
            if not name:
                continue
            urls.append(
                f"{self.base_url}/{name}/media?maxHeightPx={PHOTO_MAX_HEIGHT_PX}&key={self.api_key}"
            )
            if len(urls) == MAX_PHOTO_URLS:
                break
        return urls


def create_google_places_client(settings: ApiSettings) -> GooglePlaces:
    """Instantiate the Google Places client using project settings."""

    return GooglePlaces(
        settings.google_places_api_key or "",
        timeout_s=settings.places_timeout_s,
    )
