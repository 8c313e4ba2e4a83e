"""Tests for the Google Places lookup client."""
from __future__ import annotations

from typing import Any, Dict
from unittest.mock import AsyncMock, Mock, patch

import httpx
import pytest

from itinerary_planner.core.config import ApiSettings
from itinerary_planner.services.google_places import (
    FIELD_MASK,
    GooglePlaces,
    PlaceLookupResult,
    create_google_places_client,
)


def _place_payload(**overrides: Any) -> Dict[str, Any]:
    place = {
        "id": "ChIJrRMgU7ZhLxMRxAOFkC7I8Sg",
        "displayName": {"text": "Colosseum", "languageCode": "en"},
        "formattedAddress": "Piazza del Colosseo, 1, 00184 Roma RM, Italy",
        "location": {"latitude": 41.8902102, "longitude": 12.4922309},
        "websiteUri": "https://parcocolosseo.it/",
        "rating": 4.7,
        "nationalPhoneNumber": "06 2111 5843",
        "priceLevel": "PRICE_LEVEL_MODERATE",
        "photos": [
            {"name": f"places/ChIJrRMgU7ZhLxMRxAOFkC7I8Sg/photos/p{i}", "widthPx": 4032}
            for i in range(5)
        ],
    }
    place.update(overrides)
    return {"places": [place]}


class TestGooglePlaces:
    """Test suite for the Google Places client."""

    @pytest.fixture
    def mock_client(self):
        """Create a mock HTTPX client for testing."""
        mock_client = AsyncMock(spec=httpx.AsyncClient)
        mock_response = Mock()  # httpx Response methods are sync
        mock_response.json.return_value = {"places": []}
        mock_response.raise_for_status.return_value = None
        mock_client.post.return_value = mock_response
        return mock_client

    @pytest.fixture
    def places_client(self, mock_client):
        """Create a Google Places client with mocked HTTP client."""
        with patch("httpx.AsyncClient", return_value=mock_client):
            client = GooglePlaces(api_key="test-key")
            client._client = mock_client
            return client

    def _respond_with(self, mock_client, payload: Any) -> None:
        mock_response = Mock()
        mock_response.json.return_value = payload
        mock_response.raise_for_status.return_value = None
        mock_client.post.return_value = mock_response

    async def test_init_with_defaults(self):
        with patch("httpx.AsyncClient") as mock_httpx:
            client = GooglePlaces(api_key="test-key")
            mock_httpx.assert_called_once()
            kwargs = mock_httpx.call_args.kwargs
            assert kwargs["base_url"] == "https://places.googleapis.com/v1"
            assert kwargs["headers"]["X-Goog-Api-Key"] == "test-key"
            assert client.api_key == "test-key"

    async def test_missing_key_only_warns(self, caplog):
        with patch("httpx.AsyncClient"):
            client = GooglePlaces(api_key="YOUR_PLACES_API_KEY_HERE")
        assert client.api_key == "YOUR_PLACES_API_KEY_HERE"
        assert "API key is missing" in caplog.text

    async def test_lookup_success(self, places_client, mock_client):
        self._respond_with(mock_client, _place_payload())

        result = await places_client.lookup("Colosseum, Rome")

        assert result.status == "found"
        details = result.details
        assert details.place_id == "ChIJrRMgU7ZhLxMRxAOFkC7I8Sg"
        assert details.formatted_address.startswith("Piazza del Colosseo")
        assert details.lat == pytest.approx(41.8902102)
        assert details.lng == pytest.approx(12.4922309)
        assert details.website == "https://parcocolosseo.it/"
        assert details.rating == pytest.approx(4.7)
        assert details.phone_number == "06 2111 5843"
        assert details.price_level == "PRICE_LEVEL_MODERATE"

        mock_client.post.assert_called_once()
        args, kwargs = mock_client.post.call_args
        assert args[0] == "/places:searchText"
        assert kwargs["json"] == {"textQuery": "Colosseum, Rome", "maxResultCount": 1}
        assert kwargs["headers"]["X-Goog-FieldMask"] == FIELD_MASK

    async def test_field_mask_restricts_payload(self):
        fields = FIELD_MASK.split(",")
        assert "places.id" in fields
        assert "places.photos" in fields
        assert "places.nationalPhoneNumber" in fields
        assert all(field.startswith("places.") for field in fields)

    async def test_photo_urls_are_built_and_truncated(self, places_client, mock_client):
        self._respond_with(mock_client, _place_payload())

        result = await places_client.lookup("Colosseum, Rome")

        assert result.details.photo_urls == [
            "https://places.googleapis.com/v1/places/ChIJrRMgU7ZhLxMRxAOFkC7I8Sg/photos/"
            f"p{i}/media?maxHeightPx=800&key=test-key"
            for i in range(3)
        ]

    async def test_photos_without_name_are_skipped(self, places_client, mock_client):
        photos = [{"widthPx": 10}, {"name": ""}, {"name": "places/x/photos/a"}]
        self._respond_with(mock_client, _place_payload(photos=photos))

        result = await places_client.lookup("Somewhere")

        assert result.details.photo_urls == [
            "https://places.googleapis.com/v1/places/x/photos/a/media?maxHeightPx=800&key=test-key"
        ]

    async def test_mistyped_fields_fall_back_to_neutral_values(self, places_client, mock_client):
        payload = _place_payload(
            rating="4.5",
            websiteUri=123,
            nationalPhoneNumber=None,
            photos="not-a-list",
        )
        del payload["places"][0]["location"]
        self._respond_with(mock_client, payload)

        result = await places_client.lookup("Colosseum, Rome")

        assert result.status == "found"
        assert result.details.rating == 0.0
        assert result.details.lat == 0.0
        assert result.details.lng == 0.0
        assert result.details.website is None
        assert result.details.phone_number is None
        assert result.details.photo_urls == []

    async def test_empty_candidates_is_not_found(self, places_client, mock_client):
        self._respond_with(mock_client, {"places": []})

        result = await places_client.lookup("Nowhere, Atlantis")

        assert result.status == "not_found"
        assert result.details is None
        assert result.error is None

    async def test_missing_places_key_is_not_found(self, places_client, mock_client):
        self._respond_with(mock_client, {})

        result = await places_client.lookup("Nowhere, Atlantis")

        assert result.status == "not_found"

    async def test_candidate_without_id_is_not_found(self, places_client, mock_client):
        payload = _place_payload()
        del payload["places"][0]["id"]
        self._respond_with(mock_client, payload)

        result = await places_client.lookup("Colosseum, Rome")

        assert result.status == "not_found"

    async def test_http_status_error_is_reported(self, places_client, mock_client):
        request = httpx.Request("POST", "https://places.googleapis.com/v1/places:searchText")
        response = httpx.Response(403, text="API key not valid", request=request)
        mock_response = Mock()
        mock_response.raise_for_status.side_effect = httpx.HTTPStatusError(
            "403 Forbidden", request=request, response=response
        )
        mock_client.post.return_value = mock_response

        result = await places_client.lookup("Colosseum, Rome")

        assert result.status == "error"
        assert "HTTP 403" in result.error
        assert "API key not valid" in result.error

    async def test_transport_error_is_reported(self, places_client, mock_client):
        mock_client.post.side_effect = httpx.ConnectError("connection refused")

        result = await places_client.lookup("Colosseum, Rome")

        assert result.status == "error"
        assert "ConnectError" in result.error

    async def test_malformed_json_is_reported(self, places_client, mock_client):
        mock_response = Mock()
        mock_response.raise_for_status.return_value = None
        mock_response.json.side_effect = ValueError("Expecting value: line 1 column 1")
        mock_client.post.return_value = mock_response

        result = await places_client.lookup("Colosseum, Rome")

        assert result.status == "error"
        assert result.error.startswith("malformed response")

    async def test_non_object_payload_is_reported(self, places_client, mock_client):
        self._respond_with(mock_client, ["unexpected"])

        result = await places_client.lookup("Colosseum, Rome")

        assert result.status == "error"
        assert "expected object" in result.error

    async def test_out_of_range_numbers_fall_back_to_neutral_values(self, places_client, mock_client):
        self._respond_with(
            mock_client,
            _place_payload(location={"latitude": 123.0, "longitude": 12.5}, rating=5.2),
        )

        result = await places_client.lookup("Colosseum, Rome")

        assert result.status == "found"
        assert result.details.lat == 0.0
        assert result.details.lng == pytest.approx(12.5)
        assert result.details.rating == 0.0
        assert result.details.place_id == "ChIJrRMgU7ZhLxMRxAOFkC7I8Sg"
        assert len(result.details.photo_urls) == 3

    async def test_out_of_range_longitude_keeps_record(self, places_client, mock_client):
        self._respond_with(
            mock_client,
            _place_payload(location={"latitude": 41.89, "longitude": -200}, rating=-1),
        )

        result = await places_client.lookup("Colosseum, Rome")

        assert result.status == "found"
        assert result.details.lat == pytest.approx(41.89)
        assert result.details.lng == 0.0
        assert result.details.rating == 0.0

    async def test_blank_query_is_rejected_without_request(self, places_client, mock_client):
        result = await places_client.lookup("   ")

        assert result.status == "error"
        mock_client.post.assert_not_called()

    async def test_aclose_closes_http_client(self, places_client, mock_client):
        await places_client.aclose()
        mock_client.aclose.assert_awaited_once()


def test_lookup_result_constructors():
    assert PlaceLookupResult.not_found("q").status == "not_found"
    failure = PlaceLookupResult.failure("q", "boom")
    assert failure.status == "error"
    assert failure.error == "boom"


def test_create_google_places_client_uses_settings():
    settings = ApiSettings(google_places_api_key="places-key", places_timeout_s=5.0)
    with patch("httpx.AsyncClient") as mock_httpx:
        client = create_google_places_client(settings)
    assert client.api_key == "places-key"
    timeout = mock_httpx.call_args.kwargs["timeout"]
    assert timeout.read == 5.0
