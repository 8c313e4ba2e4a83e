import logging
from typing import List, Optional

from langchain_core.language_models.chat_models import BaseChatModel
from langchain_xai import ChatXAI

from itinerary_planner.core.assembler import ItineraryAssembler
from itinerary_planner.core.config import ApiSettings
from itinerary_planner.core.generator import ItineraryGenerator
from itinerary_planner.core.schemas import DailyOptionsRequest, Day, TripPlan
from itinerary_planner.services import GooglePlaces, create_google_places_client

logger = logging.getLogger(__name__)


REQUIRED_SETTINGS = [
    "xai_api_key",
    "google_places_api_key",
]


def _ensure_configuration(settings: ApiSettings) -> None:
    missing = [field for field in REQUIRED_SETTINGS if not getattr(settings, field)]
    if missing:
        joined = ", ".join(missing)
        raise RuntimeError(
            f"Missing required environment variables for itinerary planner: {joined}"
        )


def build_llm(settings: ApiSettings) -> BaseChatModel:
    """Create the chat model used for itinerary generation."""

    return ChatXAI(
        model=settings.llm_model,
        temperature=0,
        api_key=settings.ensure("xai_api_key"),
    )


class PlanningService:
    """Generate itineraries with the LLM and enrich them with Google Places.

    Attributes:
        settings: API configuration with external service credentials
        llm: Language model used for structured itinerary generation
        places_client: Google Places client shared by every enrichment pass
        generator: Prompts the LLM for trip plans and daily options
        assembler: Enriches generated trees in place
    """

    def __init__(
        self,
        settings: ApiSettings,
        *,
        llm: Optional[BaseChatModel] = None,
        places_client: Optional[GooglePlaces] = None,
    ) -> None:
        if llm is None or places_client is None:
            _ensure_configuration(settings)

        self.settings = settings
        self.llm = llm if llm is not None else build_llm(settings)
        self.places_client = (
            places_client if places_client is not None else create_google_places_client(settings)
        )
        self.generator = ItineraryGenerator(self.llm)
        self.assembler = ItineraryAssembler(self.places_client)

    def __repr__(self) -> str:
        llm_name = getattr(self.llm, "model_name", None) or getattr(self.llm, "model", None) or type(self.llm).__name__
        return (
            f"PlanningService(llm='{llm_name}', "
            f"places_client={type(self.places_client).__name__})"
        )

    async def close(self) -> None:
        await self.places_client.aclose()

    async def generate_trip_plan(self, prompt: str) -> Optional[TripPlan]:
        """Generate a trip plan and enrich its hotels and activities."""

        plan = await self.generator.generate_trip_plan(prompt)
        return await self.assembler.assemble(plan)

    async def generate_daily_options(self, request: DailyOptionsRequest) -> List[Day]:
        """Generate alternative plans for one day and enrich them.

        Returns an empty list when the model produced no options.
        """

        options_plan = await self.generator.generate_daily_options(request)
        if options_plan is None or options_plan.daily_options is None:
            logger.warning("Model returned no daily options for %s", request.location)
            return []

        days = await self.assembler.assemble_options(options_plan.daily_options, request.location)
        return days or []
