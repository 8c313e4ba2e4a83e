"""Structured itinerary generation through a LangChain chat model."""
from __future__ import annotations

import logging
from typing import Optional

from langchain_core.language_models.chat_models import BaseChatModel

from itinerary_planner.core.prompts import daily_options_prompt, trip_plan_prompt
from itinerary_planner.core.schemas import DailyOptionsPlan, DailyOptionsRequest, TripPlan

logger = logging.getLogger(__name__)


class ItineraryGenerator:
    """Ask the LLM for itineraries shaped like the project's schemas."""

    def __init__(self, llm: BaseChatModel) -> None:
        self.llm = llm
        self._trip_plan_llm = llm.with_structured_output(TripPlan)
        self._daily_options_llm = llm.with_structured_output(DailyOptionsPlan)

    async def generate_trip_plan(self, user_prompt: str) -> Optional[TripPlan]:
        """Generate a multi-day trip plan from a free-text request."""

        if not user_prompt or not user_prompt.strip():
            raise ValueError("Prompt must not be empty")

        prompt = trip_plan_prompt.format(user_prompt=user_prompt.strip())
        try:
            plan = await self._trip_plan_llm.ainvoke(prompt)
        except Exception as e:
            logger.error(f"Error generating trip plan: {e}")
            raise
        logger.info(
            "Generated trip plan for %s with %d days",
            getattr(plan, "location", None),
            len(plan.days or []) if plan is not None else 0,
        )
        return plan

    async def generate_daily_options(self, request: DailyOptionsRequest) -> Optional[DailyOptionsPlan]:
        """Generate alternative plans for one day of a trip."""

        prompt = daily_options_prompt.format(
            number_of_options=request.number_of_options,
            day_number=request.day_number,
            location=request.location,
            preferences=request.preferences or "none given",
        )
        try:
            return await self._daily_options_llm.ainvoke(prompt)
        except Exception as e:
            logger.error(f"Error generating daily options: {e}")
            raise
