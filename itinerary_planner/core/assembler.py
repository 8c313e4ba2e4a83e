"""Tie generated itineraries to place enrichment."""
from __future__ import annotations

import logging
from typing import List, Optional

from itinerary_planner.core.enrichment import EnrichmentSummary, PlaceEnricher, PlaceLookup
from itinerary_planner.core.schemas import Day, TripPlan
from itinerary_planner.core.targets import collect_targets

logger = logging.getLogger(__name__)


class ItineraryAssembler:
    """Enrich a generated itinerary in place and hand it back.

    The assembler never changes the shape of the tree it receives: it only
    fills ``place_details`` of hotels and activities whose lookup succeeded.
    """

    def __init__(self, client: PlaceLookup) -> None:
        self.enricher = PlaceEnricher(client)

    async def assemble(self, plan: Optional[TripPlan]) -> Optional[TripPlan]:
        """Enrich every hotel and activity of ``plan``.

        A missing plan or day list is returned unchanged, since there is
        nothing to enrich.
        """

        if plan is None or plan.days is None:
            logger.warning("Generated plan has no days; skipping enrichment")
            return plan

        await self._enrich_days(plan.days, plan.location)
        return plan

    async def assemble_options(self, days: Optional[List[Day]], location: str) -> Optional[List[Day]]:
        """Enrich a list of alternative days for ``location``."""

        if days is None:
            logger.warning("No daily options to enrich")
            return days

        await self._enrich_days(days, location)
        return days

    async def _enrich_days(self, days: List[Day], location_hint: Optional[str]) -> EnrichmentSummary:
        targets = collect_targets(days, location_hint)
        if not targets:
            logger.info("No place references to enrich")
        return await self.enricher.enrich(targets)
