"""Concurrent place enrichment for itinerary targets.

Every target gets its own lookup task; all tasks are started together and
joined with a single :func:`asyncio.gather`. A failed or empty lookup only
affects its own target. Results are written back after the join, so each
slot is touched by exactly one writer and no lock is required.
"""
from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import Protocol, Sequence

from itinerary_planner.core.targets import EnrichmentTarget
from itinerary_planner.services.google_places.schemas import PlaceLookupResult

logger = logging.getLogger(__name__)


class PlaceLookup(Protocol):
    """Anything that can resolve a free-text query to a lookup result."""

    async def lookup(self, query: str) -> PlaceLookupResult: ...


@dataclass(slots=True)
class EnrichmentSummary:
    """Per-pass counters, used for logging only."""

    succeeded: int = 0
    not_found: int = 0
    failed: int = 0

    @property
    def total(self) -> int:
        """Number of targets that reached a terminal state."""
        return self.succeeded + self.not_found + self.failed


class PlaceEnricher:
    """Resolve enrichment targets through a place lookup client."""

    def __init__(self, client: PlaceLookup) -> None:
        self.client = client

    async def enrich(self, targets: Sequence[EnrichmentTarget]) -> EnrichmentSummary:
        """Look up every target concurrently and fill the resolved slots.

        Waits for all lookups to finish. Never raises for a failed lookup;
        the returned summary counts the outcomes.
        """

        if not targets:
            return EnrichmentSummary()

        logger.info("Starting enrichment for %d items", len(targets))
        results = await asyncio.gather(*(self._resolve(target) for target in targets))
        summary = self.apply(targets, results)
        logger.info(
            "Enrichment complete: %d succeeded, %d not found, %d failed",
            summary.succeeded,
            summary.not_found,
            summary.failed,
        )
        return summary

    async def _resolve(self, target: EnrichmentTarget) -> PlaceLookupResult:
        try:
            return await self.client.lookup(target.query)
        except Exception as exc:
            logger.exception("Lookup for %s [%s] raised unexpectedly", target.key, target.query)
            return PlaceLookupResult.failure(target.query, f"{type(exc).__name__}: {exc}")

    @staticmethod
    def apply(
        targets: Sequence[EnrichmentTarget],
        results: Sequence[PlaceLookupResult],
    ) -> EnrichmentSummary:
        """Write successful results into their targets' slots.

        ``results[i]`` belongs to ``targets[i]``. Slots of targets that were
        not found or failed are left as they are.
        """

        if len(targets) != len(results):
            raise ValueError(
                f"Got {len(results)} lookup results for {len(targets)} targets"
            )

        summary = EnrichmentSummary()
        for target, result in zip(targets, results):
            if result.status == "found" and result.details is not None:
                target.write(result.details)
                summary.succeeded += 1
            elif result.status == "not_found":
                logger.warning("No place details found for %s: %s", target.key, target.query)
                summary.not_found += 1
            else:
                logger.error(
                    "Place lookup failed for %s [%s]: %s", target.key, target.query, result.error
                )
                summary.failed += 1
        return summary
