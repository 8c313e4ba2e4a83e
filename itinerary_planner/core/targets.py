"""Collect the place references of an itinerary that need enrichment."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Literal, Optional, Sequence, Set, Union

from itinerary_planner.core.schemas import Activity, Day, Hotel, PlaceDetails, TripPlan

logger = logging.getLogger(__name__)

SlotKind = Literal["hotel", "activity"]


@dataclass(frozen=True, slots=True)
class SlotKey:
    """Stable address of one enrichment slot inside an itinerary."""

    day_index: int
    kind: SlotKind
    activity_index: Optional[int] = None

    def __str__(self) -> str:
        if self.kind == "hotel":
            return f"day[{self.day_index}].hotel"
        return f"day[{self.day_index}].activities[{self.activity_index}]"


@dataclass(frozen=True, slots=True, eq=False)
class EnrichmentTarget:
    """A pending (query, slot) pair for one hotel or activity."""

    key: SlotKey
    query: str
    owner: Union[Hotel, Activity]

    def write(self, details: PlaceDetails) -> None:
        """Store ``details`` in the slot owned by this target."""

        self.owner.place_details = details


def _is_eligible(name: Optional[str]) -> bool:
    return bool(name and name.strip())


def build_query(name: str, location_hint: Optional[str]) -> str:
    """Return the lookup query for ``name``, qualified by the location hint."""

    if not location_hint or not location_hint.strip():
        return name
    return f"{name}, {location_hint}"


def collect_targets(
    days: Optional[Sequence[Day]],
    location_hint: Optional[str],
) -> List[EnrichmentTarget]:
    """Walk ``days`` and return one target per enrichable hotel or activity.

    Days are visited in order; within a day the hotel comes first, then the
    activities in list order. Entries without a usable name are skipped. An
    entity instance reachable twice in the tree is only targeted once, so no
    two targets ever write to the same slot.
    """

    targets: List[EnrichmentTarget] = []
    if not days:
        return targets

    seen: Set[int] = set()
    skipped = 0

    def add(key: SlotKey, name: Optional[str], owner: Union[Hotel, Activity]) -> None:
        nonlocal skipped
        if not _is_eligible(name):
            skipped += 1
            logger.debug("Skipping %s: blank name", key)
            return
        if id(owner) in seen:
            logger.warning("Skipping %s: entity already targeted elsewhere in the plan", key)
            return
        seen.add(id(owner))
        targets.append(EnrichmentTarget(key=key, query=build_query(name, location_hint), owner=owner))

    for day_index, day in enumerate(days):
        if day is None:
            continue

        if day.hotel is not None:
            add(SlotKey(day_index, "hotel"), day.hotel.hotel_name, day.hotel)

        for activity_index, activity in enumerate(day.activities or []):
            if activity is None:
                continue
            add(SlotKey(day_index, "activity", activity_index), activity.name, activity)

    if skipped:
        logger.warning("Skipped %d place references without a name", skipped)
    return targets


def collect(plan: TripPlan) -> List[EnrichmentTarget]:
    """Collect the enrichment targets of a whole trip plan."""

    return collect_targets(plan.days, plan.location)
