"""Itinerary assembly.

Pipeline: group by ward -> pack wards into days -> route each day ->
walk the route assigning arrival times, fares and admission fees.

Preconditions: every Place is fully resolved (id and coordinates present).
Unknown place IDs must be dropped by the caller (see `PlaceCatalog.resolve`).
"""

from __future__ import annotations

import logging
import math
from datetime import date, timedelta
from typing import List, Sequence

from ..core.config import (
    DAY_START_MINUTE,
    LUNCH_END_MINUTE,
    LUNCH_START_MINUTE,
    MAX_MINUTES_PER_DAY,
)
from ..core.schemas import Coordinates, DayPlan, ItineraryStop, Place, TourEstimates
from ..utils.geo import format_clock
from .grouping import group_by_ward
from .packing import pack_into_days
from .routing import route_group
from .transport import estimate_travel


logger = logging.getLogger(__name__)


def build_itinerary(
    places: Sequence[Place],
    user_location: Coordinates,
    start_date: date,
    max_minutes_per_day: int = MAX_MINUTES_PER_DAY,
) -> List[DayPlan]:
    """Build the day-by-day plan for `places`.

    Returns an empty list for an empty input.
    """
    if not places:
        return []

    buckets = pack_into_days(group_by_ward(places), max_minutes_per_day=max_minutes_per_day)

    days: List[DayPlan] = []
    for day_index, bucket in enumerate(buckets):
        anchor = user_location if day_index == 0 else None
        route = route_group(bucket, anchor=anchor)
        days.append(_plan_day(day_index, route, user_location, start_date))
    return days


def _plan_day(
    day_index: int,
    route: List[Place],
    user_location: Coordinates,
    start_date: date,
) -> DayPlan:
    current = DAY_START_MINUTE
    total_cost = 0
    stops: List[ItineraryStop] = []
    last = len(route) - 1

    for index, place in enumerate(route):
        if index == 0:
            # Later days start at their first stop (zero-length leg).
            origin = user_location if day_index == 0 else place.coordinates
        else:
            origin = route[index - 1].coordinates

        leg = estimate_travel(origin, place.coordinates)
        current += leg.duration_min
        total_cost += leg.cost + place.fee

        stops.append(
            ItineraryStop(
                place_id=place.id,
                planned_time=format_clock(current),
                visit_duration=place.visit_minutes,
                transport_mode=leg.mode,
                transport_duration=leg.duration_min,
                transport_cost=leg.cost,
            )
        )

        current += place.visit_minutes
        if index < last and LUNCH_START_MINUTE < current < LUNCH_END_MINUTE:
            current = LUNCH_END_MINUTE

    wards = list(dict.fromkeys(p.ward for p in route))
    day = DayPlan(
        day_number=day_index + 1,
        date=(start_date + timedelta(days=day_index)).isoformat(),
        places=stops,
        total_cost=total_cost,
        total_duration=current - DAY_START_MINUTE,
        notes=", ".join(wards),
    )
    logger.debug(
        "day %d: %d stops, %d min, cost %d (%s)",
        day.day_number,
        len(stops),
        day.total_duration,
        day.total_cost,
        day.notes,
    )
    return day


def calculate_estimates(days: Sequence[DayPlan]) -> TourEstimates:
    """Aggregate cost, hours (half rounds up), place and day counts."""
    total_minutes = sum(d.total_duration for d in days)
    return TourEstimates(
        total_cost=sum(d.total_cost for d in days),
        total_hours=int(math.floor(total_minutes / 60 + 0.5)),
        total_places=sum(len(d.places) for d in days),
        total_days=len(days),
    )
