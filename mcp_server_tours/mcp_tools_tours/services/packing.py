from __future__ import annotations

from typing import Dict, List, Sequence

from ..core.config import MAX_MINUTES_PER_DAY
from ..core.schemas import Place


def total_visit_minutes(places: Sequence[Place]) -> int:
    return sum(p.visit_minutes for p in places)


def pack_into_days(
    ward_groups: Dict[str, List[Place]],
    max_minutes_per_day: int = MAX_MINUTES_PER_DAY,
) -> List[List[Place]]:
    """Distribute ward groups over days, largest groups first.

    Groups are never split. A group is merged into the current (last) day
    unless that would push the day over `max_minutes_per_day`, in which case
    it opens a new day. A single group above the cap therefore gets an
    oversized day of its own.

    Ties in group size keep the ward iteration order (stable sort).
    """
    ordered = sorted(
        ward_groups.values(),
        key=total_visit_minutes,
        reverse=True,
    )

    days: List[List[Place]] = []
    day_minutes: List[int] = []
    for group in ordered:
        group_minutes = total_visit_minutes(group)
        if not days or day_minutes[-1] + group_minutes > max_minutes_per_day:
            days.append(list(group))
            day_minutes.append(group_minutes)
        else:
            days[-1].extend(group)
            day_minutes[-1] += group_minutes
    return days
