from __future__ import annotations

from typing import Dict, Iterable, List

from ..core.schemas import Place


def group_by_ward(places: Iterable[Place]) -> Dict[str, List[Place]]:
    """Bucket places by ward.

    Wards keep the order of their first occurrence, places keep input order
    within each ward.
    """
    groups: Dict[str, List[Place]] = {}
    for place in places:
        groups.setdefault(place.ward, []).append(place)
    return groups
