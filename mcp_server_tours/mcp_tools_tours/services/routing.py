from __future__ import annotations

from typing import List, Optional, Sequence

from ..core.schemas import Coordinates, Place
from .transport import estimate_travel


def route_group(places: Sequence[Place], anchor: Optional[Coordinates] = None) -> List[Place]:
    """Order places with a greedy nearest-neighbour walk (open path).

    Starts at the place closest to `anchor`, or at the first place when no
    anchor is given. Distances are the rounded `distance_km` of
    `estimate_travel`; ties go to the earlier place in input order.

    This is a heuristic: the resulting path is not guaranteed to be the
    shortest one.
    """
    if len(places) <= 1:
        return list(places)

    if anchor is not None:
        start = _closest_index(anchor, places, range(len(places)))
    else:
        start = 0

    route = [places[start]]
    remaining = [i for i in range(len(places)) if i != start]
    current = places[start].coordinates

    while remaining:
        nearest = _closest_index(current, places, remaining)
        remaining.remove(nearest)
        route.append(places[nearest])
        current = places[nearest].coordinates

    return route


def _closest_index(origin: Coordinates, places: Sequence[Place], candidates) -> int:
    best_index = -1
    best_km = float("inf")
    for i in candidates:
        d_km = estimate_travel(origin, places[i].coordinates).distance_km
        if d_km < best_km:
            best_km = d_km
            best_index = i
    return best_index
