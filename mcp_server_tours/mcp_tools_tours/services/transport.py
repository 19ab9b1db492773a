from __future__ import annotations

from ..core.schemas import Coordinates, TransportLeg
from ..utils.geo import classify_mode, haversine_km, transport_cost, travel_time_minutes


def estimate_travel(origin: Coordinates, destination: Coordinates) -> TransportLeg:
    """Estimate mode, duration and fare for one hop.

    Mode is classified on the raw distance; only the reported `distance_km`
    is rounded. Every leg in the planner goes through this function.
    """
    d_km = haversine_km(origin.lat, origin.lng, destination.lat, destination.lng)
    mode = classify_mode(d_km)
    return TransportLeg(
        mode=mode,
        distance_km=round(d_km, 2),
        duration_min=travel_time_minutes(d_km, mode),
        cost=transport_cost(d_km, mode),
    )
