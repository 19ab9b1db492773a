from __future__ import annotations

import math

from ..core.config import EARTH_RADIUS_KM


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Great-circle distance (Haversine) in kilometers."""
    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    dphi = math.radians(lat2 - lat1)
    dlambda = math.radians(lon2 - lon1)

    a = math.sin(dphi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(dlambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def classify_mode(distance_km: float) -> str:
    """Pick a transport mode by straight-line distance (upper bounds exclusive)."""
    if distance_km < 0.8:
        return "walk"
    if distance_km < 15:
        return "metro"
    if distance_km < 30:
        return "bus"
    return "taxi"


def travel_time_minutes(distance_km: float, mode: str) -> int:
    """Travel time heuristic without routing APIs, rounded up to whole minutes."""
    if mode == "walk":
        minutes = (distance_km / 5.0) * 60.0
    elif mode == "metro":
        minutes = distance_km * 3 + 10
    elif mode == "bus":
        minutes = distance_km * 4 + 15
    elif mode == "taxi":
        minutes = distance_km * 2.5
    else:
        raise ValueError(f"Unknown transport mode: {mode!r}")
    return math.ceil(minutes)


def transport_cost(distance_km: float, mode: str) -> int:
    """Fare estimate: walking is free, metro uses flat fare bands."""
    if mode == "walk":
        return 0
    if mode == "metro":
        if distance_km < 3:
            return 170
        if distance_km < 7:
            return 200
        if distance_km < 12:
            return 240
        return 280
    if mode == "bus":
        return math.ceil(distance_km * 50)
    if mode == "taxi":
        return math.ceil(distance_km * 400)
    raise ValueError(f"Unknown transport mode: {mode!r}")


def format_clock(minutes: int) -> str:
    """Minutes after midnight -> 'HH:MM'. Values past 24h are not wrapped."""
    return f"{minutes // 60:02d}:{minutes % 60:02d}"
