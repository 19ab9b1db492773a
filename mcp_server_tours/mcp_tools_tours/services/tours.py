from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Iterable, Optional, Union

from ..core.schemas import Coordinates, ExpandedTour, UserTour
from .catalog import PlaceCatalog
from .itinerary import build_itinerary, calculate_estimates


def parse_start_date(value: Union[date, str]) -> date:
    """Accept a date or an ISO 'YYYY-MM-DD' string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(value)
    except (TypeError, ValueError) as e:
        raise ValueError(f"start_date must be YYYY-MM-DD, got {value!r}") from e


def generate_tour(
    catalog: PlaceCatalog,
    user_id: str,
    title: str,
    place_ids: Iterable[str],
    user_location: Coordinates,
    start_date: Union[date, str],
    now: Optional[datetime] = None,
) -> UserTour:
    """Plan a custom tour from selected place IDs.

    The returned record is not stored anywhere; persisting it is up to the
    caller.
    """
    start = parse_start_date(start_date)
    selected = catalog.resolve(place_ids)
    if not selected:
        raise ValueError("No valid places selected")

    days = build_itinerary(selected, user_location, start)
    estimates = calculate_estimates(days)
    now = now or datetime.now(timezone.utc)

    return UserTour(
        id=f"user-{int(now.timestamp() * 1000)}",
        user_id=user_id,
        title=title,
        days=estimates.total_days,
        places=estimates.total_places,
        estimated_cost=estimates.total_cost,
        total_hours=estimates.total_hours,
        description=f"Custom tour with {estimates.total_places} places over {estimates.total_days} days",
        highlights=[p.name for p in selected[:5]],
        detailed_days=days,
        created_at=now.isoformat(),
    )


def expand_template_tour(
    catalog: PlaceCatalog,
    template_id: str,
    user_location: Coordinates,
    start_date: Union[date, str],
) -> ExpandedTour:
    """Compute the itinerary of a curated template tour."""
    template = catalog.get_template(template_id)
    if template is None:
        raise ValueError("Template tour not found")

    start = parse_start_date(start_date)
    days = build_itinerary(catalog.resolve(template.place_ids), user_location, start)
    return ExpandedTour(template=template, detailed_days=days, estimates=calculate_estimates(days))
