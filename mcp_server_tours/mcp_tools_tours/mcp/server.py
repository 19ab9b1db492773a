"""MCP server (official python-sdk) exposing mcp_tools_tours tools.

This uses FastMCP from the official MCP Python SDK:
- Tools are ordinary Python functions decorated with @mcp.tool().
- Schemas are derived automatically from type hints / Pydantic models.
- Transport (stdio, SSE, streamable HTTP) is handled by the SDK/CLI.
"""

from __future__ import annotations

from typing import List, Optional

import sys
import argparse
import logging

import uvicorn
from mcp.server.fastmcp import FastMCP

from ..core.config import DEFAULT_CATALOG_PATH
from ..core.schemas import (
    Coordinates,
    ExpandedTour,
    ItineraryResult,
    Place,
    TemplateTour,
    TransportLeg,
    UserTour,
)
from ..services.catalog import PlaceCatalog, load_catalog
from ..services.itinerary import build_itinerary, calculate_estimates
from ..services.tours import expand_template_tour as _expand_template_tour
from ..services.tours import generate_tour as _generate_tour
from ..services.tours import parse_start_date
from ..services.transport import estimate_travel


# ---------------------------------------------------------------------------
# MCP-Server & Tools
# ---------------------------------------------------------------------------

mcp = FastMCP(name="tour-planner", stateless_http=False)

logger = logging.getLogger("tour-planner-mcp")
logging.basicConfig(stream=sys.stderr, level=logging.INFO)

_catalog_path: str = DEFAULT_CATALOG_PATH
_catalog: Optional[PlaceCatalog] = None


def get_catalog() -> PlaceCatalog:
    """Catalog snapshot, loaded on first use."""
    global _catalog
    if _catalog is None:
        _catalog = load_catalog(_catalog_path)
    return _catalog


def set_catalog(catalog: Optional[PlaceCatalog], path: Optional[str] = None) -> None:
    """Swap the catalog (or its path, for lazy loading)."""
    global _catalog, _catalog_path
    _catalog = catalog
    if path is not None:
        _catalog_path = path


@mcp.tool()
def estimate_leg(from_lat: float, from_lng: float, to_lat: float, to_lng: float) -> TransportLeg:
    """Estimate transport mode, duration (min) and cost between two coordinates."""
    return estimate_travel(Coordinates(lat=from_lat, lng=from_lng), Coordinates(lat=to_lat, lng=to_lng))


@mcp.tool()
def list_places(ward: Optional[str] = None) -> List[Place]:
    """List catalog places, optionally only those in one ward."""
    catalog = get_catalog()
    if ward:
        return catalog.get_by_ward(ward)
    return catalog.get_all()


@mcp.tool()
def list_template_tours() -> List[TemplateTour]:
    """List the curated template tours."""
    return get_catalog().templates()


@mcp.tool()
def plan_itinerary(place_ids: List[str], lat: float, lng: float, start_date: str) -> ItineraryResult:
    """Plan a multi-day itinerary for the given place IDs starting at (lat, lng) on start_date (YYYY-MM-DD).

    Unknown place IDs are ignored. Nothing is stored.
    """
    start = parse_start_date(start_date)
    places = get_catalog().resolve(place_ids)
    days = build_itinerary(places, Coordinates(lat=lat, lng=lng), start)
    return ItineraryResult(days=days, estimates=calculate_estimates(days))


@mcp.tool()
def generate_tour(
    user_id: str,
    title: str,
    place_ids: List[str],
    lat: float,
    lng: float,
    start_date: str,
) -> UserTour:
    """Generate a named custom tour record (itinerary + estimates) for a user."""
    tour = _generate_tour(
        get_catalog(),
        user_id=user_id,
        title=title,
        place_ids=place_ids,
        user_location=Coordinates(lat=lat, lng=lng),
        start_date=start_date,
    )
    logger.info("Generated tour %s for user %s: %d days, %d places", tour.id, user_id, tour.days, tour.places)
    return tour


@mcp.tool()
def expand_template_tour(template_id: str, lat: float, lng: float, start_date: str) -> ExpandedTour:
    """Compute the day-by-day itinerary of a template tour."""
    return _expand_template_tour(
        get_catalog(),
        template_id=template_id,
        user_location=Coordinates(lat=lat, lng=lng),
        start_date=start_date,
    )


# ---------------------------------------------------------------------------
# ASGI-App für streamable HTTP & Uvicorn-Entry-Point
# ---------------------------------------------------------------------------

# ASGI-App exportieren; der MCP-Endpunkt ist /mcp
starlette_app = mcp.streamable_http_app()  # path="/mcp"


def main() -> None:
    """Start the tour-planner MCP server via Uvicorn (streamable HTTP)."""
    parser = argparse.ArgumentParser()
    parser.add_argument("--host", default="127.0.0.1")
    parser.add_argument("--port", type=int, default=8765)
    parser.add_argument("--catalog", default=DEFAULT_CATALOG_PATH, help="Path to the places catalog JSON")
    args = parser.parse_args()

    set_catalog(load_catalog(args.catalog), path=args.catalog)

    logger.info(
        "Starting tour-planner MCP server (streamable-http) on http://%s:%d/mcp …",
        args.host,
        args.port,
    )

    uvicorn.run(
        starlette_app,
        host=args.host,
        port=args.port,
        reload=False,
        loop="asyncio",
    )


if __name__ == "__main__":
    main()
