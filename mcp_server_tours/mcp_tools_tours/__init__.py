"""mcp_tools_tours package

Purpose:
- Turn a set of places (POIs), a start location and a start date into a
  multi-day visiting itinerary with arrival times, transport legs and
  cost/time estimates.
- Expose those services via an MCP server (official python-sdk / FastMCP), so an LLM can call tools.

Structure:
- core/: schemas + planning constants
- services/: transport estimates, ward grouping, routing, day packing,
  itinerary assembly, catalog and tour generation
- utils/: pure helpers (geo math, fares, clock formatting)
- mcp/: FastMCP server + tool wiring
"""

from .core.schemas import (  # noqa: F401
    Coordinates,
    DayPlan,
    ItineraryStop,
    Place,
    TourEstimates,
    TransportLeg,
    UserTour,
)
