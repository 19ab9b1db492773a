from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .config import DEFAULT_ADMISSION_FEE, DEFAULT_VISIT_MINUTES


TransportMode = Literal["walk", "metro", "bus", "taxi"]


class Coordinates(BaseModel):
    """Geographic coordinates in WGS84."""
    model_config = ConfigDict(frozen=True)

    lat: float
    lng: float


class Place(BaseModel):
    """A visitable place from the catalog.

    The planner assumes a fully resolved record (id + coordinates). Missing
    optional fields are resolved through `visit_minutes` / `fee` only.
    """
    model_config = ConfigDict(frozen=True)

    id: str
    name: str = ""
    category: str = ""
    ward: str
    coordinates: Coordinates
    admission_fee: Optional[int] = Field(default=None, ge=0)
    avg_visit_duration: Optional[int] = Field(default=None, ge=0, description="Minutes")

    @property
    def visit_minutes(self) -> int:
        # 0 counts as "unknown", same as an absent value
        return self.avg_visit_duration or DEFAULT_VISIT_MINUTES

    @property
    def fee(self) -> int:
        return self.admission_fee or DEFAULT_ADMISSION_FEE


class TransportLeg(BaseModel):
    """Estimated hop between two coordinates (straight-line heuristic)."""
    mode: TransportMode
    distance_km: float = Field(..., ge=0, description="Rounded to 2 decimals")
    duration_min: int = Field(..., ge=0)
    cost: int = Field(..., ge=0)


class ItineraryStop(BaseModel):
    place_id: str
    planned_time: str = Field(..., description="Arrival time, HH:MM (24h)")
    visit_duration: int
    transport_mode: TransportMode
    transport_duration: int
    transport_cost: int


class DayPlan(BaseModel):
    day_number: int
    date: str = Field(..., description="YYYY-MM-DD")
    places: List[ItineraryStop] = Field(default_factory=list)
    total_cost: int = 0
    total_duration: int = Field(0, description="Minutes elapsed since 09:00, lunch gap included")
    notes: str = ""


class TourEstimates(BaseModel):
    total_cost: int = 0
    total_hours: int = 0
    total_places: int = 0
    total_days: int = 0


class ItineraryResult(BaseModel):
    """Itinerary plus aggregates, as returned by the planning tool."""
    days: List[DayPlan] = Field(default_factory=list)
    estimates: TourEstimates = Field(default_factory=TourEstimates)


class TemplateTour(BaseModel):
    """Curated tour shipped with the catalog."""
    id: str
    title: str
    description: str = ""
    highlights: List[str] = Field(default_factory=list)
    place_ids: List[str] = Field(default_factory=list)


class UserTour(BaseModel):
    """Generated tour record, ready for an external tour store."""
    id: str
    user_id: str
    title: str
    days: int
    places: int
    estimated_cost: int
    total_hours: int
    description: str
    highlights: List[str] = Field(default_factory=list)
    detailed_days: List[DayPlan] = Field(default_factory=list)
    created_at: str


class ExpandedTour(BaseModel):
    """A template tour with an itinerary computed for a given start."""
    template: TemplateTour
    detailed_days: List[DayPlan] = Field(default_factory=list)
    estimates: TourEstimates = Field(default_factory=TourEstimates)
