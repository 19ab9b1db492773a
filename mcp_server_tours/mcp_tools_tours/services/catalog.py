from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from ..core.schemas import Place, TemplateTour


logger = logging.getLogger(__name__)


@dataclass
class PlaceCatalog:
    """Read-only, in-memory snapshot of places and template tours.

    Expected file layout:
        {"places": [<Place>, ...], "templates": [<TemplateTour>, ...]}
    """
    places: List[Place] = field(default_factory=list)
    template_tours: List[TemplateTour] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._by_id: Dict[str, Place] = {}
        for p in self.places:
            self._by_id.setdefault(p.id, p)

    def get_all(self) -> List[Place]:
        return list(self.places)

    def get_by_id(self, place_id: str) -> Optional[Place]:
        return self._by_id.get(place_id)

    def get_by_ward(self, ward: str) -> List[Place]:
        return [p for p in self.places if p.ward == ward]

    def templates(self) -> List[TemplateTour]:
        return list(self.template_tours)

    def get_template(self, template_id: str) -> Optional[TemplateTour]:
        for t in self.template_tours:
            if t.id == template_id:
                return t
        return None

    def resolve(self, place_ids: Iterable[str]) -> List[Place]:
        """Look up IDs in request order; unknown IDs are dropped."""
        resolved: List[Place] = []
        for pid in place_ids:
            place = self._by_id.get(pid)
            if place is None:
                logger.warning("Dropping unknown place id %r", pid)
                continue
            resolved.append(place)
        return resolved


def load_catalog(path: str) -> PlaceCatalog:
    """Load and validate a catalog JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        payload = json.load(f)

    places = [Place.model_validate(rec) for rec in payload.get("places") or []]
    templates = [TemplateTour.model_validate(rec) for rec in payload.get("templates") or []]
    logger.info("Loaded catalog %s: %d places, %d templates", path, len(places), len(templates))
    return PlaceCatalog(places=places, template_tours=templates)
