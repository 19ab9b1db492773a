"""Planning constants.

Times are minutes after midnight, costs are integer currency units (yen for
the bundled Tokyo catalog).
"""

import os
from pathlib import Path

DAY_START_MINUTE = 9 * 60
LUNCH_START_MINUTE = 13 * 60
LUNCH_END_MINUTE = 14 * 60
MAX_MINUTES_PER_DAY = 8 * 60

DEFAULT_VISIT_MINUTES = 60
DEFAULT_ADMISSION_FEE = 0

EARTH_RADIUS_KM = 6371.0

# Bundled sample catalog; TOUR_CATALOG_PATH overrides it for the server.
BUNDLED_CATALOG_PATH = Path(__file__).resolve().parents[1] / "data" / "catalog.json"
DEFAULT_CATALOG_PATH = os.getenv("TOUR_CATALOG_PATH", str(BUNDLED_CATALOG_PATH))
