from .transport import estimate_travel  # noqa: F401
from .grouping import group_by_ward  # noqa: F401
from .routing import route_group  # noqa: F401
from .packing import pack_into_days  # noqa: F401
from .itinerary import build_itinerary, calculate_estimates  # noqa: F401
from .catalog import PlaceCatalog, load_catalog  # noqa: F401
from .tours import expand_template_tour, generate_tour  # noqa: F401
