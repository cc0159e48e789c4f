"""Constants and configuration for the ZoneBridge transit router."""

from pathlib import Path

# ── Paths ──────────────────────────────────────────────────────────────
PROJECT_ROOT = Path(__file__).resolve().parent.parent
DATA_DIR = PROJECT_ROOT / "data"
CATALOG_PATH = DATA_DIR / "cached.json"

# ── Nominatim (geocoding) ──────────────────────────────────────────────
NOMINATIM_URL = "https://nominatim.openstreetmap.org/search"
NOMINATIM_COUNTRY_CODES = "MY"
NOMINATIM_USER_AGENT = "zonebridge/0.1 (transit route planner)"
NOMINATIM_TIMEOUT_S = 30

# ── Service area (lon/lat bounding box around Malaysia) ───────────────
SERVICE_AREA_BOUNDS = (99.6, 0.85, 119.3, 7.4)  # (min_lon, min_lat, max_lon, max_lat)

# ── Geometry ──────────────────────────────────────────────────────────
EARTH_RADIUS_M = 6_371_000

# ── Network document ──────────────────────────────────────────────────
# Adjacency keys reserved for the traveller's start and end points.
RESERVED_ORIGIN_ID = "-1"
RESERVED_DESTINATION_ID = "-2"

# ── Cost model ────────────────────────────────────────────────────────
RAPID_RAIL_OPERATOR = "Rapid KL Train"
RAPID_TRANSFER_FACTOR = 0.10   # transfers onto the rapid rail network
TRANSFER_FACTOR = 0.15         # transfers onto any other operator
MIN_FARE_DISTANCE_M = 300      # hops shorter than this are free
DISTANCE_FACTOR = 3
DISTANCE_SCALE_M = 200         # convexity of the long-hop penalty
ZONE_SURCHARGE = 3000          # flat penalty for crossing zones between stations
