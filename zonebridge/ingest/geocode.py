"""Place-name geocoding via the Nominatim API.

Searches are restricted to the serviced country.  Results are cached in
a module-level dict keyed by the normalised place name; one process
rarely looks up more than a handful of places.
"""

from __future__ import annotations

import logging
import re

import requests

from zonebridge.config import (
    NOMINATIM_COUNTRY_CODES,
    NOMINATIM_TIMEOUT_S,
    NOMINATIM_URL,
    NOMINATIM_USER_AGENT,
)
from zonebridge.index.geo import within_service_area
from zonebridge.models import Coordinate

logger = logging.getLogger(__name__)

# Simple in-memory cache: normalised place name -> Coordinate
_geocode_cache: dict[str, Coordinate] = {}

_COORD_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*,\s*(-?\d+(?:\.\d+)?)\s*$")


def parse_coordinate(text: str) -> Coordinate | None:
    """Parse a literal ``"lat,lon"`` string, or return None."""
    m = _COORD_RE.match(text)
    if not m:
        return None
    lat, lon = float(m.group(1)), float(m.group(2))
    if not (-90 <= lat <= 90 and -180 <= lon <= 180):
        return None
    return Coordinate(lat, lon)


def geocode(place: str) -> Coordinate:
    """Resolve *place* to a coordinate with Nominatim.

    Raises
    ------
    ValueError
        If Nominatim has no match for *place*, or the match lacks coordinates.
    RuntimeError
        If the request times out.
    requests.HTTPError
        On other non-2xx responses.
    """
    cache_key = " ".join(place.lower().split())
    if cache_key in _geocode_cache:
        logger.debug("Geocode cache hit for %r", cache_key)
        return _geocode_cache[cache_key]

    params = {
        "q": place,
        "countrycodes": NOMINATIM_COUNTRY_CODES,
        "bounded": 1,
        "format": "json",
        "limit": 1,
    }
    logger.info("Geocoding %r via Nominatim", place)
    try:
        response = requests.get(
            NOMINATIM_URL,
            params=params,
            headers={"User-Agent": NOMINATIM_USER_AGENT},
            timeout=NOMINATIM_TIMEOUT_S,
        )
    except requests.Timeout:
        raise RuntimeError(
            f"Geocoding request for {place!r} timed out after "
            f"{NOMINATIM_TIMEOUT_S} seconds."
        )
    response.raise_for_status()

    data = response.json()
    if not data:
        raise ValueError(f"No results for {place}")

    try:
        coord = Coordinate(float(data[0]["lat"]), float(data[0]["lon"]))
    except (KeyError, TypeError, ValueError) as e:
        raise ValueError(f"Geocoding result for {place!r} has no usable coordinates") from e
    logger.info("Geocoded %r -> %s", place, coord)
    _geocode_cache[cache_key] = coord
    return coord


def resolve_place(text: str) -> Coordinate:
    """Turn user input (literal coordinates or a place name) into a Coordinate.

    Raises
    ------
    ValueError
        If the place is unknown or lies outside the service area.
    """
    coord = parse_coordinate(text)
    if coord is None:
        coord = geocode(text)
    if not within_service_area(coord):
        raise ValueError(f"{text!r} ({coord}) is outside the service area")
    return coord
