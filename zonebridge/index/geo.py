"""Geometry helpers: great-circle distance and service-area checks."""

from __future__ import annotations

import math

from shapely.geometry import Point, box

from zonebridge.config import EARTH_RADIUS_M, SERVICE_AREA_BOUNDS
from zonebridge.models import Coordinate

SERVICE_AREA = box(*SERVICE_AREA_BOUNDS)


def distance_meters(a: Coordinate, b: Coordinate) -> int:
    """Return the great-circle distance between two points in whole **meters**.

    Uses the Haversine formula on a sphere of radius ``EARTH_RADIUS_M``.
    """
    phi1 = math.radians(a.lat)
    phi2 = math.radians(b.lat)
    d_phi = math.radians(b.lat - a.lat)
    d_lambda = math.radians(b.lon - a.lon)

    h = (
        math.sin(d_phi / 2) ** 2
        + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    )
    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))

    return round(EARTH_RADIUS_M * c)


def within_service_area(coord: Coordinate) -> bool:
    """Return True if *coord* falls inside the serviced country's bounds."""
    return SERVICE_AREA.covers(Point(coord.lon, coord.lat))
