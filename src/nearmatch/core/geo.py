from __future__ import annotations
from dataclasses import dataclass
from math import asin, cos, radians, sin, sqrt

"""
Geospatial helpers.

Proximity matching only needs point-to-point distance, so we keep a tiny haversine
implementation here instead of pulling in a GIS dependency.
"""

EARTH_RADIUS_M = 6_371_000


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees."""

    lat: float
    lon: float


def distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute great-circle distance in meters between two lat/lon pairs."""
    phi1 = radians(lat1)
    phi2 = radians(lat2)

    # Differences are taken as absolute values so swapping the points yields
    # bit-identical results.
    dlat = radians(abs(lat2 - lat1))
    dlon = radians(abs(lon2 - lon1))

    h = sin(dlat / 2) ** 2 + cos(phi1) * cos(phi2) * sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_M * asin(sqrt(min(1.0, h)))


def haversine_m(a: GeoPoint, b: GeoPoint) -> float:
    """Distance in meters between two points."""
    return distance_m(a.lat, a.lon, b.lat, b.lon)
