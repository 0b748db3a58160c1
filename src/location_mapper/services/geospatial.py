"""Geospatial helper functions."""

from __future__ import annotations

import math
from typing import Callable

from shapely.geometry import Point

EARTH_RADIUS_KM = 6371.0

DistanceFunction = Callable[[float, float, float, float], float]


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def planar_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Euclidean distance in degrees, treating (lon, lat) as a flat plane."""

    return Point(lon1, lat1).distance(Point(lon2, lat2))


def bearing_degrees(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Calculate the initial bearing from (lat1, lon1) to (lat2, lon2)."""

    phi1 = math.radians(lat1)
    phi2 = math.radians(lat2)
    delta_lambda = math.radians(lon2 - lon1)
    y = math.sin(delta_lambda) * math.cos(phi2)
    x = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(delta_lambda)
    bearing = math.degrees(math.atan2(y, x))
    return (bearing + 360) % 360


DISTANCE_FUNCTIONS: dict[str, DistanceFunction] = {
    "haversine": haversine_km,
    "planar": planar_distance,
}

DISTANCE_UNITS: dict[str, str] = {
    "haversine": "km",
    "planar": "deg",
}


def get_distance_function(metric: str) -> DistanceFunction:
    try:
        return DISTANCE_FUNCTIONS[metric]
    except KeyError:
        raise ValueError(
            f"Unknown distance metric '{metric}'. Expected one of: {', '.join(sorted(DISTANCE_FUNCTIONS))}"
        ) from None
