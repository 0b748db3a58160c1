"""Nearest-neighbor tour construction over saved locations.

The tour starts at the first location in input order and keeps walking to the
closest location not yet visited. Equal distances are resolved by the lowest
location id so the same input always produces the same order. The result is
a closed tour: the walk implicitly returns to its first stop, which is not
repeated in the returned sequence.
"""

from __future__ import annotations

from typing import Sequence

from ...models.domain import Location
from ..geospatial import DistanceFunction, haversine_km


def location_distance(a: Location, b: Location, distance: DistanceFunction = haversine_km) -> float:
    return distance(a.latitude, a.longitude, b.latitude, b.longitude)


def compute_route(
    points: Sequence[Location],
    distance: DistanceFunction = haversine_km,
) -> list[Location]:
    """Order ``points`` into a low-cost closed tour.

    Args:
        points: Locations to visit, already validated by the store.
        distance: Coordinate distance function used for every "nearest" comparison.

    Returns:
        The same Location objects, reordered. Empty, single and two-point
        inputs come back in input order.
    """
    if len(points) <= 2:
        return list(points)

    current = points[0]
    route = [current]
    unvisited = list(points[1:])

    while unvisited:
        nearest_idx = min(
            range(len(unvisited)),
            key=lambda idx: (location_distance(current, unvisited[idx], distance), unvisited[idx].id),
        )
        current = unvisited.pop(nearest_idx)
        route.append(current)

    return route


def tour_distance(route: Sequence[Location], distance: DistanceFunction = haversine_km) -> float:
    """Total length of the closed tour, including the leg back to the start."""
    if len(route) < 2:
        return 0.0
    total = sum(location_distance(a, b, distance) for a, b in zip(route, route[1:]))
    return total + location_distance(route[-1], route[0], distance)
