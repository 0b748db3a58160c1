"""Routing orchestration service."""

from __future__ import annotations

import logging
from typing import Sequence

from ...config import settings
from ...models.domain import Location
from ..geospatial import DISTANCE_UNITS, bearing_degrees, get_distance_function
from ..locations.store import LocationStore
from .models import RouteLeg, RouteResult
from .solver import compute_route, location_distance, tour_distance


def _build_legs(route: Sequence[Location], distance) -> list[RouteLeg]:
    if len(route) < 2:
        return []
    legs: list[RouteLeg] = []
    # The final pair closes the tour back to the first stop
    pairs = list(zip(route, [*route[1:], route[0]]))
    for sequence, (origin, target) in enumerate(pairs, start=1):
        legs.append(
            RouteLeg(
                sequence=sequence,
                from_id=origin.id,
                to_id=target.id,
                distance=location_distance(origin, target, distance),
                bearing_degrees=bearing_degrees(
                    origin.latitude, origin.longitude, target.latitude, target.longitude
                ),
            )
        )
    return legs


def plan_route(locations: Sequence[Location], metric: str | None = None) -> RouteResult:
    """Run the tour heuristic over ``locations`` and describe each leg."""

    metric = metric or settings.distance_metric
    distance = get_distance_function(metric)

    stops = compute_route(locations, distance)
    legs = _build_legs(stops, distance)
    total = tour_distance(stops, distance)

    logging.info(
        f"Computed route over {len(stops)} locations using {metric} distance: "
        f"total={total:.3f} {DISTANCE_UNITS[metric]}"
    )
    return RouteResult(
        metric=metric,
        distance_unit=DISTANCE_UNITS[metric],
        stops=stops,
        legs=legs,
        total_distance=total,
    )


def build_route(store: LocationStore, metric: str | None = None) -> RouteResult:
    """Compute the route over the store's current snapshot."""

    return plan_route(store.list(), metric=metric)
