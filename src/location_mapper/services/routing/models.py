"""Routing domain models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List

from ...models.domain import Location


@dataclass(slots=True)
class RouteLeg:
    sequence: int
    from_id: int
    to_id: int
    distance: float
    bearing_degrees: float


@dataclass(slots=True)
class RouteResult:
    metric: str
    distance_unit: str
    stops: List[Location]
    legs: List[RouteLeg] = field(default_factory=list)
    total_distance: float = 0.0

    def closed_path(self) -> list[list[float]]:
        """Stop coordinates with the first stop appended, for drawing a closed polyline."""
        if not self.stops:
            return []
        path = [[stop.latitude, stop.longitude] for stop in self.stops]
        path.append(path[0][:])
        return path
