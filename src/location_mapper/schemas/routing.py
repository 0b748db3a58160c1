"""Routing response schemas."""

from __future__ import annotations

from typing import List, Literal

from pydantic import BaseModel

from .locations import LocationModel


class RouteLegModel(BaseModel):
    sequence: int
    from_id: int
    to_id: int
    distance: float
    bearing_degrees: float


class RouteSummaryResponse(BaseModel):
    metric: Literal["haversine", "planar"]
    distance_unit: str
    total_distance: float
    stop_count: int
    stops: List[LocationModel]
    legs: List[RouteLegModel]
    closed_path: List[List[float]]
