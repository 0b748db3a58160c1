"""Route calculation endpoints."""

from __future__ import annotations

from typing import List, Literal, Optional

from fastapi import APIRouter, HTTPException, Query, status

from ...schemas.locations import LocationModel
from ...schemas.routing import RouteLegModel, RouteSummaryResponse
from ...services.export import route_to_geojson
from ...services.locations import get_location_store
from ...services.routing.models import RouteResult
from ...services.routing.service import build_route

router = APIRouter(prefix="/calculate-route", tags=["routes"])

MetricQuery = Optional[Literal["haversine", "planar"]]


def _route(metric: str | None) -> RouteResult:
    try:
        return build_route(get_location_store(), metric=metric)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc


@router.get("", response_model=List[LocationModel], status_code=status.HTTP_200_OK)
def calculate_route(
    metric: MetricQuery = Query(default=None, description="Override the configured distance metric"),
) -> List[LocationModel]:
    """Saved locations in visiting order. The tour closes back to the first entry."""
    result = _route(metric)
    return [LocationModel.model_validate(stop) for stop in result.stops]


@router.get("/summary", response_model=RouteSummaryResponse, status_code=status.HTTP_200_OK)
def calculate_route_summary(
    metric: MetricQuery = Query(default=None, description="Override the configured distance metric"),
) -> RouteSummaryResponse:
    result = _route(metric)
    return RouteSummaryResponse(
        metric=result.metric,
        distance_unit=result.distance_unit,
        total_distance=result.total_distance,
        stop_count=len(result.stops),
        stops=[LocationModel.model_validate(stop) for stop in result.stops],
        legs=[
            RouteLegModel(
                sequence=leg.sequence,
                from_id=leg.from_id,
                to_id=leg.to_id,
                distance=leg.distance,
                bearing_degrees=leg.bearing_degrees,
            )
            for leg in result.legs
        ],
        closed_path=result.closed_path(),
    )


@router.get("/geojson", status_code=status.HTTP_200_OK)
def calculate_route_geojson(
    metric: MetricQuery = Query(default=None, description="Override the configured distance metric"),
) -> dict:
    return route_to_geojson(_route(metric))
