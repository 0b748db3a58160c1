"""GeoJSON export utilities for saved locations and computed routes."""

from __future__ import annotations

from typing import Any, Dict, List

from ..routing.models import RouteResult

ROUTE_COLOR = "#e0003e"
MARKER_COLOR = "#0070f3"


def linestring_to_wkt(coordinates: List[List[float]]) -> str:
    """Convert linestring coordinates to WKT format.

    Args:
        coordinates: List of [lat, lon] pairs

    Returns:
        WKT LINESTRING string
    """
    if not coordinates or len(coordinates) < 2:
        raise ValueError("LineString must have at least 2 coordinates")

    # WKT uses lon,lat order (x,y)
    coord_pairs = [f"{lon} {lat}" for lat, lon in coordinates]
    return f"LINESTRING({','.join(coord_pairs)})"


def route_to_geojson(result: RouteResult) -> Dict[str, Any]:
    """Render the route stops as points and the closed tour as a LineString.

    GeoJSON positions are [lon, lat]; the route's own closed path is [lat, lon].
    """
    features: List[Dict[str, Any]] = []

    for order, stop in enumerate(result.stops, start=1):
        features.append(
            {
                "type": "Feature",
                "id": stop.id,
                "geometry": {"type": "Point", "coordinates": [stop.longitude, stop.latitude]},
                "properties": {
                    "name": stop.name,
                    "order": order,
                    "marker-color": MARKER_COLOR,
                },
            }
        )

    path = result.closed_path()
    if len(path) >= 3:
        features.append(
            {
                "type": "Feature",
                "id": "route",
                "geometry": {
                    "type": "LineString",
                    "coordinates": [[lon, lat] for lat, lon in path],
                },
                "properties": {
                    "metric": result.metric,
                    "total_distance": result.total_distance,
                    "distance_unit": result.distance_unit,
                    "stop_count": len(result.stops),
                    "wkt": linestring_to_wkt(path),
                    "stroke": ROUTE_COLOR,
                    "stroke-width": 2,
                },
            }
        )

    return {"type": "FeatureCollection", "features": features}
