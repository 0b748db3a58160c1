import pytest

from src.location_mapper.config import settings
from src.location_mapper.services.export import route_to_geojson
from src.location_mapper.services.locations import LocationStore
from src.location_mapper.services.routing.service import build_route, plan_route
from src.location_mapper.services.routing.solver import tour_distance
from src.location_mapper.services.geospatial import haversine_km


@pytest.fixture
def square_store() -> LocationStore:
    store = LocationStore()
    store.add("A", 0, 0)
    store.add("B", 0, 1)
    store.add("C", 1, 1)
    store.add("D", 1, 0)
    return store


def test_build_route_reads_store_snapshot(square_store: LocationStore):
    result = build_route(square_store, metric="planar")

    assert [stop.name for stop in result.stops] == ["A", "B", "C", "D"]
    assert all(stop is stored for stop, stored in zip(result.stops, square_store.list()))
    assert result.metric == "planar"
    assert result.distance_unit == "deg"
    assert result.total_distance == pytest.approx(4.0)


def test_legs_close_the_tour(square_store: LocationStore):
    result = build_route(square_store, metric="planar")

    assert [(leg.from_id, leg.to_id) for leg in result.legs] == [(1, 2), (2, 3), (3, 4), (4, 1)]
    assert [leg.sequence for leg in result.legs] == [1, 2, 3, 4]
    assert result.legs[0].bearing_degrees == pytest.approx(90.0)
    assert result.legs[1].bearing_degrees == pytest.approx(0.0)


def test_closed_path_repeats_the_first_stop(square_store: LocationStore):
    result = build_route(square_store, metric="planar")

    path = result.closed_path()
    assert len(path) == 5
    assert path[0] == path[-1] == [0.0, 0.0]


def test_default_metric_comes_from_settings(square_store: LocationStore, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setattr(settings, "distance_metric", "haversine")

    result = build_route(square_store)

    assert result.metric == "haversine"
    assert result.distance_unit == "km"
    assert result.total_distance == pytest.approx(444.7, abs=0.5)


def test_empty_store_yields_empty_route():
    result = build_route(LocationStore())

    assert result.stops == []
    assert result.legs == []
    assert result.total_distance == 0.0
    assert result.closed_path() == []


def test_unknown_metric_is_rejected(square_store: LocationStore):
    with pytest.raises(ValueError):
        build_route(square_store, metric="manhattan")


def test_route_geojson_contains_points_and_closed_line(square_store: LocationStore):
    collection = route_to_geojson(build_route(square_store, metric="planar"))

    assert collection["type"] == "FeatureCollection"
    points = [feature for feature in collection["features"] if feature["geometry"]["type"] == "Point"]
    lines = [feature for feature in collection["features"] if feature["geometry"]["type"] == "LineString"]
    assert [feature["properties"]["order"] for feature in points] == [1, 2, 3, 4]
    assert points[1]["geometry"]["coordinates"] == [1.0, 0.0]
    assert len(lines) == 1
    coordinates = lines[0]["geometry"]["coordinates"]
    assert coordinates[0] == coordinates[-1]
    assert len(coordinates) == 5
    assert lines[0]["properties"]["wkt"].startswith("LINESTRING(0.0 0.0,1.0 0.0")


def test_single_location_geojson_has_no_line():
    store = LocationStore()
    store.add("Lonely", 10, 10)

    collection = route_to_geojson(plan_route(store.list()))

    assert [feature["geometry"]["type"] for feature in collection["features"]] == ["Point"]


def test_route_total_matches_closed_tour_and_leg_sum(square_store: LocationStore):
    result = build_route(square_store, metric="haversine")

    assert result.total_distance == tour_distance(result.stops, haversine_km)
    assert result.total_distance == pytest.approx(sum(leg.distance for leg in result.legs))
