import pytest

from src.location_mapper.services.geospatial import (
    EARTH_RADIUS_KM,
    bearing_degrees,
    get_distance_function,
    haversine_km,
    planar_distance,
)


def test_haversine_one_degree_on_equator():
    expected = EARTH_RADIUS_KM * 3.141592653589793 / 180
    assert haversine_km(0, 0, 0, 1) == pytest.approx(expected)
    assert haversine_km(0, 0, 1, 0) == pytest.approx(expected)


def test_haversine_same_point_is_zero():
    assert haversine_km(51.505, -0.09, 51.505, -0.09) == 0.0


def test_haversine_london_to_paris():
    assert haversine_km(51.5074, -0.1278, 48.8566, 2.3522) == pytest.approx(343.5, abs=1.0)


def test_planar_distance_is_euclidean_in_degrees():
    assert planar_distance(0, 0, 3, 4) == pytest.approx(5.0)


def test_bearing_cardinal_directions():
    assert bearing_degrees(0, 0, 1, 0) == pytest.approx(0.0)
    assert bearing_degrees(0, 0, 0, 1) == pytest.approx(90.0)
    assert bearing_degrees(0, 0, -1, 0) == pytest.approx(180.0)
    assert bearing_degrees(0, 0, 0, -1) == pytest.approx(270.0)


def test_get_distance_function_resolves_known_metrics():
    assert get_distance_function("haversine") is haversine_km
    assert get_distance_function("planar") is planar_distance


def test_get_distance_function_rejects_unknown_metric():
    with pytest.raises(ValueError, match="Unknown distance metric"):
        get_distance_function("manhattan")
