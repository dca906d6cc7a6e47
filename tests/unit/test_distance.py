"""GeoMath tests."""

import pytest

from tripplan.domain.models import GeoPoint
from tripplan.planner.distance import distance_km, haversine, walking_minutes

PARIS = GeoPoint(lat=48.8566, lng=2.3522)
LONDON = GeoPoint(lat=51.5074, lng=-0.1278)


def test_distance_is_symmetric():
    assert distance_km(PARIS, LONDON) == pytest.approx(distance_km(LONDON, PARIS))


def test_distance_to_self_is_zero():
    assert distance_km(PARIS, PARIS) == 0
    assert distance_km(LONDON, LONDON) == 0


def test_one_degree_of_longitude_on_equator():
    assert haversine(0, 0, 0, 1) == pytest.approx(111.195, abs=0.01)


def test_paris_london():
    assert distance_km(PARIS, LONDON) == pytest.approx(343.5, abs=1.0)


@pytest.mark.parametrize(
    ("km", "minutes"),
    [(0.0, 0), (4.5, 60), (1.0, 13), (0.1, 1), (2.25, 30), (9.0, 120)],
)
def test_walking_minutes(km, minutes):
    assert walking_minutes(km) == minutes


def test_walking_minutes_returns_int():
    assert isinstance(walking_minutes(1.234), int)
