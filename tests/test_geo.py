import pytest

from nearmatch.core.geo import GeoPoint, distance_m, haversine_m


def test_distance_zero_for_same_point():
    assert distance_m(25.0478, 121.5170, 25.0478, 121.5170) == 0.0


def test_distance_along_equator_matches_arc_length():
    # 0.004 degrees of longitude on the equator is ~444.8 m.
    assert distance_m(0, 0, 0, 0.004) == pytest.approx(444.78, abs=0.05)


@pytest.mark.parametrize(
    "a, b",
    [
        ((0.0, 0.0), (0.0, 0.004)),
        ((25.0478, 121.5170), (25.0330, 121.5654)),
        ((-33.8688, 151.2093), (51.5074, -0.1278)),
        ((89.9, 10.0), (-89.9, -170.0)),
    ],
)
def test_distance_is_exactly_symmetric(a, b):
    assert distance_m(*a, *b) == distance_m(*b, *a)


def test_haversine_m_wraps_distance_m():
    a = GeoPoint(lat=25.0478, lon=121.5170)
    b = GeoPoint(lat=25.0330, lon=121.5654)
    assert haversine_m(a, b) == distance_m(a.lat, a.lon, b.lat, b.lon)
    assert 5_000 < haversine_m(a, b) < 5_200
