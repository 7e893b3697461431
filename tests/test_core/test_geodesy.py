"""
Tests for great-circle computations.
"""

import math

import pytest

from geopoint.core import geodesy
from geopoint.models.point import Point, new_point

SEA = new_point(47.4489, -122.3094)
SFO = new_point(37.6160933, -122.3924223)


class TestGreatCircleDistance:
    """Tests for haversine distance."""

    def test_sea_to_sfo(self) -> None:
        """Test a known airport-to-airport distance."""
        assert geodesy.great_circle_distance(SEA, SFO) == pytest.approx(1093.379199, abs=0.1)

    def test_symmetric(self) -> None:
        """Test that distance does not depend on direction."""
        assert geodesy.great_circle_distance(SEA, SFO) == pytest.approx(
            geodesy.great_circle_distance(SFO, SEA)
        )

    def test_same_point_is_zero(self) -> None:
        """Test zero distance for identical points."""
        assert geodesy.great_circle_distance(SEA, SEA) == 0.0

    def test_antipodes(self) -> None:
        """Test that antipodal points are half a circumference apart."""
        distance = geodesy.great_circle_distance(new_point(0, 0), new_point(0, 180))
        assert distance == pytest.approx(math.pi * 6371.0)

    def test_custom_radius(self) -> None:
        """Test that the result scales with the sphere radius."""
        default = geodesy.great_circle_distance(SEA, SFO)
        doubled = geodesy.great_circle_distance(SEA, SFO, radius_km=2 * 6371.0)
        assert doubled == pytest.approx(2 * default)

    def test_radius_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that the default radius comes from settings."""
        monkeypatch.setattr(geodesy.settings, "earth_radius_km", 1.0)
        distance = geodesy.great_circle_distance(new_point(0, 0), new_point(0, 90))
        assert distance == pytest.approx(math.pi / 2)


class TestBearing:
    """Tests for initial bearing."""

    def test_known_bearing(self) -> None:
        """Test bearing from New York to null island."""
        bearing = geodesy.bearing_to(new_point(40.7486, -73.9864), new_point(0, 0))
        assert bearing == pytest.approx(100.610833, abs=0.001)

    def test_negative_angle_is_wrapped(self) -> None:
        """Test that a westward atan2 result is wrapped into [0, 360)."""
        bearing = geodesy.bearing_to(
            new_point(-25.5316666666667, -49.1761111111111),
            new_point(40.63980103, -73.77890015),
        )
        assert 0.0 <= bearing < 360.0
        assert bearing > 180.0

    @pytest.mark.parametrize(
        "destination,expected",
        [
            (new_point(1, 0), 0.0),
            (new_point(0, 1), 90.0),
            (new_point(-1, 0), 180.0),
            (new_point(0, -1), 270.0),
        ],
    )
    def test_cardinal_directions(self, destination: Point, expected: float) -> None:
        """Test bearings due north, east, south and west."""
        assert geodesy.bearing_to(new_point(0, 0), destination) == pytest.approx(expected)

    def test_same_point(self) -> None:
        """Test that identical points give a finite bearing in range."""
        bearing = geodesy.bearing_to(SEA, SEA)
        assert 0.0 <= bearing < 360.0


class TestMidpoint:
    """Tests for the great-circle midpoint."""

    def test_cambridge_paris(self) -> None:
        """Test a known midpoint."""
        mid = geodesy.midpoint_to(new_point(52.205, 0.119), new_point(48.857, 2.351))

        assert mid.latitude == pytest.approx(50.53632, abs=0.001)
        assert mid.longitude == pytest.approx(1.274614, abs=0.001)

    def test_equidistant(self) -> None:
        """Test that the midpoint is equally far from both ends."""
        mid = geodesy.midpoint_to(SEA, SFO)

        assert geodesy.great_circle_distance(SEA, mid) == pytest.approx(
            geodesy.great_circle_distance(mid, SFO)
        )

    def test_across_antimeridian(self) -> None:
        """Test that the midpoint longitude is wrapped into (-180, 180]."""
        mid = geodesy.midpoint_to(new_point(0, 179), new_point(0, -179))

        assert mid.latitude == pytest.approx(0.0)
        assert abs(mid.longitude) == pytest.approx(180.0)
        assert -180.0 < mid.longitude <= 180.0


class TestDestination:
    """Tests for forward projection."""

    def test_due_south(self) -> None:
        """Test a known destination."""
        origin = new_point(47.44745785, -122.308065668024)
        destination = geodesy.point_at_distance_and_bearing(origin, 1090.7, 180)

        assert destination.latitude == pytest.approx(37.638557, abs=0.001)
        assert destination.longitude == pytest.approx(-122.308066, abs=0.001)

    def test_zero_distance(self) -> None:
        """Test that travelling nowhere stays put."""
        destination = geodesy.point_at_distance_and_bearing(SEA, 0.0, 45.0)

        assert destination.latitude == pytest.approx(SEA.latitude)
        assert destination.longitude == pytest.approx(SEA.longitude)

    def test_inverse_of_distance_and_bearing(self) -> None:
        """Test that projecting along the bearing by the distance reaches the target."""
        distance = geodesy.great_circle_distance(SEA, SFO)
        bearing = geodesy.bearing_to(SEA, SFO)
        destination = geodesy.point_at_distance_and_bearing(SEA, distance, bearing)

        assert destination.latitude == pytest.approx(SFO.latitude, abs=1e-6)
        assert destination.longitude == pytest.approx(SFO.longitude, abs=1e-6)

    def test_crossing_antimeridian(self) -> None:
        """Test that the destination longitude is wrapped into (-180, 180]."""
        destination = geodesy.point_at_distance_and_bearing(new_point(0, 179.5), 111.195, 90)

        assert destination.longitude == pytest.approx(-179.5, abs=0.01)


class TestNormalizeLongitude:
    """Tests for longitude wrapping."""

    @pytest.mark.parametrize(
        "value,expected",
        [
            (0.0, 0.0),
            (45.0, 45.0),
            (180.0, 180.0),
            (-180.0, 180.0),
            (181.0, -179.0),
            (-181.0, 179.0),
            (540.0, 180.0),
            (-350.0, 10.0),
        ],
    )
    def test_wrap(self, value: float, expected: float) -> None:
        """Test wrapping into (-180, 180]."""
        assert geodesy.normalize_longitude(value) == pytest.approx(expected)
