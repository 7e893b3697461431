"""
Great-circle computations on a spherical Earth.

Formulas follow http://www.movable-type.co.uk/scripts/latlong.html.
All angles are in degrees at the interface and radians internally. None of
these functions raise for finite input; degenerate cases (identical or
antipodal points, zero distance) return whatever the trigonometry yields.
"""

import math
from typing import Optional

from geopoint.core.config import settings
from geopoint.models.point import Point


def _radius(radius_km: Optional[float]) -> float:
    return settings.earth_radius_km if radius_km is None else radius_km


def normalize_longitude(longitude: float) -> float:
    """
    Wrap a longitude into the range (-180, 180].

    Args:
        longitude: Longitude in degrees

    Returns:
        Equivalent longitude in (-180, 180]
    """
    wrapped = math.fmod(longitude + 180.0, 360.0)
    if wrapped <= 0.0:
        wrapped += 360.0
    return wrapped - 180.0


def great_circle_distance(a: Point, b: Point, radius_km: Optional[float] = None) -> float:
    """
    Haversine distance between two points.

    Args:
        a: First point
        b: Second point
        radius_km: Sphere radius; defaults to settings.earth_radius_km

    Returns:
        Distance in kilometers
    """
    d_lat = math.radians(b.latitude - a.latitude)
    d_lng = math.radians(b.longitude - a.longitude)
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)

    h = math.sin(d_lat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(d_lng / 2) ** 2
    # Rounding can push h just outside [0, 1] near antipodes
    h = min(1.0, max(0.0, h))

    c = 2 * math.atan2(math.sqrt(h), math.sqrt(1 - h))
    return _radius(radius_km) * c


def bearing_to(a: Point, b: Point) -> float:
    """
    Initial bearing (forward azimuth) from a towards b.

    Args:
        a: Start point
        b: End point

    Returns:
        Compass bearing in degrees, in [0, 360)
    """
    d_lng = math.radians(b.longitude - a.longitude)
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)

    y = math.sin(d_lng) * math.cos(lat2)
    x = math.cos(lat1) * math.sin(lat2) - math.sin(lat1) * math.cos(lat2) * math.cos(d_lng)
    bearing = math.degrees(math.atan2(y, x))

    if bearing < 0.0:
        bearing += 360.0
    # A tiny negative angle plus 360 rounds to exactly 360
    if bearing >= 360.0:
        bearing = 0.0
    return bearing


def midpoint_to(a: Point, b: Point) -> Point:
    """
    Midpoint of the great-circle arc between two points.

    Args:
        a: First point
        b: Second point

    Returns:
        Midpoint, longitude in (-180, 180]
    """
    lat1 = math.radians(a.latitude)
    lat2 = math.radians(b.latitude)
    lng1 = math.radians(a.longitude)
    d_lng = math.radians(b.longitude - a.longitude)

    bx = math.cos(lat2) * math.cos(d_lng)
    by = math.cos(lat2) * math.sin(d_lng)

    lat3 = math.atan2(
        math.sin(lat1) + math.sin(lat2),
        math.sqrt((math.cos(lat1) + bx) ** 2 + by ** 2),
    )
    lng3 = lng1 + math.atan2(by, math.cos(lat1) + bx)

    return Point(math.degrees(lat3), normalize_longitude(math.degrees(lng3)))


def point_at_distance_and_bearing(
    origin: Point,
    distance_km: float,
    bearing_deg: float,
    radius_km: Optional[float] = None,
) -> Point:
    """
    Destination reached from origin after travelling a distance on a bearing.

    Args:
        origin: Start point
        distance_km: Distance to travel in kilometers
        bearing_deg: Initial compass bearing in degrees
        radius_km: Sphere radius; defaults to settings.earth_radius_km

    Returns:
        Destination point, longitude in (-180, 180]
    """
    delta = distance_km / _radius(radius_km)
    theta = math.radians(bearing_deg)
    lat1 = math.radians(origin.latitude)
    lng1 = math.radians(origin.longitude)

    sin_lat2 = math.sin(lat1) * math.cos(delta) + math.cos(lat1) * math.sin(delta) * math.cos(theta)
    lat2 = math.asin(min(1.0, max(-1.0, sin_lat2)))

    lng2 = lng1 + math.atan2(
        math.sin(theta) * math.sin(delta) * math.cos(lat1),
        math.cos(delta) - math.sin(lat1) * math.sin(lat2),
    )

    return Point(math.degrees(lat2), normalize_longitude(math.degrees(lng2)))
