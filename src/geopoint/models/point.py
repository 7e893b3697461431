"""
The canonical geographic point.

A Point is a plain value: latitude and longitude in signed decimal degrees
on a spherical Earth. Nothing is range-checked, so out-of-range values are
carried through every operation unchanged.
"""

from dataclasses import dataclass
from typing import Optional, Union

from geopoint.models.format import Format


@dataclass(frozen=True)
class Point:
    """
    A latitude/longitude pair in decimal degrees.

    Attributes:
        latitude: Degrees north of the equator (negative is south)
        longitude: Degrees east of Greenwich (negative is west)
    """

    latitude: float
    longitude: float

    @property
    def lat(self) -> float:
        """Latitude in decimal degrees."""
        return self.latitude

    @property
    def lng(self) -> float:
        """Longitude in decimal degrees."""
        return self.longitude

    def format(self, notation: Union[Format, str] = Format.DECIMAL_DEGREES) -> str:
        """
        Render this point in the given notation.

        Raises:
            UnsupportedFormatError: If the notation is not recognised
        """
        from geopoint.core.formatter import format_point

        return format_point(self, notation)

    def great_circle_distance(self, other: "Point", radius_km: Optional[float] = None) -> float:
        """Haversine distance to another point in kilometers."""
        from geopoint.core.geodesy import great_circle_distance

        return great_circle_distance(self, other, radius_km)

    def bearing_to(self, other: "Point") -> float:
        """Initial bearing towards another point, in degrees [0, 360)."""
        from geopoint.core.geodesy import bearing_to

        return bearing_to(self, other)

    def midpoint_to(self, other: "Point") -> "Point":
        """Point halfway along the great circle to another point."""
        from geopoint.core.geodesy import midpoint_to

        return midpoint_to(self, other)

    def point_at_distance_and_bearing(
        self, distance_km: float, bearing_deg: float, radius_km: Optional[float] = None
    ) -> "Point":
        """Point reached by travelling distance_km from here on bearing_deg."""
        from geopoint.core.geodesy import point_at_distance_and_bearing

        return point_at_distance_and_bearing(self, distance_km, bearing_deg, radius_km)

    def to_bytes(self) -> bytes:
        """Encode as 16 little-endian bytes (latitude, longitude)."""
        from geopoint.core.codec import encode_binary

        return encode_binary(self)

    @classmethod
    def from_bytes(cls, data: bytes) -> "Point":
        """Decode a point from its 16-byte binary form."""
        from geopoint.core.codec import decode_binary

        return decode_binary(data)

    def to_json(self) -> str:
        """Encode as ``{"lat":..,"lng":..}``."""
        from geopoint.core.codec import encode_json

        return encode_json(self)

    @classmethod
    def from_json(cls, data: Union[str, bytes], lenient: Optional[bool] = None) -> "Point":
        """Decode a point from its JSON form."""
        from geopoint.core.codec import decode_json

        return decode_json(data, lenient=lenient)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {"lat": self.latitude, "lng": self.longitude}

    def __str__(self) -> str:
        return f"({self.latitude:.6f}, {self.longitude:.6f})"


def new_point(lat: float, lng: float) -> Point:
    """
    Create a Point from latitude and longitude in decimal degrees.

    Args:
        lat: Latitude
        lng: Longitude

    Returns:
        New Point
    """
    return Point(latitude=float(lat), longitude=float(lng))
