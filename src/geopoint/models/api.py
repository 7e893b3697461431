"""
Request and response bodies for the HTTP API.
"""

from typing import Optional

from pydantic import BaseModel, Field

from geopoint.models.format import Format
from geopoint.models.point import Point


class PointModel(BaseModel):
    """A point on the wire, in the same shape as the JSON codec."""

    lat: float = Field(..., description="Latitude in decimal degrees")
    lng: float = Field(..., description="Longitude in decimal degrees")

    def to_point(self) -> Point:
        """Convert to a Point."""
        return Point(self.lat, self.lng)

    @classmethod
    def from_point(cls, point: Point) -> "PointModel":
        """Build from a Point."""
        return cls(lat=point.latitude, lng=point.longitude)


class ParseRequest(BaseModel):
    """Coordinate text to parse."""

    text: str = Field(..., min_length=1, examples=["N 45 41.985, W 69 44.023"])


class ParseResponse(PointModel):
    """Parsed point plus the notation the text was written in."""

    format: Format


class FormatRequest(BaseModel):
    """Point to render and the target notation."""

    point: PointModel
    # Plain string so unknown notations reach the renderer's own error
    format: str = Field(default=Format.DECIMAL_DEGREES.value, examples=["decimal_minutes"])


class FormatResponse(BaseModel):
    """Rendered coordinate text."""

    text: str
    format: Format


class BinaryPayload(BaseModel):
    """Binary encoding of a point as a hex string."""

    hex: str = Field(..., description="32 hex digits: latitude then longitude, little-endian")


class PointPair(BaseModel):
    """Two points for distance, bearing and midpoint queries."""

    origin: PointModel
    destination: PointModel


class DestinationRequest(BaseModel):
    """Start point, distance and bearing for a forward projection."""

    origin: PointModel
    distance_km: float = Field(..., description="Distance to travel in kilometers")
    bearing_deg: float = Field(..., description="Initial compass bearing in degrees")


class DistanceResponse(BaseModel):
    """Great-circle distance."""

    distance_km: float
    radius_km: Optional[float] = None


class BearingResponse(BaseModel):
    """Initial bearing."""

    bearing_deg: float
