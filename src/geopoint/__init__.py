"""
geopoint - latitude/longitude parsing, formatting and spherical geodesy.

Parses coordinate text in decimal degrees, decimal minutes or
degrees/minutes/seconds into a Point, renders Points back into any of those
notations, and computes great-circle distance, bearing, midpoint and
destination points.
"""

__version__ = "0.1.0"

from geopoint.core.codec import decode_binary, decode_json, encode_binary, encode_json
from geopoint.core.errors import (
    DecodeError,
    FormatError,
    GeoPointException,
    InvalidPayloadError,
    MalformedCoordinateError,
    NumericConversionError,
    ParseError,
    TruncatedInputError,
    UnsupportedFormatError,
)
from geopoint.core.formatter import format_point
from geopoint.core.geodesy import (
    bearing_to,
    great_circle_distance,
    midpoint_to,
    point_at_distance_and_bearing,
)
from geopoint.core.parser import ParsedCoordinate, detect_format, parse, parse_with_format
from geopoint.models.format import Format
from geopoint.models.point import Point, new_point

__all__ = [
    "__version__",
    # Model
    "Format",
    "Point",
    "new_point",
    # Format engine
    "ParsedCoordinate",
    "detect_format",
    "format_point",
    "parse",
    "parse_with_format",
    # Geodesy
    "bearing_to",
    "great_circle_distance",
    "midpoint_to",
    "point_at_distance_and_bearing",
    # Codecs
    "decode_binary",
    "decode_json",
    "encode_binary",
    "encode_json",
    # Errors
    "DecodeError",
    "FormatError",
    "GeoPointException",
    "InvalidPayloadError",
    "MalformedCoordinateError",
    "NumericConversionError",
    "ParseError",
    "TruncatedInputError",
    "UnsupportedFormatError",
]
