"""
Binary and JSON interchange encodings for Points.

Binary: 16 bytes, two little-endian IEEE-754 doubles, latitude then
longitude, with no header or length prefix.

JSON: ``{"lat":40.7486,"lng":-73.9864}`` with compact separators and
shortest round-trip float text.
"""

import logging
import struct
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from geopoint.core.config import settings
from geopoint.core.errors import InvalidPayloadError, TruncatedInputError
from geopoint.models.point import Point

logger = logging.getLogger(__name__)

_BINARY_LAYOUT = struct.Struct("<dd")
BINARY_SIZE = _BINARY_LAYOUT.size


class PointPayload(BaseModel):
    """JSON wire form of a Point; both keys required and numeric."""

    model_config = ConfigDict(strict=True, extra="ignore")

    lat: float
    lng: float


class LenientPointPayload(PointPayload):
    """JSON wire form where a missing axis defaults to 0.0."""

    lat: float = 0.0
    lng: float = 0.0


def encode_binary(point: Point) -> bytes:
    """
    Encode a point as 16 little-endian bytes.

    Args:
        point: Point to encode

    Returns:
        Latitude double followed by longitude double
    """
    return _BINARY_LAYOUT.pack(point.latitude, point.longitude)


def decode_binary(data: bytes) -> Point:
    """
    Decode a point from its binary form.

    Only the first 16 bytes are read; anything after them is ignored.

    Args:
        data: Encoded bytes

    Returns:
        Decoded point, bit-identical to the encoded doubles

    Raises:
        TruncatedInputError: If fewer than 16 bytes are supplied
    """
    if len(data) < BINARY_SIZE:
        raise TruncatedInputError(expected=BINARY_SIZE, received=len(data))
    if len(data) > BINARY_SIZE:
        logger.debug(f"Ignoring {len(data) - BINARY_SIZE} trailing bytes after binary point")

    lat, lng = _BINARY_LAYOUT.unpack_from(data)
    return Point(lat, lng)


def encode_json(point: Point) -> str:
    """
    Encode a point as a compact JSON object.

    Args:
        point: Point to encode

    Returns:
        JSON text such as ``{"lat":40.7486,"lng":-73.9864}``
    """
    return PointPayload(lat=float(point.latitude), lng=float(point.longitude)).model_dump_json()


def decode_json(data: Union[str, bytes], lenient: Optional[bool] = None) -> Point:
    """
    Decode a point from its JSON form.

    Args:
        data: JSON text
        lenient: Default a missing lat or lng to 0.0 instead of failing;
            None uses settings.lenient_json_decode

    Returns:
        Decoded point

    Raises:
        InvalidPayloadError: If the payload is not an object with numeric lat/lng
    """
    if lenient is None:
        lenient = settings.lenient_json_decode
    model = LenientPointPayload if lenient else PointPayload

    try:
        payload = model.model_validate_json(data)
    except ValidationError as e:
        errors = [
            {
                "field": ".".join(str(loc) for loc in error.get("loc", ())),
                "message": error.get("msg", ""),
                "type": error.get("type", ""),
            }
            for error in e.errors()
        ]
        logger.warning(f"Rejected JSON point payload: {len(errors)} error(s)")
        raise InvalidPayloadError("Invalid JSON point payload", errors=errors) from e

    return Point(payload.lat, payload.lng)
