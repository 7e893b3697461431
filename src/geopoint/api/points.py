"""
Point parsing, rendering and encoding endpoints.
"""

import logging

from fastapi import APIRouter

from geopoint.core.codec import decode_binary, encode_binary
from geopoint.core.errors import DecodeError
from geopoint.core.formatter import format_point, resolve_format
from geopoint.core.parser import parse_with_format
from geopoint.models.api import (
    BinaryPayload,
    FormatRequest,
    FormatResponse,
    ParseRequest,
    ParseResponse,
    PointModel,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/points", tags=["points"])


@router.post("/parse", response_model=ParseResponse)
async def parse_point(request: ParseRequest) -> ParseResponse:
    """
    Parse coordinate text in any supported notation.

    Raises:
        MalformedCoordinateError: If the text matches no notation (422)
    """
    point, notation = parse_with_format(request.text)
    logger.debug(f"Parsed {request.text!r} as {notation.value}")
    return ParseResponse(lat=point.latitude, lng=point.longitude, format=notation)


@router.post("/format", response_model=FormatResponse)
async def render_point(request: FormatRequest) -> FormatResponse:
    """
    Render a point in the requested notation.

    Raises:
        UnsupportedFormatError: If the notation is unknown (400)
    """
    notation = resolve_format(request.format)
    text = format_point(request.point.to_point(), notation)
    return FormatResponse(text=text, format=notation)


@router.post("/encode", response_model=BinaryPayload)
async def encode_point(point: PointModel) -> BinaryPayload:
    """Encode a point in its 16-byte binary form, returned as hex."""
    return BinaryPayload(hex=encode_binary(point.to_point()).hex())


@router.post("/decode", response_model=PointModel)
async def decode_point(payload: BinaryPayload) -> PointModel:
    """
    Decode a point from hex-encoded binary.

    Raises:
        DecodeError: If the hex string is invalid (422)
        TruncatedInputError: If fewer than 16 bytes are supplied (422)
    """
    try:
        data = bytes.fromhex(payload.hex)
    except ValueError as e:
        raise DecodeError(
            f"Invalid hex string: {e}",
            encoding="hex",
            suggestions=["Send an even number of hexadecimal digits"],
        ) from e
    return PointModel.from_point(decode_binary(data))
