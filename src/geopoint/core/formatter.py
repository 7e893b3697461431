"""
Render Points as coordinate text.
"""

import math
from typing import Tuple, Union

from geopoint.core.errors import UnsupportedFormatError
from geopoint.models.format import Format
from geopoint.models.point import Point


def resolve_format(notation: Union[Format, str]) -> Format:
    """
    Coerce a notation given as enum member or string value.

    Raises:
        UnsupportedFormatError: If the notation is not recognised
    """
    if isinstance(notation, Format):
        return notation
    try:
        return Format(notation)
    except ValueError:
        raise UnsupportedFormatError(notation, supported=[f.value for f in Format]) from None


def hemisphere(value: float, positive: str, negative: str) -> str:
    """Hemisphere letter for a signed coordinate; zero counts as positive."""
    return negative if value < 0 else positive


def split_minutes(value: float) -> Tuple[int, float]:
    """Split the magnitude of a coordinate into whole degrees and decimal minutes."""
    fraction, whole = math.modf(abs(value))
    return int(whole), fraction * 60.0


def split_seconds(value: float) -> Tuple[int, int, float]:
    """Split the magnitude of a coordinate into degrees, whole minutes and decimal seconds."""
    degrees, minutes = split_minutes(value)
    fraction, whole = math.modf(minutes)
    return degrees, int(whole), fraction * 60.0


def _decimal_minutes(value: float, positive: str, negative: str) -> str:
    degrees, minutes = split_minutes(value)
    return f"{hemisphere(value, positive, negative)} {degrees} {minutes:.3f}"


def _decimal_seconds(value: float, positive: str, negative: str) -> str:
    degrees, minutes, seconds = split_seconds(value)
    return f"{hemisphere(value, positive, negative)} {degrees} {minutes} {seconds:.3f}"


def format_point(point: Point, notation: Union[Format, str] = Format.DECIMAL_DEGREES) -> str:
    """
    Render a point in one of the supported notations.

    Examples for Point(45.699750, -69.733722):
        DECIMAL_DEGREES  45.699750,-69.733722
        DECIMAL_MINUTES  N 45 41.985, W 69 44.023
        DECIMAL_SECONDS  N 45 41 59.100, W 69 44 1.399

    Args:
        point: Point to render
        notation: Target notation, as a Format or its string value

    Returns:
        Coordinate text

    Raises:
        UnsupportedFormatError: If the notation is not recognised
    """
    notation = resolve_format(notation)

    if notation is Format.DECIMAL_DEGREES:
        return f"{point.latitude:.6f},{point.longitude:.6f}"
    if notation is Format.DECIMAL_MINUTES:
        return (
            f"{_decimal_minutes(point.latitude, 'N', 'S')}, "
            f"{_decimal_minutes(point.longitude, 'E', 'W')}"
        )
    if notation is Format.DECIMAL_SECONDS:
        return (
            f"{_decimal_seconds(point.latitude, 'N', 'S')}, "
            f"{_decimal_seconds(point.longitude, 'E', 'W')}"
        )

    raise UnsupportedFormatError(notation, supported=[f.value for f in Format])
