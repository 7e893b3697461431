"""
Coordinate text parser.

Recognises a latitude/longitude pair written in decimal degrees, decimal
minutes or degrees/minutes/seconds, for example::

    45.699750,-69.733722
    N 45 41.985, W 69 44.023
    45° 41' 59.1" N 69° 44' 01.4" W

Each notation has its own grammar. The grammars are tried in a fixed order
against the whole input and the first match wins; they differ in how many
numeric tokens each axis carries, so at most one can match.
"""

import logging
import re
import threading
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Pattern, Tuple

from geopoint.core.errors import MalformedCoordinateError, NumericConversionError
from geopoint.models.format import Format
from geopoint.models.point import Point, new_point

logger = logging.getLogger(__name__)

NEGATIVE_MARKERS = frozenset({"-", "S", "W"})

# Grammar order is the match priority
GRAMMAR_ORDER: Tuple[Format, ...] = (
    Format.DECIMAL_DEGREES,
    Format.DECIMAL_MINUTES,
    Format.DECIMAL_SECONDS,
)

# (group suffix, unit glyph) for degrees, minutes, seconds
_UNITS = (("deg", "°"), ("min", "'"), ("sec", '"'))

_AXES = (
    # prefix, leading markers, trailing markers, max degree digits
    ("lat", "NS+-", "NS", 2),
    ("lng", "EW+-", "EW", 3),
)

_grammars: Optional[List[Tuple[Format, Pattern[str]]]] = None
_grammar_lock = threading.Lock()


@dataclass(frozen=True)
class AxisComponents:
    """
    The pieces of one axis as written in the input.

    Attributes:
        sign: Leading marker (N, S, E, W, + or -), if any
        hemisphere: Trailing hemisphere letter, if any
        magnitudes: Degree, minute and second tokens that were present
    """

    sign: Optional[str]
    hemisphere: Optional[str]
    magnitudes: Tuple[str, ...]

    @property
    def is_negative(self) -> bool:
        """True when the axis points south or west."""
        # A trailing hemisphere letter overrides a leading marker
        marker = self.hemisphere or self.sign
        return marker in NEGATIVE_MARKERS

    def value(self, text: Optional[str] = None) -> float:
        """
        Reduce the tokens to signed decimal degrees.

        Tokens are base-60 positional: degrees + minutes/60 + seconds/3600.

        Args:
            text: Whole input, used only for error reporting

        Returns:
            Signed decimal degrees; negative zero is returned as 0.0

        Raises:
            NumericConversionError: If a token is not a valid number
        """
        total = 0.0
        divisor = 1.0
        for token in self.magnitudes:
            try:
                number = float(token)
            except ValueError as e:
                raise NumericConversionError(token, text) from e
            total += number / divisor
            divisor *= 60.0

        if self.is_negative:
            total = -total
        return total + 0.0


class ParsedCoordinate(NamedTuple):
    """A parsed point together with the notation it was written in."""

    point: Point
    format: Format


def _axis_pattern(
    prefix: str, leading: str, trailing: str, degree_digits: int, tokens: int
) -> str:
    parts = [rf"(?P<{prefix}_sign>[{leading}]?)\s*"]
    for index in range(tokens):
        name, glyph = _UNITS[index]
        digits = degree_digits if index == 0 else 2
        # Only the last token of an axis may be fractional
        fraction = r"(?:\.[0-9]*)?" if index == tokens - 1 else ""
        if index:
            parts.append(r"\s+")
        parts.append(rf"(?P<{prefix}_{name}>[0-9]{{1,{digits}}}{fraction}){re.escape(glyph)}?")
    parts.append(rf"\s*(?P<{prefix}_hemi>[{trailing}]?)")
    return "".join(parts)


def build_grammar(notation: Format) -> Pattern[str]:
    """
    Compile the grammar for one notation.

    Args:
        notation: Notation to build the grammar for

    Returns:
        Compiled pattern meant for ``fullmatch``
    """
    tokens = notation.tokens_per_axis
    lat, lng = (
        _axis_pattern(prefix, leading, trailing, digits, tokens)
        for prefix, leading, trailing, digits in _AXES
    )
    return re.compile(rf"\s*{lat}(?:\s+|\s*,\s*){lng}\s*")


def get_grammars() -> List[Tuple[Format, Pattern[str]]]:
    """
    Return the compiled grammars in priority order.

    Compiled on first call, once; the list is read-only afterwards.
    """
    global _grammars
    if _grammars is None:
        with _grammar_lock:
            if _grammars is None:
                _grammars = [(notation, build_grammar(notation)) for notation in GRAMMAR_ORDER]
                logger.debug(f"Compiled {len(_grammars)} coordinate grammars")
    return _grammars


def _components(match: "re.Match[str]", prefix: str, tokens: int) -> AxisComponents:
    groups = match.groupdict()
    return AxisComponents(
        sign=groups[f"{prefix}_sign"] or None,
        hemisphere=groups[f"{prefix}_hemi"] or None,
        magnitudes=tuple(groups[f"{prefix}_{name}"] for name, _ in _UNITS[:tokens]),
    )


def split_axes(text: str) -> Tuple[Format, AxisComponents, AxisComponents]:
    """
    Match the text and split it into per-axis components.

    Args:
        text: Coordinate text

    Returns:
        Tuple of (notation, latitude components, longitude components)

    Raises:
        MalformedCoordinateError: If no grammar matches
    """
    for notation, grammar in get_grammars():
        match = grammar.fullmatch(text)
        if match:
            tokens = notation.tokens_per_axis
            return notation, _components(match, "lat", tokens), _components(match, "lng", tokens)

    logger.debug(f"No coordinate grammar matched {text!r}")
    raise MalformedCoordinateError(text)


def parse_with_format(text: str) -> ParsedCoordinate:
    """
    Parse coordinate text and report which notation it used.

    Args:
        text: Latitude then longitude in any supported notation

    Returns:
        ParsedCoordinate with the point and its notation

    Raises:
        MalformedCoordinateError: If the text matches no notation
        NumericConversionError: If a numeric token cannot be converted
    """
    notation, lat, lng = split_axes(text)
    return ParsedCoordinate(new_point(lat.value(text), lng.value(text)), notation)


def parse(text: str) -> Point:
    """
    Parse coordinate text into a Point.

    Args:
        text: Latitude then longitude in any supported notation

    Returns:
        Parsed point

    Raises:
        MalformedCoordinateError: If the text matches no notation
        NumericConversionError: If a numeric token cannot be converted
    """
    return parse_with_format(text).point


def detect_format(text: str) -> Format:
    """
    Identify the notation of coordinate text without converting it.

    Raises:
        MalformedCoordinateError: If the text matches no notation
    """
    notation, _, _ = split_axes(text)
    return notation
