"""
Textual notations a coordinate pair can be written in.
"""

from enum import Enum


class Format(str, Enum):
    """Coordinate notation."""

    DECIMAL_DEGREES = "decimal_degrees"  # 45.699750,-69.733722
    DECIMAL_MINUTES = "decimal_minutes"  # N 45 41.985, W 69 44.023
    DECIMAL_SECONDS = "decimal_seconds"  # N 45 41 59.100, W 69 44 1.399

    @property
    def tokens_per_axis(self) -> int:
        """Number of numeric tokens each axis carries in this notation."""
        return _TOKENS_PER_AXIS[self]


_TOKENS_PER_AXIS = {
    Format.DECIMAL_DEGREES: 1,
    Format.DECIMAL_MINUTES: 2,
    Format.DECIMAL_SECONDS: 3,
}
