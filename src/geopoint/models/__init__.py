"""
Data models.
"""

from .format import Format
from .point import Point, new_point

__all__ = ["Format", "Point", "new_point"]
