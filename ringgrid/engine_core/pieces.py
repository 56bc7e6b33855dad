"""
Pieces - Ring sizes, player colors and the immutable Piece value.

Sizes and colors travel over the wire as their literal names
("SMALL", "RED", ...). Anything else a caller sends is not an error:
it parses to None and never matches a real piece.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Any


BOARD_SIZE = 3
MAX_PLAYERS = 2
STARTING_RINGS_PER_SIZE = 3


class Size(str, Enum):
    """Ring sizes, smallest first."""
    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"

    @classmethod
    def parse(cls, value: Any) -> Size | None:
        """Map a size name (or member) to a Size, None if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


class Color(str, Enum):
    """Player colors. Declaration order is the join-order palette."""
    RED = "RED"
    BLUE = "BLUE"
    GREEN = "GREEN"
    YELLOW = "YELLOW"

    @classmethod
    def parse(cls, value: Any) -> Color | None:
        """Map a color name (or member) to a Color, None if unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return None


SIZES: tuple[Size, ...] = (Size.SMALL, Size.MEDIUM, Size.LARGE)
PALETTE: tuple[Color, ...] = (Color.RED, Color.BLUE, Color.GREEN, Color.YELLOW)


@dataclass(frozen=True)
class Piece:
    """A ring sitting on the board."""
    size: Size
    color: Color

    def matches(self, size: Any, color: Any) -> bool:
        """True if this piece has exactly the given size and color."""
        return self.size == Size.parse(size) and self.color == Color.parse(color)

    def to_dict(self) -> dict[str, str]:
        return {"size": self.size.value, "color": self.color.value}
