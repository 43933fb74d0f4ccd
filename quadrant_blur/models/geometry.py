from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from .image import Image


class Edge(str, Enum):
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"


class QuadrantPosition(Enum):
    """
    The four tiles in planning order. `index` (1..4) names the persisted
    segment file.
    """
    TOP_LEFT = 1
    TOP_RIGHT = 2
    BOTTOM_RIGHT = 3
    BOTTOM_LEFT = 4

    @property
    def index(self) -> int:
        return self.value


@dataclass(frozen=True)
class Rectangle:
    left: int
    top: int
    width: int
    height: int

    @property
    def right(self) -> int:
        return self.left + self.width

    @property
    def bottom(self) -> int:
        return self.top + self.height

    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def fits_within(self, width: int, height: int) -> bool:
        """True if the rectangle is non-empty and lies inside a width x height image."""
        return (
            not self.is_empty()
            and self.left >= 0
            and self.top >= 0
            and self.right <= width
            and self.bottom <= height
        )


@dataclass
class Quadrant:
    """
    One tile of the source image: where it sits and the pixels it owns.
    """
    position: QuadrantPosition
    rect: Rectangle
    image: Image
    edges: Tuple[Edge, ...] = ()  # seam-facing edges, in blur order
