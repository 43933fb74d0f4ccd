from typing import Dict, List, Optional, Tuple

from ..models.geometry import Edge, QuadrantPosition, Rectangle
from ..exceptions import InvalidRegion


class GeometryService:
    """
    Pure geometry for the fixed 2x2 grid: quadrant rectangles, the edges
    that face an internal seam, and the blur strips along those edges.
    """

    # Seam-facing edges per quadrant, in the order they are blurred.
    # The later edge wins where two strips overlap at a corner.
    SEAM_EDGES: Dict[QuadrantPosition, Tuple[Edge, ...]] = {
        QuadrantPosition.TOP_LEFT: (Edge.RIGHT, Edge.BOTTOM),
        QuadrantPosition.TOP_RIGHT: (Edge.LEFT, Edge.BOTTOM),
        QuadrantPosition.BOTTOM_RIGHT: (Edge.LEFT, Edge.TOP),
        QuadrantPosition.BOTTOM_LEFT: (Edge.RIGHT, Edge.TOP),
    }

    @staticmethod
    def plan(width: int, height: int) -> List[Tuple[QuadrantPosition, Rectangle]]:
        """
        Split a width x height image at its midlines.

        Widths and heights of the right / bottom quadrants are derived by
        subtraction, so odd remainders land there and the four rectangles
        tile the source exactly.

        Returns:
            [(position, rect)] ordered TopLeft, TopRight, BottomRight, BottomLeft.
        """
        if width <= 0 or height <= 0:
            raise InvalidRegion(Rectangle(0, 0, width, height), width, height)

        half_width = width // 2
        half_height = height // 2

        return [
            (QuadrantPosition.TOP_LEFT,
             Rectangle(0, 0, half_width, half_height)),
            (QuadrantPosition.TOP_RIGHT,
             Rectangle(half_width, 0, width - half_width, half_height)),
            (QuadrantPosition.BOTTOM_RIGHT,
             Rectangle(half_width, half_height, width - half_width, height - half_height)),
            (QuadrantPosition.BOTTOM_LEFT,
             Rectangle(0, half_height, half_width, height - half_height)),
        ]

    def seam_edges(self, position: QuadrantPosition) -> Tuple[Edge, ...]:
        return self.SEAM_EDGES[position]

    @staticmethod
    def blur_strip(width: int, height: int, edge: Edge, blur_offset: int) -> Optional[Rectangle]:
        """
        Strip flush against `edge` of a width x height quadrant.

        Thickness is min(blur_offset, extent // 3) where extent is the width
        for left/right edges and the height for top/bottom edges.
        Returns None when the strip would be empty.
        """
        if edge in (Edge.LEFT, Edge.RIGHT):
            offset = min(blur_offset, width // 3)
        else:
            offset = min(blur_offset, height // 3)

        left, top, strip_w, strip_h = 0, 0, width, height
        if edge is Edge.LEFT:
            strip_w = offset
        elif edge is Edge.RIGHT:
            left = width - offset
            strip_w = offset
        elif edge is Edge.TOP:
            strip_h = offset
        elif edge is Edge.BOTTOM:
            top = height - offset
            strip_h = offset

        strip = Rectangle(left, top, strip_w, strip_h)
        if strip.is_empty():
            return None
        return strip
