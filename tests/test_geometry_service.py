import numpy as np
import pytest

from quadrant_blur.exceptions import InvalidRegion
from quadrant_blur.models.geometry import Edge, QuadrantPosition, Rectangle
from quadrant_blur.services.geometry_service import GeometryService


@pytest.mark.parametrize("width,height", [(100, 100), (101, 101), (200, 137), (333, 100), (1025, 768)])
def test_quadrants_tile_source_exactly(width, height):
    coverage = np.zeros((height, width), dtype=np.int32)

    for _, rect in GeometryService.plan(width, height):
        assert rect.fits_within(width, height)
        coverage[rect.top:rect.bottom, rect.left:rect.right] += 1

    assert (coverage == 1).all()


def test_odd_dimensions_give_remainder_to_right_and_bottom():
    rects = dict(GeometryService.plan(101, 101))

    assert rects[QuadrantPosition.TOP_LEFT] == Rectangle(0, 0, 50, 50)
    assert rects[QuadrantPosition.TOP_RIGHT] == Rectangle(50, 0, 51, 50)
    assert rects[QuadrantPosition.BOTTOM_RIGHT] == Rectangle(50, 50, 51, 51)
    assert rects[QuadrantPosition.BOTTOM_LEFT] == Rectangle(0, 50, 50, 51)


def test_plan_order_and_segment_indices():
    positions = [position for position, _ in GeometryService.plan(200, 200)]

    assert positions == [
        QuadrantPosition.TOP_LEFT,
        QuadrantPosition.TOP_RIGHT,
        QuadrantPosition.BOTTOM_RIGHT,
        QuadrantPosition.BOTTOM_LEFT,
    ]
    assert [p.index for p in positions] == [1, 2, 3, 4]


def test_plan_rejects_empty_image():
    with pytest.raises(InvalidRegion):
        GeometryService.plan(0, 100)


def test_seam_edges_face_the_other_quadrants():
    service = GeometryService()

    assert service.seam_edges(QuadrantPosition.TOP_LEFT) == (Edge.RIGHT, Edge.BOTTOM)
    assert service.seam_edges(QuadrantPosition.TOP_RIGHT) == (Edge.LEFT, Edge.BOTTOM)
    assert service.seam_edges(QuadrantPosition.BOTTOM_RIGHT) == (Edge.LEFT, Edge.TOP)
    assert service.seam_edges(QuadrantPosition.BOTTOM_LEFT) == (Edge.RIGHT, Edge.TOP)


@pytest.mark.parametrize("edge,expected", [
    (Edge.LEFT, Rectangle(0, 0, 20, 80)),
    (Edge.RIGHT, Rectangle(80, 0, 20, 80)),
    (Edge.TOP, Rectangle(0, 0, 100, 20)),
    (Edge.BOTTOM, Rectangle(0, 60, 100, 20)),
])
def test_blur_strip_is_flush_against_edge(edge, expected):
    assert GeometryService.blur_strip(100, 80, edge, blur_offset=20) == expected


def test_blur_strip_thickness_capped_at_a_third_of_the_axis():
    # 50 // 3 == 16 < 20
    assert GeometryService.blur_strip(50, 51, Edge.RIGHT, blur_offset=20) == Rectangle(34, 0, 16, 51)
    assert GeometryService.blur_strip(50, 51, Edge.TOP, blur_offset=20) == Rectangle(0, 0, 50, 17)


def test_blur_strip_none_when_quadrant_too_thin():
    assert GeometryService.blur_strip(2, 100, Edge.LEFT, blur_offset=20) is None
    assert GeometryService.blur_strip(100, 2, Edge.BOTTOM, blur_offset=20) is None
