import logging
from typing import Iterable

import numpy as np
import cv2

from ..models.image import Image
from ..models.geometry import Edge, Rectangle
from ..config import DEFAULT_BLUR_OFFSET, DEFAULT_BLUR_RADIUS
from .geometry_service import GeometryService

logger = logging.getLogger(__name__)


class SeamBlurService:
    """
    Business-level helper for softening quadrant seams.

    • Blurs a thin strip along each seam-facing edge.
    • Returns a **new** Image; the input pixels are never touched, so the
      raw segments persisted before this step stay raw.
    """

    def __init__(
            self,
            blur_offset: int = DEFAULT_BLUR_OFFSET,
            blur_radius: int = DEFAULT_BLUR_RADIUS,
    ):
        self.blur_offset = blur_offset
        self.blur_radius = blur_radius
        self.geometry_service = GeometryService()

    @staticmethod
    def _gaussian(strip: np.ndarray, radius: int) -> np.ndarray:
        """
        Gaussian blur of one strip. Replicated border so a strip thinner than
        the kernel still blurs towards its own edge colours.
        """
        return cv2.GaussianBlur(strip, (0, 0), sigmaX=radius, sigmaY=radius,
                                borderType=cv2.BORDER_REPLICATE)

    def _blur_strip(self, pixels: np.ndarray, strip: Rectangle) -> None:
        region = pixels[strip.top:strip.bottom, strip.left:strip.right]
        blurred = self._gaussian(np.ascontiguousarray(region), self.blur_radius)
        if blurred.shape != region.shape:
            raise ValueError(f"blurred strip shape {blurred.shape} != {region.shape}")
        pixels[strip.top:strip.bottom, strip.left:strip.right] = blurred

    def blur_edge(self, pixels: np.ndarray, edge: Edge) -> bool:
        """
        Blur the strip along one edge of `pixels`, in place.

        Returns:
            True if the strip was blurred, False if the edge was skipped.
        """
        height, width = pixels.shape[:2]
        strip = self.geometry_service.blur_strip(width, height, edge, self.blur_offset)
        if strip is None:
            logger.warning(f"Blur skipped for {edge.value} edge: no room in {width}x{height} segment")
            return False

        logger.debug(f"Blurring {edge.value} edge strip {strip}")
        # The strip is written back only after the blur succeeds.
        try:
            self._blur_strip(pixels, strip)
        except Exception as err:
            logger.warning(f"Blur skipped for {edge.value} edge: {err}")
            return False
        return True

    def blur_edges(self, img: Image, edges: Iterable[Edge]) -> Image:
        """
        Blur each seam-facing edge in order and return the result as a new Image.
        """
        pixels = img.pixels.copy()
        for edge in edges:
            self.blur_edge(pixels, edge)
        return Image(pixels=pixels, path=img.path)
