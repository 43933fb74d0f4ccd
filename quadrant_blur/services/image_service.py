from pathlib import Path
from typing import Iterable, Union

import numpy as np

from ..models.image import Image
from ..models.geometry import Quadrant, Rectangle
from ..repositories.image_repository import ImageRepository
from ..exceptions import InvalidRegion


CANVAS_BACKGROUND = (255, 255, 255, 255)  # opaque white, RGBA


class ImageService:
    """Decode, crop, paste and save. No blur logic here."""

    def __init__(self):
        self.image_repository = ImageRepository()

    def create_image(self, pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        return self.image_repository.create_image(pixels, path)

    def decode(self, buffer: bytes) -> Image:
        """Decode an uploaded buffer into an RGBA Image."""
        return self.image_repository.decode(buffer)

    def ensure_dir(self, folder: Union[str, Path]) -> Path:
        return self.image_repository.ensure_dir(folder)

    def save(self, image: Image) -> int:
        """
        Business-level method to save the image to its path. Returns bytes written.
        """
        return self.image_repository.save(image)

    def extract(self, img: Image, rect: Rectangle) -> Image:
        """
        Copy the pixels addressed by `rect` into a new, independently owned Image.

        Args:
            img (Image): Source image
            rect (Rectangle): Region in source pixel coordinates

        Returns:
            Image: The cropped copy
        """
        if not rect.fits_within(img.width, img.height):
            raise InvalidRegion(rect, img.width, img.height)

        return self.create_image(img.pixels[rect.top:rect.bottom, rect.left:rect.right].copy())

    def compose(self, width: int, height: int, quadrants: Iterable[Quadrant]) -> Image:
        """
        Paste quadrants onto a blank opaque-white canvas at their planned offsets.

        Straight overwrite, no alpha blending: any softening of the seams
        comes from the blur applied beforehand.
        """
        canvas = np.empty((height, width, 4), dtype=np.uint8)
        canvas[:] = CANVAS_BACKGROUND

        for quadrant in quadrants:
            rect = quadrant.rect
            tile = quadrant.image.pixels
            if not rect.fits_within(width, height) or tile.shape[:2] != (rect.height, rect.width):
                raise InvalidRegion(rect, width, height)
            canvas[rect.top:rect.bottom, rect.left:rect.right] = tile

        return self.create_image(canvas)
