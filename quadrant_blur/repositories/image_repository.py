import logging
from pathlib import Path
from typing import Union

import numpy as np
import cv2
from PIL import Image as PILImage

from ..models.image import Image
from ..exceptions import DecodeError, PersistenceError

logger = logging.getLogger(__name__)

# cv2 decodes to gray / BGR / BGRA depending on the source; normalise to RGBA.
_TO_RGBA = {
    1: cv2.COLOR_GRAY2RGBA,
    3: cv2.COLOR_BGR2RGBA,
    4: cv2.COLOR_BGRA2RGBA,
}


class ImageRepository:
    """
    Handles encode/decode and file I/O for Image entities.
    """

    @staticmethod
    def create_image(pixels: np.ndarray, path: Union[str, Path] = None) -> Image:
        if path is None:
            return Image(pixels)
        return Image(pixels=pixels, path=Path(path))

    @staticmethod
    def decode(buffer: bytes) -> Image:
        """
        Decode an encoded image buffer (PNG, JPEG, ...) into RGBA pixels.
        """
        if not buffer:
            raise DecodeError("Could not read image dimensions: empty buffer")

        try:
            arr = cv2.imdecode(np.frombuffer(buffer, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
        except cv2.error as err:
            raise DecodeError(f"Could not decode image: {err}")

        if arr is None or arr.ndim < 2 or arr.shape[0] == 0 or arr.shape[1] == 0:
            raise DecodeError("Could not read image dimensions")

        # 16-bit PNG / TIFF sources are scaled down to 8 bits per channel.
        if arr.dtype == np.uint16:
            arr = (arr // 257).astype(np.uint8)
        elif arr.dtype != np.uint8:
            raise DecodeError(f"Unsupported pixel depth: {arr.dtype}")

        channels = 1 if arr.ndim == 2 else arr.shape[2]
        if channels not in _TO_RGBA:
            raise DecodeError(f"Unsupported channel count: {channels}")

        rgba = cv2.cvtColor(arr, _TO_RGBA[channels])
        return Image(pixels=np.ascontiguousarray(rgba))

    @staticmethod
    def ensure_dir(folder: Union[str, Path]) -> Path:
        folder = Path(folder)
        try:
            folder.mkdir(parents=True, exist_ok=True)
        except OSError as err:
            raise PersistenceError(folder, err)
        return folder

    @staticmethod
    def save(image: Image) -> int:
        """
        Write the image as PNG to `image.path`. Returns the file size in bytes.
        """
        if image.path is None:
            raise PersistenceError(None, ValueError("image has no path"))

        try:
            PILImage.fromarray(np.ascontiguousarray(image.pixels)).save(image.path, format="PNG")
            size = Path(image.path).stat().st_size
        except (OSError, ValueError) as err:
            raise PersistenceError(image.path, err)

        logger.debug(f"Saved {image.width}x{image.height} image to {image.path} ({size} bytes)")
        return size
