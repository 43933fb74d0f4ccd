from io import BytesIO

import numpy as np
import pytest
from PIL import Image as PILImage

from quadrant_blur.config import TilingConfig


def encode_png(pixels: np.ndarray) -> bytes:
    buffer = BytesIO()
    PILImage.fromarray(pixels).save(buffer, format="PNG")
    return buffer.getvalue()


def solid_pixels(width: int, height: int, color=(30, 120, 200, 255)) -> np.ndarray:
    pixels = np.empty((height, width, 4), dtype=np.uint8)
    pixels[:] = color
    return pixels


def noise_pixels(width: int, height: int, seed: int = 7) -> np.ndarray:
    rng = np.random.default_rng(seed)
    pixels = rng.integers(0, 256, size=(height, width, 4), dtype=np.uint8)
    pixels[..., 3] = 255
    return pixels


@pytest.fixture
def config(tmp_path) -> TilingConfig:
    return TilingConfig(output_dir=tmp_path / "images")


@pytest.fixture
def solid_png() -> bytes:
    return encode_png(solid_pixels(200, 200))


@pytest.fixture
def noise_png() -> bytes:
    return encode_png(noise_pixels(240, 180))
