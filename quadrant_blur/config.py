import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

from dotenv import load_dotenv

from .exceptions import ConfigurationError


DEFAULT_MIN_IMAGE_SIZE = 100
DEFAULT_BLUR_OFFSET = 20
DEFAULT_BLUR_RADIUS = 10
DEFAULT_OUTPUT_DIR = "images"
DEFAULT_OUTPUT_FILENAME = "result.png"
DEFAULT_MAX_WORKERS = 4


def _env_int(key: str, default: int) -> int:
    raw = os.getenv(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigurationError(key, raw, "expected an integer")


@dataclass
class TilingConfig:
    """
    Tunables for the split / blur / combine pipeline.
    """
    min_image_size: int = DEFAULT_MIN_IMAGE_SIZE    # px, both axes
    blur_offset: int = DEFAULT_BLUR_OFFSET          # max BlurStrip thickness, px
    blur_radius: int = DEFAULT_BLUR_RADIUS          # Gaussian sigma
    output_dir: Union[str, Path] = DEFAULT_OUTPUT_DIR
    output_filename: str = DEFAULT_OUTPUT_FILENAME
    max_workers: int = DEFAULT_MAX_WORKERS

    def __post_init__(self):
        self.output_dir = Path(self.output_dir)

    @property
    def output_path(self) -> Path:
        return self.output_dir / self.output_filename

    def segment_path(self, index: int) -> Path:
        return self.output_dir / f"{index}.png"

    def validate(self) -> "TilingConfig":
        for key in ("min_image_size", "blur_offset", "blur_radius", "max_workers"):
            value = getattr(self, key)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ConfigurationError(key, value, "expected a positive integer")
        if not self.output_filename:
            raise ConfigurationError("output_filename", self.output_filename, "must not be empty")
        return self

    @classmethod
    def from_env(cls) -> "TilingConfig":
        """Build a config from environment variables (and a .env file, if present)."""
        load_dotenv()
        return cls(
            min_image_size=_env_int("MIN_IMAGE_SIZE", DEFAULT_MIN_IMAGE_SIZE),
            blur_offset=_env_int("BLUR_OFFSET", DEFAULT_BLUR_OFFSET),
            blur_radius=_env_int("BLUR_RADIUS", DEFAULT_BLUR_RADIUS),
            output_dir=os.getenv("IMAGE_DIR", DEFAULT_OUTPUT_DIR),
            output_filename=os.getenv("OUTPUT_FILENAME", DEFAULT_OUTPUT_FILENAME),
            max_workers=_env_int("MAX_WORKERS", DEFAULT_MAX_WORKERS),
        ).validate()
