"""
Split an image into quadrants, blur the seam-facing edges, recombine.
"""

from .config import TilingConfig
from .exceptions import (
    QuadrantBlurError,
    ConfigurationError,
    DecodeError,
    TooSmallError,
    InvalidRegion,
    PersistenceError
)
from .models.processing_result import ProcessingResult
from .pipeline.seam_blender import process_image

__version__ = "1.0.0"

__all__ = [
    'TilingConfig',
    'QuadrantBlurError',
    'ConfigurationError',
    'DecodeError',
    'TooSmallError',
    'InvalidRegion',
    'PersistenceError',
    'ProcessingResult',
    'process_image',
]
