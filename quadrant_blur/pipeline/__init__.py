"""
Pipeline orchestration.

process_image() - split, blur seams, recombine, persist
"""
from .seam_blender import (
    process_image,
    split_image,
    save_segments,
    blur_segments,
    validate_image
)
