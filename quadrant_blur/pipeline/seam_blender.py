"""
Seam Blender Pipeline
Splits an uploaded image into four quadrants, blurs the strips along the
internal seams, and stitches the quadrants back together.

Stages: validate → segment → persist segments → blur → compose → persist result.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Callable, List, Optional, Sequence, TypeVar

from ..config import TilingConfig
from ..exceptions import PersistenceError, TooSmallError
from ..models.geometry import Quadrant
from ..models.image import Image
from ..models.processing_result import ProcessingResult
from ..services.geometry_service import GeometryService
from ..services.image_service import ImageService
from ..services.seam_blur_service import SeamBlurService

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def _fan_out(executor: ThreadPoolExecutor, fn: Callable[[T], R], items: Sequence[T]) -> List[R]:
    """
    Run `fn` on every item concurrently and wait for all of them.
    Results keep item order; the first failing item's exception is raised.
    """
    futures = [executor.submit(fn, item) for item in items]
    return [future.result() for future in futures]


def validate_image(img: Image, config: TilingConfig) -> None:
    if img.width < config.min_image_size or img.height < config.min_image_size:
        raise TooSmallError(img.width, img.height, config.min_image_size)


def split_image(
    img: Image,
    executor: ThreadPoolExecutor,
    *,
    image_service: ImageService,
    geometry_service: GeometryService,
) -> List[Quadrant]:
    """Extract the four quadrants of `img`, ordered TopLeft, TopRight, BottomRight, BottomLeft."""
    plan = geometry_service.plan(img.width, img.height)

    def _extract(entry):
        position, rect = entry
        return Quadrant(
            position=position,
            rect=rect,
            image=image_service.extract(img, rect),
            edges=geometry_service.seam_edges(position),
        )

    return _fan_out(executor, _extract, plan)


def save_segments(
    quadrants: List[Quadrant],
    config: TilingConfig,
    executor: ThreadPoolExecutor,
    *,
    image_service: ImageService,
) -> List[Path]:
    """
    Persist raw quadrants as 1.png..4.png concurrently. Failures are logged,
    not raised: the segment files are side artifacts.
    """
    def _save(quadrant: Quadrant) -> Optional[Path]:
        path = config.segment_path(quadrant.position.index)
        quadrant.image.path = path
        try:
            image_service.save(quadrant.image)
        except PersistenceError as err:
            logger.error(f"Could not save segment {quadrant.position.index}: {err}")
            return None
        return path

    return [path for path in _fan_out(executor, _save, quadrants) if path is not None]


def blur_segments(
    quadrants: List[Quadrant],
    executor: ThreadPoolExecutor,
    *,
    seam_blur_service: SeamBlurService,
) -> List[Quadrant]:
    def _blur(quadrant: Quadrant) -> Quadrant:
        blurred = seam_blur_service.blur_edges(quadrant.image, quadrant.edges)
        return Quadrant(position=quadrant.position, rect=quadrant.rect,
                        image=blurred, edges=quadrant.edges)

    return _fan_out(executor, _blur, quadrants)


def process_image(
    image_buffer: bytes,
    config: Optional[TilingConfig] = None,
    *,
    image_service: Optional[ImageService] = None,
    geometry_service: Optional[GeometryService] = None,
    seam_blur_service: Optional[SeamBlurService] = None,
) -> ProcessingResult:
    """
    Run the full split / blur / combine pipeline on an encoded image.

    Args:
        image_buffer: Encoded image bytes (PNG, JPEG, ...)
        config: Pipeline tunables; read from the environment when omitted
        image_service: Codec, crop and paste operations
        geometry_service: Quadrant and strip planning
        seam_blur_service: Edge blurring; built from `config` when omitted

    Returns:
        ProcessingResult: success flag, result path and size, persisted segment paths

    Raises:
        DecodeError, TooSmallError, InvalidRegion, PersistenceError
    """
    try:
        config = (config or TilingConfig.from_env()).validate()
        image_service = image_service or ImageService()
        geometry_service = geometry_service or GeometryService()
        seam_blur_service = seam_blur_service or SeamBlurService(
            blur_offset=config.blur_offset,
            blur_radius=config.blur_radius,
        )

        image = image_service.decode(image_buffer)
        validate_image(image, config)
        image_service.ensure_dir(config.output_dir)

        with ThreadPoolExecutor(max_workers=config.max_workers,
                                thread_name_prefix="quadrant") as executor:
            logger.info(f"Starting image split ({image.width}x{image.height}) ...")
            quadrants = split_image(image, executor,
                                    image_service=image_service,
                                    geometry_service=geometry_service)
            logger.info(f"Image split into {len(quadrants)} parts")

            segment_paths = save_segments(quadrants, config, executor, image_service=image_service)
            logger.info(f"Segments saved to {config.output_dir} ({len(segment_paths)}/{len(quadrants)})")

            blurred = blur_segments(quadrants, executor, seam_blur_service=seam_blur_service)
            logger.info("Blur applied for all segments")

        result = image_service.compose(image.width, image.height, blurred)
        result.path = config.output_path
        logger.info(f"Segments combined. File saving to {result.path} ...")

        size = image_service.save(result)
        logger.info(f"File saved. Result file size is {size}.")

        return ProcessingResult(success=True, path=result.path, size=size,
                                segment_paths=segment_paths)
    except Exception as e:
        logger.error(f"Processing failed: {e}")
        raise
