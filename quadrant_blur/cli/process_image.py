import logging
import sys
from pathlib import Path

import click

from ..config import TilingConfig
from ..exceptions import QuadrantBlurError
from ..pipeline.seam_blender import process_image


@click.command()
@click.argument("image", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output-dir", type=click.Path(file_okay=False, path_type=Path),
              help="Directory for 1.png..4.png and the result (default: $IMAGE_DIR or ./images)")
@click.option("--output-filename", help="Result file name (default: result.png)")
@click.option("--min-size", type=int, help="Minimum width/height in px")
@click.option("--blur-offset", type=int, help="Maximum blur strip thickness in px")
@click.option("--blur-radius", type=int, help="Gaussian blur sigma")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging")
def main(image, output_dir, output_filename, min_size, blur_offset, blur_radius, verbose):
    """Split IMAGE into quadrants, blur the seams and save the recombined result."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
        datefmt='%H:%M:%S'
    )

    try:
        config = TilingConfig.from_env()
        if output_dir is not None:
            config.output_dir = output_dir
        if output_filename is not None:
            config.output_filename = output_filename
        if min_size is not None:
            config.min_image_size = min_size
        if blur_offset is not None:
            config.blur_offset = blur_offset
        if blur_radius is not None:
            config.blur_radius = blur_radius

        result = process_image(image.read_bytes(), config)
    except QuadrantBlurError as err:
        click.echo(f"Error: {err}", err=True)
        sys.exit(1)

    click.echo(str(result.path))


if __name__ == "__main__":
    main()
