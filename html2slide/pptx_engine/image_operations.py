"""Image placement on PowerPoint slides."""

import logging
from pathlib import Path

from PIL import Image
from pptx.util import Emu

logger = logging.getLogger(__name__)

# Relative difference tolerated before an aspect mismatch is reported.
ASPECT_TOLERANCE = 0.01


def image_size(image_path: str | Path) -> tuple[int, int]:
    """Pixel (width, height) of an image file."""
    with Image.open(image_path) as img:
        return img.size


def add_full_bleed_image(slide, image_path: str | Path, width: int, height: int) -> object:
    """Place an image at the slide's top-left corner, stretched to width x height.

    Args:
        slide: The slide to add the image to.
        image_path: Path to the image file.
        width, height: Target size in EMU (normally the canvas size).

    Returns:
        The created picture shape.
    """
    image_path = Path(image_path)
    px_w, px_h = image_size(image_path)

    target_aspect = width / height
    source_aspect = px_w / px_h
    if abs(source_aspect - target_aspect) / target_aspect > ASPECT_TOLERANCE:
        logger.warning(
            f"{image_path.name} is {px_w}x{px_h} px (aspect {source_aspect:.3f}); "
            f"stretching to slide aspect {target_aspect:.3f}"
        )

    return slide.shapes.add_picture(
        str(image_path), Emu(0), Emu(0), width=Emu(width), height=Emu(height)
    )
