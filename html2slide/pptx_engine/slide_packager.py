"""Wrap a captured PNG into a one-slide presentation."""

import logging
from pathlib import Path

from pptx import Presentation

from ..schemas.capture_schema import (
    WIDESCREEN_HEIGHT_IN,
    WIDESCREEN_LAYOUT_NAME,
    WIDESCREEN_WIDTH_IN,
    PackagingRequest,
)
from .image_operations import add_full_bleed_image
from .slide_operations import add_blank_slide, create_presentation, define_layout

logger = logging.getLogger(__name__)


def png_to_pptx(request: PackagingRequest, presentation_factory=Presentation) -> Path:
    """Write ``request.pptx_path``: one slide, the PNG stretched over the canvas.

    With ``request.widescreen`` the canvas is 13.333 x 7.5 in (16:9);
    otherwise the factory's default canvas is used as-is.
    """
    prs = create_presentation(presentation_factory)

    if request.widescreen:
        define_layout(prs, WIDESCREEN_WIDTH_IN, WIDESCREEN_HEIGHT_IN, name=WIDESCREEN_LAYOUT_NAME)

    slide = add_blank_slide(prs)
    add_full_bleed_image(slide, request.png_path, prs.slide_width, prs.slide_height)

    prs.save(str(request.pptx_path))
    logger.info(f"Saved {request.pptx_path}")
    return request.pptx_path
