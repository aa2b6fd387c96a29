"""Presentation and slide creation using python-pptx.

python-pptx has no named custom layouts: a "layout" here is the
presentation-wide canvas size, set once before any slide is added.
"""

import logging

from pptx import Presentation
from pptx.util import Inches

logger = logging.getLogger(__name__)

BLANK_LAYOUT_NAME = "Blank"


def create_presentation(presentation_factory=Presentation):
    """Create a new presentation with the factory's default canvas."""
    return presentation_factory()


def define_layout(prs, width_inches: float, height_inches: float, name: str = "") -> None:
    """Set the canvas size of ``prs``. Must run before slides are added."""
    if len(prs.slides):
        raise ValueError(
            f"Cannot change canvas size after {len(prs.slides)} slide(s) were added"
        )
    prs.slide_width = Inches(width_inches)
    prs.slide_height = Inches(height_inches)
    logger.debug(f"Canvas {name or 'custom'}: {width_inches} x {height_inches} in")


def add_blank_slide(prs) -> object:
    """Add a slide from the blank layout (last layout if none is named Blank)."""
    layouts = prs.slide_layouts
    blank = next((layout for layout in layouts if layout.name == BLANK_LAYOUT_NAME), None)
    if blank is None:
        blank = layouts[len(layouts) - 1]
    return prs.slides.add_slide(blank)
