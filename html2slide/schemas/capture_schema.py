"""Pydantic models for one html2slide run.

A run is described by two requests, one per pipeline stage:

1. **CaptureRequest** -- what the headless browser loads and where the PNG
   goes (viewport, scale, wait strategy, optional element selector).
2. **PackagingRequest** -- which PNG is embedded into which .pptx.

Both are built once per invocation by the CLI and discarded after use.
"""

from pathlib import Path
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator


# ---------------------------------------------------------------------------
# Widescreen canvas (inches)
# ---------------------------------------------------------------------------

WIDESCREEN_LAYOUT_NAME = "WIDE_16x9"
WIDESCREEN_WIDTH_IN = 13.333
WIDESCREEN_HEIGHT_IN = 7.5

WaitStrategy = Literal["load", "domcontentloaded", "networkidle", "commit"]
WAIT_STRATEGIES: tuple[str, ...] = ("load", "domcontentloaded", "networkidle", "commit")


# ---------------------------------------------------------------------------
# Capture
# ---------------------------------------------------------------------------

class CaptureRequest(BaseModel):
    """Everything the browser stage needs to produce one PNG."""

    page_url: str = Field(description="http(s) URL or file:// URI to navigate to")
    png_path: Path = Field(description="Where the screenshot is written")
    selector: Optional[str] = Field(
        default=None,
        description="CSS selector of the element to capture. None = full page.",
    )
    width: int = Field(default=960, gt=0, description="Viewport width in px")
    height: int = Field(default=540, gt=0, description="Viewport height in px")
    scale: float = Field(default=2, gt=0, description="Device scale factor")
    timeout_ms: int = Field(default=30000, gt=0, description="Navigation timeout in ms")
    wait_until: WaitStrategy = "networkidle"
    settle_ms: int = Field(
        default=800,
        ge=0,
        description="Pause after navigation so late fonts/layout can settle",
    )

    @field_validator("selector")
    @classmethod
    def _blank_selector_means_full_page(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        return v


# ---------------------------------------------------------------------------
# Packaging
# ---------------------------------------------------------------------------

class PackagingRequest(BaseModel):
    """Embed one PNG into a single-slide presentation."""

    png_path: Path
    pptx_path: Path
    widescreen: bool = True


class PipelineResult(BaseModel):
    """Output paths of a fully successful run."""

    pptx_path: Path
    png_path: Path
