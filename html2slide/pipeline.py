"""Sequence the three conversion stages: resolve → capture → package.

Each stage is passed in as a callable so callers (and tests) can swap the
browser or the slide writer; the defaults are the real implementations.
"""

import logging
from pathlib import Path
from typing import Any, Callable

from .capture.page_capture import render_to_png
from .capture.url_resolver import to_page_url
from .pptx_engine.slide_packager import png_to_pptx
from .schemas.capture_schema import CaptureRequest, PackagingRequest, PipelineResult

logger = logging.getLogger(__name__)


def run_pipeline(
    source: str,
    pptx_path: Path,
    png_path: Path,
    capture_options: dict[str, Any] | None = None,
    *,
    widescreen: bool = True,
    resolve: Callable[[str], str] = to_page_url,
    render: Callable[[CaptureRequest], Any] = render_to_png,
    package: Callable[[PackagingRequest], Any] = png_to_pptx,
) -> PipelineResult:
    """Convert ``source`` (URL or HTML path) into ``pptx_path``.

    ``capture_options`` holds the remaining CaptureRequest fields (viewport,
    scale, selector, timeout, wait strategy, settle delay). Errors from any
    stage propagate unchanged; the PNG is left on disk on success.
    """
    page_url = resolve(source)

    capture = CaptureRequest(page_url=page_url, png_path=png_path, **(capture_options or {}))
    logger.info(
        f"Capturing {capture.page_url} at {capture.width}x{capture.height} "
        f"(scale {capture.scale:g})"
    )
    render(capture)

    packaging = PackagingRequest(png_path=png_path, pptx_path=pptx_path, widescreen=widescreen)
    package(packaging)

    return PipelineResult(pptx_path=pptx_path, png_path=png_path)
