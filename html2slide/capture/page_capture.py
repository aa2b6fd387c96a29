"""Headless-browser screenshot of a page or of one element on it.

A fresh Chromium is launched per call and closed on every exit path. The
browser type can be injected (anything with ``launch()``), which is how the
tests run without a real browser.
"""

import logging
from pathlib import Path

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from playwright.sync_api import sync_playwright

from ..errors import NavigationTimeoutError, PageLoadError, SelectorNotFoundError
from ..schemas.capture_schema import CaptureRequest
from ..utils.file_utils import ensure_directory

logger = logging.getLogger(__name__)


def render_to_png(request: CaptureRequest, browser_type=None) -> Path:
    """Load ``request.page_url`` and write a PNG to ``request.png_path``.

    Args:
        request: What to load and how to capture it.
        browser_type: Playwright ``BrowserType`` (or a stand-in). When None,
            Playwright is started and its Chromium is used.

    Returns:
        The PNG path.

    Raises:
        NavigationTimeoutError: navigation exceeded ``request.timeout_ms``.
        PageLoadError: the page could not be reached.
        SelectorNotFoundError: ``request.selector`` matched nothing.
    """
    if browser_type is None:
        with sync_playwright() as p:
            return _capture(p.chromium, request)
    return _capture(browser_type, request)


def _capture(browser_type, request: CaptureRequest) -> Path:
    browser = browser_type.launch()
    try:
        page = browser.new_page(
            viewport={"width": request.width, "height": request.height},
            device_scale_factor=request.scale,
        )
        _goto(page, request)

        if request.settle_ms:
            page.wait_for_timeout(request.settle_ms)

        png_path = request.png_path
        if request.selector:
            locator = page.locator(request.selector)
            matches = locator.count()
            if matches == 0:
                raise SelectorNotFoundError(request.selector)
            logger.info(f"Capturing first of {matches} match(es) for {request.selector!r}")
            _ensure_parent(png_path)
            locator.first.screenshot(path=str(png_path))
        else:
            logger.info("Capturing full page")
            _ensure_parent(png_path)
            page.screenshot(path=str(png_path), full_page=True)
    finally:
        browser.close()

    return png_path


def _ensure_parent(path: Path) -> None:
    if not path.parent.exists():
        logger.debug(f"Creating screenshot directory {path.parent}")
        ensure_directory(path.parent)


def _goto(page, request: CaptureRequest) -> None:
    logger.info(f"Loading {request.page_url} (wait_until={request.wait_until})")
    try:
        page.goto(
            request.page_url,
            wait_until=request.wait_until,
            timeout=request.timeout_ms,
        )
    except PlaywrightTimeoutError as e:
        raise NavigationTimeoutError(request.page_url, request.timeout_ms) from e
    except PlaywrightError as e:
        if "net::ERR_" in str(e):
            raise PageLoadError(request.page_url, str(e)) from e
        raise
