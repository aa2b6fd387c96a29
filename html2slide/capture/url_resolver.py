"""Turn the CLI input (URL or local path) into something the browser can open."""

import logging
import os
from pathlib import Path
from typing import Callable
from urllib.parse import urlparse

from ..errors import HtmlFileNotFoundError

logger = logging.getLogger(__name__)


def is_http_url(value) -> bool:
    """True if ``value`` is an absolute http:// or https:// URL."""
    if not isinstance(value, str):
        return False
    try:
        parsed = urlparse(value)
    except ValueError:
        return False
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return False
    return not any(ch.isspace() for ch in parsed.netloc)


def to_page_url(value: str, exists: Callable[[str], bool] = os.path.exists) -> str:
    """Return a navigable page reference for ``value``.

    URLs pass through untouched. Anything else is treated as a filesystem
    path, made absolute, checked with ``exists`` and converted to a
    ``file://`` URI.

    Raises:
        HtmlFileNotFoundError: the resolved path does not exist.
    """
    if is_http_url(value):
        return value

    path = Path(value).resolve()
    if not exists(str(path)):
        raise HtmlFileNotFoundError(path)

    page_url = path.as_uri()
    logger.debug(f"Resolved {value} -> {page_url}")
    return page_url
