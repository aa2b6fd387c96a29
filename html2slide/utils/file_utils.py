"""File I/O and path utilities."""

import logging
import re
from pathlib import Path
from typing import Any

import yaml

logger = logging.getLogger(__name__)

_PPTX_SUFFIX_RE = re.compile(r"\.pptx$", re.IGNORECASE)


def ensure_directory(path: str | Path) -> Path:
    """Ensure a directory exists, creating it if necessary."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


def load_yaml(path: str | Path) -> dict[str, Any]:
    """Load a YAML file and return its contents as a dict."""
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"YAML file not found: {path}")
    with open(path) as f:
        return yaml.safe_load(f) or {}


def derive_png_path(pptx_path: str | Path) -> Path:
    """Intermediate PNG path for a .pptx output: same location and stem.

    Only a trailing ``.pptx`` (any case) is stripped; any other suffix is
    kept, so ``deck.key`` becomes ``deck.key.png``.
    """
    pptx_path = Path(pptx_path)
    stem = _PPTX_SUFFIX_RE.sub("", pptx_path.name)
    return pptx_path.with_name(f"{stem}.png")
