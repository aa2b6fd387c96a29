#!/usr/bin/env python3
"""Convert an HTML file or URL into a single-slide PowerPoint file.

Same as the ``html2slide`` console script, runnable from a source checkout.

Usage:
    python scripts/html_to_slide.py page.html -o out/slide.pptx
    python scripts/html_to_slide.py https://example.com --selector "#main" --scale 1
"""

import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from html2slide.cli import main


if __name__ == "__main__":
    sys.exit(main())
