"""Command-line entry point: HTML file or URL → single-slide .pptx.

Usage:
    html2slide page.html -o slide.pptx
    html2slide https://example.com --selector ".hero" --width 1280 --height 720
    html2slide page.html --config html2slide.yaml -v
"""

import argparse
import logging
import sys
from pathlib import Path

from . import __version__
from .capture.page_capture import render_to_png
from .capture.url_resolver import to_page_url
from .errors import CliUsageError, format_error
from .pipeline import run_pipeline
from .pptx_engine.slide_packager import png_to_pptx
from .schemas.capture_schema import WAIT_STRATEGIES
from .schemas.settings import ConverterSettings
from .utils.file_utils import derive_png_path

logger = logging.getLogger(__name__)


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises on bad input instead of printing and exiting."""

    def error(self, message):
        raise CliUsageError(message)


def _load_settings(argv: list[str] | None) -> ConverterSettings:
    """Read ``--config`` ahead of the full parse so it can supply defaults."""
    pre = _ArgumentParser(add_help=False)
    pre.add_argument("--config", type=Path, default=None)
    known, _ = pre.parse_known_args(argv)
    if known.config is None:
        return ConverterSettings()
    return ConverterSettings.from_yaml(known.config)


def build_parser(settings: ConverterSettings | None = None) -> argparse.ArgumentParser:
    settings = settings or ConverterSettings()
    parser = _ArgumentParser(
        prog="html2slide",
        description="Render an HTML page (or one element of it) onto a single PowerPoint slide",
    )
    parser.add_argument("input", help="HTML file path or URL (http/https)")
    parser.add_argument("-o", "--out", default=settings.out,
                        help=f"Output .pptx path (default: {settings.out})")
    parser.add_argument("--png", default=settings.png,
                        help="Intermediate PNG path (default: --out with .png)")
    parser.add_argument("--selector", default=settings.selector,
                        help="CSS selector to capture. Empty for the full page.")
    parser.add_argument("--width", type=int, default=settings.width,
                        help=f"Viewport width in px (default: {settings.width})")
    parser.add_argument("--height", type=int, default=settings.height,
                        help=f"Viewport height in px (default: {settings.height})")
    parser.add_argument("--scale", type=float, default=settings.scale,
                        help=f"Device scale factor (default: {settings.scale:g})")
    parser.add_argument("--timeout", type=int, default=settings.timeout,
                        help=f"Navigation timeout in ms (default: {settings.timeout})")
    parser.add_argument("--wait", choices=WAIT_STRATEGIES, default=settings.wait,
                        help=f"Wait strategy: {', '.join(WAIT_STRATEGIES)} (default: {settings.wait})")
    parser.add_argument("--settle", type=int, default=settings.settle,
                        help=f"Pause after navigation in ms (default: {settings.settle})")
    parser.add_argument("--config", type=Path, default=None,
                        help="YAML file with default values for these options")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log each pipeline step")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(
    argv: list[str] | None = None,
    *,
    resolve=to_page_url,
    render=render_to_png,
    package=png_to_pptx,
) -> int:
    """Run one conversion. Returns the process exit status.

    ``--help`` and ``--version`` print through argparse and return 0
    without running the pipeline.
    """
    try:
        parser = build_parser(_load_settings(argv))
        try:
            args = parser.parse_args(argv)
        except SystemExit as e:
            if e.code in (0, None):
                return 0
            raise

        logging.basicConfig(
            level=logging.DEBUG if args.verbose else logging.WARNING,
            format="%(levelname)s: %(message)s",
        )

        pptx_path = Path(args.out).resolve()
        png_path = Path(args.png).resolve() if args.png else derive_png_path(pptx_path)

        result = run_pipeline(
            args.input,
            pptx_path,
            png_path,
            {
                "selector": args.selector,
                "width": args.width,
                "height": args.height,
                "scale": args.scale,
                "timeout_ms": args.timeout,
                "wait_until": args.wait,
                "settle_ms": args.settle,
            },
            resolve=resolve,
            render=render,
            package=package,
        )
    except Exception as e:
        logger.debug("Conversion failed", exc_info=True)
        print(format_error(e), file=sys.stderr)
        return 1

    print(f"OK: {result.pptx_path}")
    print(f"(intermediate) {result.png_path}")
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
