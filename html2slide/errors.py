"""Error types raised by the conversion pipeline and their user-facing messages.

Nothing in the pipeline recovers from these; they propagate to the CLI,
which turns them into one line on stderr via :func:`format_error`.
"""

import errno

from playwright.sync_api import TimeoutError as PlaywrightTimeoutError
from pydantic import ValidationError


class Html2SlideError(Exception):
    """Base class for conversion failures."""


class HtmlFileNotFoundError(Html2SlideError):
    """The local HTML input does not exist."""

    def __init__(self, path):
        self.path = path
        super().__init__(f"HTML file not found: {path}")


class SelectorNotFoundError(Html2SlideError):
    """The capture selector matched no element on the loaded page."""

    def __init__(self, selector: str):
        self.selector = selector
        super().__init__(f"Selector not found: {selector}")


class NavigationTimeoutError(Html2SlideError):
    def __init__(self, url: str, timeout_ms: int):
        self.url = url
        self.timeout_ms = timeout_ms
        super().__init__(f"Navigation to {url} timed out after {timeout_ms} ms")


class PageLoadError(Html2SlideError):
    """The browser could not reach the page (DNS, refused connection, bad URL)."""

    def __init__(self, url: str, reason: str):
        self.url = url
        self.reason = reason
        super().__init__(f"Could not load {url}: {reason}")


class CliUsageError(Html2SlideError):
    """Raised instead of argparse's print-and-exit on bad command-line input."""


# ---------------------------------------------------------------------------
# Translation to user-facing messages
# ---------------------------------------------------------------------------

MSG_FILE_NOT_FOUND = "Error: The HTML file does not exist. Please check the file path."
MSG_SELECTOR_NOT_FOUND = "Error: The CSS selector was not found. Please check your --selector."
MSG_TIMEOUT = "Error: The page took too long to load. Please try a larger --timeout."
MSG_WRITE_FAILED = (
    "Error: Could not save the file. Please check the folder path and your permissions."
)
MSG_NETWORK = (
    "Error: The URL is not valid or the website could not be reached. Please check your input."
)
MSG_MISSING_INPUT = "Error: Please provide an HTML file path or URL."
MSG_INVALID_WAIT = (
    "Error: Invalid wait strategy. "
    "Please use one of: load, domcontentloaded, networkidle, commit."
)


def _is_invalid_wait(err: Exception, message: str) -> bool:
    if "argument --wait: invalid choice" in message:
        return True
    if isinstance(err, ValidationError):
        return any(e.get("loc", ())[:1] in (("wait",), ("wait_until",)) for e in err.errors())
    return False


def format_error(err: BaseException) -> str:
    """Map an exception to a single user-facing line. Never raises."""
    message = str(err)

    if isinstance(err, HtmlFileNotFoundError) or "HTML file not found" in message:
        return MSG_FILE_NOT_FOUND
    if isinstance(err, SelectorNotFoundError) or "Selector not found" in message:
        return MSG_SELECTOR_NOT_FOUND
    if isinstance(err, (NavigationTimeoutError, PlaywrightTimeoutError)):
        return MSG_TIMEOUT
    if isinstance(err, OSError) and err.errno in (errno.ENOENT, errno.EACCES):
        return MSG_WRITE_FAILED
    if isinstance(err, PageLoadError) or "net::ERR_" in message:
        return MSG_NETWORK
    if "arguments are required: input" in message:
        return MSG_MISSING_INPUT
    if _is_invalid_wait(err, message):
        return MSG_INVALID_WAIT
    if isinstance(err, ValidationError):
        return _format_validation_error(err)

    lines = message.strip().splitlines()
    display = lines[0] if lines else type(err).__name__
    return f"Error: {display[0].upper()}{display[1:]}"


# Request fields named after the command-line option that fills them.
_OPTION_NAMES = {
    "timeout_ms": "timeout",
    "settle_ms": "settle",
    "wait_until": "wait",
}


def _format_validation_error(err: ValidationError) -> str:
    """First validation problem as ``Error: --option: reason``."""
    first = err.errors()[0]
    loc = [str(part) for part in first.get("loc", ())]
    reason = first.get("msg", "invalid value")
    if not loc:
        return f"Error: {reason}"
    option = _OPTION_NAMES.get(loc[0], loc[0])
    return f"Error: --{'.'.join([option] + loc[1:])}: {reason}"
