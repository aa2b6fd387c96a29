from .page_capture import render_to_png
from .url_resolver import is_http_url, to_page_url

__all__ = ["is_http_url", "render_to_png", "to_page_url"]
