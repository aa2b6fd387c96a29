"""Render an HTML page (or one element of it) onto a single PowerPoint slide."""

__version__ = "0.1.0"
