"""Renderers for resolved tag sequences."""

from undermark.renderers.html import HtmlRenderer, render_link

__all__ = [
    "HtmlRenderer",
    "render_link",
]
