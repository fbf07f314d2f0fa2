"""Renderers turning a board layout into documents."""

from .base import Renderer, content_text
from .data import layout_to_data
from .html import HtmlRenderer
from .text import TextRenderer

__all__ = [
    "HtmlRenderer",
    "Renderer",
    "TextRenderer",
    "content_text",
    "layout_to_data",
]
