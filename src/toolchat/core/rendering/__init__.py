"""Markdown rendering of tool results."""

from toolchat.core.rendering.formatting import file_icon, format_size
from toolchat.core.rendering.links import linkify
from toolchat.core.rendering.renderer import EMPTY_RESULT_MESSAGE, SHAPES, Shape, render

__all__ = [
    "EMPTY_RESULT_MESSAGE",
    "SHAPES",
    "Shape",
    "file_icon",
    "format_size",
    "linkify",
    "render",
]
