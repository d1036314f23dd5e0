"""
Renderers module for symref.

Turns a built Document into markup using Jinja2 templates.
"""

from symref.renderers.base import (
    BaseRenderer,
    RenderOptions,
    format_location,
    format_parameter,
    format_parameters,
    format_value,
)
from symref.renderers.html import HTMLRenderer
from symref.renderers.markdown import MarkdownRenderer

RENDERERS: dict[str, type[BaseRenderer]] = {
    HTMLRenderer.output_format: HTMLRenderer,
    MarkdownRenderer.output_format: MarkdownRenderer,
}

__all__ = [
    "BaseRenderer",
    "RenderOptions",
    "HTMLRenderer",
    "MarkdownRenderer",
    "RENDERERS",
    "format_location",
    "format_parameter",
    "format_parameters",
    "format_value",
]
