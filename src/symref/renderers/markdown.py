"""
Markdown renderer.

Same document order as the HTML fragment, for docs sites that build from
Markdown.
"""

from symref.renderers.base import BaseRenderer


class MarkdownRenderer(BaseRenderer):
    """Render the reference as Markdown."""

    output_format = "markdown"
    template_name = "reference_template.md"
