"""
HTML renderer.

Produces an embeddable ``<div id="symref">`` fragment: functions, then each
class followed by its methods, then constants.
"""

from symref.renderers.base import BaseRenderer


class HTMLRenderer(BaseRenderer):
    """Render the reference as an HTML fragment.

    Features:
        - One block per symbol, methods grouped inside their class wrapper
        - Optional search input and trailer script reference
        - Values and comments are HTML-escaped

    Tags:
        - renderer
        - html
    """

    output_format = "html"
    template_name = "reference_template.html"
