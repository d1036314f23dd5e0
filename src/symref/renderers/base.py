"""
Base renderer for reference documents.

Provides the Jinja2 environment, the parameter and value formatting shared
by every output format, and the precondition check on the Document.
"""

from __future__ import annotations

from abc import ABC
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jinja2 import Environment, FileSystemLoader, select_autoescape

from symref.errors import DocumentNotBuiltError
from symref.logging import get_logger
from symref.model.symbols import Document, Parameter, SourceLocation

logger = get_logger(__name__)


@dataclass(frozen=True)
class RenderOptions:
    """Formatting flags; none of them affect the Document.

    Attributes:
        searchable: Emit the search input above the symbol blocks
        script_src: URL of a script to reference in the trailer (None = no trailer)
        show_tags: Emit comment tags under each symbol
        show_locations: Emit the file/line location line
    """

    searchable: bool = False
    script_src: str | None = None
    show_tags: bool = True
    show_locations: bool = True


def format_value(value: Any) -> str:
    """Format a default or constant value for display.

    Strings are double-quoted, so an explicitly empty string renders as
    ``""``; embedded quotes and backslashes are backslash-escaped.
    Everything else uses ``repr()``.

    Example:
        >>> format_value("")
        '""'
        >>> print(format_value('say "hi"'))
        "say \\"hi\\""
        >>> format_value(5)
        '5'
    """
    if isinstance(value, str):
        escaped = value.replace("\\", "\\\\").replace('"', '\\"')
        return f'"{escaped}"'
    return repr(value)


def format_parameter(parameter: Parameter) -> str:
    """Format one parameter: ``&`` for by-reference, ``[...]`` when optional."""
    arg = "&" if parameter.by_reference else ""
    if not parameter.optional:
        return arg + parameter.name

    arg += "[" + parameter.name
    if parameter.has_default:
        arg += " = " + format_value(parameter.default)
    return arg + "]"


def format_parameters(parameters: Iterable[Parameter]) -> str:
    """Format a parameter list in declaration order.

    The HTML template autoescapes this text, so ``&x`` reads ``&amp;x`` and
    ``""`` reads ``&#34;&#34;`` in the raw markup.

    Example:
        >>> format_parameters([
        ...     Parameter("x", by_reference=True),
        ...     Parameter("y", optional=True, has_default=True, default=5),
        ... ])
        '&x, [y = 5]'
    """
    return ", ".join(format_parameter(p) for p in parameters)


def format_location(location: SourceLocation | None) -> str:
    """Format a source location as ``path: Lines a - b`` (empty if absent)."""
    if location is None or not location.file_path:
        return ""
    if location.start_line is None:
        return location.file_path
    end = location.end_line if location.end_line is not None else location.start_line
    return f"{location.file_path}: Lines {location.start_line} - {end}"


class BaseRenderer(ABC):
    """Base class for reference document renderers.

    Manifesto:
        Rendering is a pure function of the Document and the options.
        No timestamps, no environment lookups: the same input always
        yields byte-identical output, so callers can cache it.

    Architecture:
        ```
        Document + RenderOptions
                 │
                 ▼
        _check_document()  ──► DocumentNotBuiltError on misuse
                 │
                 ▼
        Jinja2 template (format_parameters, format_value filters)
                 │
                 ▼
        markup string
        ```

    Tags:
        - renderer
        - template
        - jinja2

    Doc-Types:
        - API_REFERENCE (section: "Renderers Module", priority: 7)
    """

    # Output format name, used by the orchestrator and CLI
    output_format: str = ""

    # Template file name
    template_name: str = ""

    def __init__(self, template_dir: Path | None = None):
        """Initialize the renderer.

        Args:
            template_dir: Directory containing templates (package templates by default)
        """
        if template_dir is None:
            template_dir = Path(__file__).parent.parent / "templates"
        self.template_dir = Path(template_dir)

        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape(["html", "xml"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )

        self.env.filters["format_parameters"] = format_parameters
        self.env.filters["format_value"] = format_value
        self.env.filters["format_location"] = format_location

    def render(self, document: Document, options: RenderOptions | None = None) -> str:
        """Render the document.

        Args:
            document: A Document built by the Aggregator
            options: Formatting flags (defaults if None)

        Returns:
            Rendered markup

        Raises:
            DocumentNotBuiltError: If ``document`` is not a built Document
        """
        self._check_document(document)
        options = options or RenderOptions()

        template = self.env.get_template(self.template_name)
        content = template.render(
            document=document,
            options=options,
            functions=document.functions,
            classes=document.classes,
            constants=document.constants,
        )

        logger.debug(
            "document_rendered",
            output_format=self.output_format,
            chars=len(content),
        )
        return content

    def _check_document(self, document: Any) -> None:
        if document is None:
            raise DocumentNotBuiltError(
                "render() called before a Document was built"
            ).with_context(renderer=type(self).__name__)
        if not isinstance(document, Document):
            raise DocumentNotBuiltError(
                f"render() expects a Document, got {type(document).__name__}"
            ).with_context(renderer=type(self).__name__)
