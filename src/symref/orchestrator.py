"""
Reference orchestrator.

Wires introspection, aggregation and rendering for one report and
optionally writes the result to disk.

Example:
    >>> orchestrator = ReferenceOrchestrator(SymrefSettings(output_format="markdown"))
    >>> result = orchestrator.introspect_modules(["json"])
    >>> markup = orchestrator.generate(result, Path("docs/json.md"))
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any

from symref.aggregator import Aggregator
from symref.config import SymrefSettings
from symref.errors import InvalidConfigError
from symref.introspection import ModuleIntrospector
from symref.logging import LogContext, get_logger
from symref.model.symbols import Document, IntrospectionResult
from symref.renderers import RENDERERS, BaseRenderer

logger = get_logger(__name__)


class ReferenceOrchestrator:
    """Orchestrate one reference report end to end.

    Manifesto:
        The caller owns the lifetime. There is no process-wide instance:
        every ``build_document()`` call runs a fresh aggregation and
        returns a new Document, and every render is a pure function of
        that Document and the settings.

    Architecture:
        ```
        ReferenceOrchestrator
              │
              ├──► introspect_modules() ──► IntrospectionResult
              │
              ├──► build_document() ──► Aggregator.build_from() ──► Document
              │
              ├──► render() ──► RENDERERS[output_format].render()
              │
              └──► generate() ──► build + render (+ write UTF-8 file)
        ```

    Tags:
        - orchestrator
        - generation
        - core_infrastructure

    Doc-Types:
        - ARCHITECTURE (section: "Document Pipeline", priority: 9)
    """

    def __init__(
        self,
        settings: SymrefSettings | None = None,
        aggregator: Aggregator | None = None,
    ):
        """Initialize the orchestrator.

        Args:
            settings: Settings (environment/.env defaults if None)
            aggregator: Aggregator to use (a default one if None)
        """
        self.settings = settings or SymrefSettings()
        self.aggregator = aggregator or Aggregator()

    def introspect_modules(self, names: Sequence[str]) -> IntrospectionResult:
        """Import modules by name and introspect them.

        Built-ins are only collected when the settings keep them.
        """
        introspector = ModuleIntrospector.from_names(
            names, include_builtins=self.settings.include_all
        )
        return introspector.introspect()

    def build_document(self, result: IntrospectionResult) -> Document:
        """Run a fresh aggregation over an introspection result."""
        return self.aggregator.build_from(result, include_all=self.settings.include_all)

    def renderer_for(self, output_format: str | None = None) -> BaseRenderer:
        """Instantiate the renderer for an output format.

        Raises:
            InvalidConfigError: If the format is unknown
        """
        output_format = output_format or self.settings.output_format
        renderer_class = RENDERERS.get(output_format)
        if renderer_class is None:
            raise InvalidConfigError(
                "output_format",
                output_format,
                f"Unknown output format {output_format!r}; expected one of {sorted(RENDERERS)}",
            )
        return renderer_class()

    def render(self, document: Document, output_format: str | None = None) -> str:
        """Render a built Document with the configured options."""
        renderer = self.renderer_for(output_format)
        return renderer.render(document, self.settings.render_options())

    def generate(
        self,
        result: IntrospectionResult,
        output_path: Path | None = None,
        output_format: str | None = None,
    ) -> str:
        """Build and render a report, optionally writing it to disk.

        Args:
            result: Introspection result for this report
            output_path: File to write (parent directories are created)
            output_format: Override the configured output format

        Returns:
            The rendered markup
        """
        output_format = output_format or self.settings.output_format
        with LogContext(output_format=output_format, include_all=self.settings.include_all):
            document = self.build_document(result)
            content = self.render(document, output_format)

            if output_path is not None:
                output_path = Path(output_path)
                output_path.parent.mkdir(parents=True, exist_ok=True)
                output_path.write_text(content, encoding="utf-8")
                logger.info(
                    "reference_written",
                    path=str(output_path),
                    size=len(content.encode("utf-8")),
                )

        return content

    def get_stats(self, result: IntrospectionResult) -> dict[str, Any]:
        """Symbol counts for the document this result would produce."""
        document = self.build_document(result)
        return {
            "include_all": document.include_all,
            "total_symbols": document.symbol_count,
            **document.counts(),
        }
