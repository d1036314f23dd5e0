"""
Document aggregator.

Filters introspected symbols by visibility, resolves their comments,
orders them and freezes the result into a ``Document``.

Example:
    >>> aggregator = Aggregator()
    >>> doc = aggregator.build(
    ...     {"user": [RawSymbol(SymbolKind.FUNCTION, "zeta"), RawSymbol(SymbolKind.FUNCTION, "alpha")]},
    ...     [],
    ...     {"user": {}},
    ... )
    >>> [f.short_name for f in doc.functions]
    ['alpha', 'zeta']
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import replace
from typing import Any

from symref.errors import InvalidSymbolError
from symref.logging import get_logger
from symref.model.symbols import (
    USER_PARTITION,
    Document,
    IntrospectionResult,
    RawSymbol,
    SymbolKind,
    SymbolModel,
)
from symref.parser.comment_parser import CommentParser, ParsedComment

logger = get_logger(__name__)


class Aggregator:
    """Build an ordered, immutable Document from introspected symbols.

    Manifesto:
        One run, one Document. The aggregator holds no state between
        builds; a new report is a new ``build()`` call producing a new
        Document, so concurrent reports never share anything mutable.

    Architecture:
        ```
        functions{user, builtin}   classes[]   constants{user, builtin}
              │                        │               │
              ▼                        ▼               ▼
        _select_functions()     _select_classes()  _select_constants()
              │                        │               │
              ▼                        ▼               │
        CommentParser.parse()   + methods per class    │
              │                        │               │
              ▼                        ▼               ▼
        stable sort by short name (ordinal)     kept as supplied
              │                        │               │
              └────────────► Document ◄────────────────┘
        ```

    Guardrails:
        - Do NOT re-sort constants
          ✅ The introspection layer supplies them sorted by name
        - Do NOT tolerate None entries or wrong kinds
          ✅ Raise InvalidSymbolError before building anything

    Tags:
        - aggregator
        - ordering
        - core_infrastructure

    Doc-Types:
        - ARCHITECTURE (section: "Document Pipeline", priority: 8)
        - API_REFERENCE (section: "Aggregator", priority: 7)
    """

    def __init__(self, parser: CommentParser | None = None):
        self.parser = parser or CommentParser()

    def build(
        self,
        functions: Mapping[str, Sequence[RawSymbol]],
        classes: Sequence[RawSymbol],
        constants: Mapping[str, Mapping[str, Any]],
        include_all: bool = False,
    ) -> Document:
        """Build a Document.

        Args:
            functions: Partition name to function symbols
            classes: Declared classes
            constants: Partition name to ``{name: value}`` sorted by name
            include_all: Keep host built-ins as well as user-defined symbols

        Returns:
            A new immutable Document

        Raises:
            InvalidSymbolError: If an input collection is missing or malformed
        """
        selected_functions = self._select_functions(functions, include_all)
        selected_classes = self._select_classes(classes, include_all)
        selected_constants = self._select_constants(constants, include_all)

        document = Document(
            functions=tuple(
                self._sorted(self._resolve(raw) for raw in selected_functions)
            ),
            classes=tuple(
                self._sorted(self._resolve_class(raw, include_all) for raw in selected_classes)
            ),
            constants=tuple(
                SymbolModel(RawSymbol(SymbolKind.CONSTANT, name, value=value))
                for name, value in selected_constants.items()
            ),
            include_all=include_all,
        )

        logger.info("document_built", include_all=include_all, **document.counts())
        return document

    def build_from(self, result: IntrospectionResult, include_all: bool = False) -> Document:
        """Build a Document from an IntrospectionResult bundle."""
        if result is None:
            raise InvalidSymbolError("No introspection result supplied")
        return self.build(result.functions, result.classes, result.constants, include_all)

    def _select_functions(
        self,
        functions: Mapping[str, Sequence[RawSymbol]],
        include_all: bool,
    ) -> list[RawSymbol]:
        if functions is None:
            raise InvalidSymbolError("Function collection is missing").with_context(
                collection="functions"
            )

        partitions = functions.items() if include_all else [
            (USER_PARTITION, functions.get(USER_PARTITION, ()))
        ]

        selected = []
        for partition, symbols in partitions:
            for raw in self._checked(symbols, SymbolKind.FUNCTION, f"functions[{partition}]"):
                if include_all or raw.user_defined:
                    selected.append(raw)
        return selected

    def _select_classes(self, classes: Sequence[RawSymbol], include_all: bool) -> list[RawSymbol]:
        if classes is None:
            raise InvalidSymbolError("Class collection is missing").with_context(
                collection="classes"
            )
        return [
            raw
            for raw in self._checked(classes, SymbolKind.CLASS, "classes")
            if include_all or raw.user_defined
        ]

    def _select_constants(
        self,
        constants: Mapping[str, Mapping[str, Any]],
        include_all: bool,
    ) -> dict[str, Any]:
        if constants is None:
            raise InvalidSymbolError("Constant collection is missing").with_context(
                collection="constants"
            )

        if not include_all:
            return dict(constants.get(USER_PARTITION) or {})

        # Later partitions overwrite duplicate names in place.
        merged: dict[str, Any] = {}
        for values in constants.values():
            merged.update(values or {})
        return merged

    def _checked(
        self,
        symbols: Iterable[RawSymbol] | None,
        kind: SymbolKind,
        collection: str,
    ) -> list[RawSymbol]:
        """Validate that every entry is a RawSymbol of the expected kind."""
        if symbols is None:
            raise InvalidSymbolError(f"Collection {collection} is None").with_context(
                collection=collection
            )

        checked = []
        for index, raw in enumerate(symbols):
            if not isinstance(raw, RawSymbol):
                raise InvalidSymbolError(
                    f"Entry {index} of {collection} is not a RawSymbol: {raw!r}"
                ).with_context(collection=collection, index=index)
            if raw.kind is not kind:
                raise InvalidSymbolError(
                    f"Entry {raw.short_name!r} of {collection} is a {raw.kind.value}, "
                    f"expected {kind.value}"
                ).with_context(collection=collection, index=index)
            checked.append(raw)
        return checked

    def _resolve(self, raw: RawSymbol) -> SymbolModel:
        return SymbolModel(raw, self._comment_for(raw))

    def _resolve_class(self, raw: RawSymbol, include_all: bool) -> SymbolModel:
        methods = [
            method if method.owner else replace(method, owner=raw.short_name)
            for method in self._checked(raw.methods, SymbolKind.METHOD, f"{raw.short_name}.methods")
            if include_all or method.user_defined
        ]
        return SymbolModel(
            raw,
            self._comment_for(raw),
            methods=tuple(self._sorted(self._resolve(method) for method in methods)),
        )

    def _comment_for(self, raw: RawSymbol) -> ParsedComment:
        if not raw.doc_comment:
            return ParsedComment.EMPTY
        return self.parser.parse(raw.doc_comment)

    @staticmethod
    def _sorted(models: Iterable[SymbolModel]) -> list[SymbolModel]:
        """Stable ordinal sort by short name; ties keep discovery order."""
        return sorted(models, key=lambda model: model.short_name)
