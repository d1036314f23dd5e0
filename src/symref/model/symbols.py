"""
In-memory symbol model.

``RawSymbol`` is what the introspection layer reports about one function,
method, class or constant. ``SymbolModel`` pairs it with its parsed comment,
and ``Document`` is the immutable, ordered collection a renderer walks.

Example:
    >>> raw = RawSymbol(kind=SymbolKind.FUNCTION, short_name="add")
    >>> model = SymbolModel(raw)
    >>> model.comment.is_empty
    True
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from symref.errors import SymbolInvariantError
from symref.parser.comment_parser import ParsedComment


class SymbolKind(str, Enum):
    """Kind of documented entity; the value doubles as the rendered label."""

    FUNCTION = "function"
    CLASS = "class"
    METHOD = "method"
    CONSTANT = "constant"

    @property
    def is_callable(self) -> bool:
        return self in (SymbolKind.FUNCTION, SymbolKind.METHOD)


@dataclass(frozen=True)
class Parameter:
    """One declared parameter of a function or method.

    Attributes:
        name: Parameter name as declared
        by_reference: Passed by reference (rendered with a leading ``&``)
        optional: May be omitted by callers
        has_default: A default value is declared
        default: The declared default (only meaningful when has_default)
    """

    name: str
    by_reference: bool = False
    optional: bool = False
    has_default: bool = False
    default: Any = None


@dataclass(frozen=True)
class SourceLocation:
    """Declaring file and line range of a symbol."""

    file_path: str
    start_line: int | None = None
    end_line: int | None = None


@dataclass(frozen=True)
class RawSymbol:
    """A symbol as reported by the introspection layer, before comment parsing.

    Attributes:
        kind: Function, method, class or constant
        short_name: Unqualified name used for sorting and display
        owner: Owning class short name (methods only)
        parameters: Declared parameters in declaration order
        location: Source location, None for host built-ins
        doc_comment: Raw documentation comment text, if any
        user_defined: Declared by the inspected program rather than the host
        value: Constant value (constants only)
        methods: Declared methods (classes only)
    """

    kind: SymbolKind
    short_name: str
    owner: str | None = None
    parameters: tuple[Parameter, ...] = ()
    location: SourceLocation | None = None
    doc_comment: str | None = None
    user_defined: bool = True
    value: Any = None
    methods: tuple[RawSymbol, ...] = ()


@dataclass(frozen=True)
class SymbolModel:
    """A RawSymbol paired with its resolved ParsedComment.

    Methods of a class hang off the class model in ``methods``; a method
    model always names its owning class.
    """

    raw: RawSymbol
    comment: ParsedComment = ParsedComment.EMPTY
    methods: tuple[SymbolModel, ...] = ()

    def __post_init__(self):
        if self.raw.kind is SymbolKind.METHOD and not self.raw.owner:
            raise SymbolInvariantError(
                f"Method {self.raw.short_name!r} has no owning class"
            ).with_context(symbol=self.raw.short_name)
        if self.methods and self.raw.kind is not SymbolKind.CLASS:
            raise SymbolInvariantError(
                f"Only classes carry methods, got {self.raw.kind.value} {self.raw.short_name!r}"
            ).with_context(symbol=self.raw.short_name, kind=self.raw.kind.value)

    @property
    def kind(self) -> SymbolKind:
        return self.raw.kind

    @property
    def short_name(self) -> str:
        return self.raw.short_name

    @property
    def owner(self) -> str | None:
        return self.raw.owner

    @property
    def parameters(self) -> tuple[Parameter, ...]:
        return self.raw.parameters

    @property
    def location(self) -> SourceLocation | None:
        return self.raw.location

    @property
    def value(self) -> Any:
        return self.raw.value


@dataclass(frozen=True)
class Document:
    """Immutable, ordered reference document.

    Attributes:
        functions: Function models sorted by short name
        classes: Class models sorted by short name, methods attached
        constants: Constant models in the order supplied
        include_all: Whether host built-ins were retained
    """

    functions: tuple[SymbolModel, ...] = ()
    classes: tuple[SymbolModel, ...] = ()
    constants: tuple[SymbolModel, ...] = ()
    include_all: bool = False

    @property
    def symbol_count(self) -> int:
        return sum(1 for _ in self.iter_symbols())

    def iter_symbols(self) -> Iterator[SymbolModel]:
        """Yield every model in render order."""
        yield from self.functions
        for cls in self.classes:
            yield cls
            yield from cls.methods
        yield from self.constants

    def counts(self) -> dict[str, int]:
        """Symbol counts per kind."""
        return {
            "functions": len(self.functions),
            "classes": len(self.classes),
            "methods": sum(len(cls.methods) for cls in self.classes),
            "constants": len(self.constants),
        }


@dataclass(frozen=True)
class IntrospectionResult:
    """Everything the introspection layer reports for one report.

    Attributes:
        functions: Partition name (``"user"``, ``"builtin"``) to function symbols
        classes: Declared classes, each flagged user-defined or not
        constants: Partition name to ``{name: value}``, each sorted by name
    """

    functions: Mapping[str, Sequence[RawSymbol]] = field(default_factory=dict)
    classes: Sequence[RawSymbol] = ()
    constants: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)


USER_PARTITION = "user"
BUILTIN_PARTITION = "builtin"
