"""
symref - runtime symbol reference generator.

Introspects live modules, parses the documentation comment attached to each
function, class and method, and renders an ordered reference document.

Example:
    >>> from symref import ReferenceOrchestrator, SymrefSettings
    >>> orchestrator = ReferenceOrchestrator(SymrefSettings())
    >>> html = orchestrator.generate(orchestrator.introspect_modules(["json"]))
"""

__version__ = "0.1.0"

from symref.aggregator import Aggregator
from symref.config import SymrefSettings
from symref.introspection import ModuleIntrospector
from symref.model import Document, IntrospectionResult, Parameter, RawSymbol, SourceLocation, SymbolKind, SymbolModel
from symref.orchestrator import ReferenceOrchestrator
from symref.parser import CommentParser, CommentTag, ParsedComment
from symref.renderers import HTMLRenderer, MarkdownRenderer, RenderOptions

__all__ = [
    "Aggregator",
    "CommentParser",
    "CommentTag",
    "Document",
    "HTMLRenderer",
    "IntrospectionResult",
    "MarkdownRenderer",
    "ModuleIntrospector",
    "Parameter",
    "ParsedComment",
    "RawSymbol",
    "ReferenceOrchestrator",
    "RenderOptions",
    "SourceLocation",
    "SymbolKind",
    "SymbolModel",
    "SymrefSettings",
    "__version__",
]
