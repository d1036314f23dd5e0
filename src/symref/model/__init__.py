"""
Model module for symref.

Symbols as reported by introspection, their parsed comments, and the
immutable Document handed to renderers.
"""

from symref.model.symbols import (
    BUILTIN_PARTITION,
    USER_PARTITION,
    Document,
    IntrospectionResult,
    Parameter,
    RawSymbol,
    SourceLocation,
    SymbolKind,
    SymbolModel,
)

__all__ = [
    "BUILTIN_PARTITION",
    "USER_PARTITION",
    "Document",
    "IntrospectionResult",
    "Parameter",
    "RawSymbol",
    "SourceLocation",
    "SymbolKind",
    "SymbolModel",
]
