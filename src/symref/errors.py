"""
Structured error types for symref.

Every failure symref surfaces to a caller is a ``SymrefError`` carrying a
category, a metadata context and an optional chained cause. Malformed
documentation comments are not errors: the comment parser absorbs them and
returns a degraded result.

Architecture:
    ::

        ┌───────────────────────────────────────────────────────────┐
        │                        SymrefError                         │
        │            (category, context, cause)                      │
        ├───────────────────────────────────────────────────────────┤
        │  InvalidSymbolError      SymbolInvariantError              │
        │  (VALIDATION)            (VALIDATION)                      │
        │                                                            │
        │  DocumentNotBuiltError   IntrospectionError                │
        │  (USAGE)                 (SOURCE)                          │
        │                                                            │
        │  ConfigError ──► MissingConfigError, InvalidConfigError    │
        │  (CONFIG)                                                  │
        └───────────────────────────────────────────────────────────┘

Examples:
    >>> error = InvalidSymbolError("class list contains None")
    >>> error.category
    <ErrorCategory.VALIDATION: 'VALIDATION'>
    >>> error.with_context(collection="classes", index=3).to_dict()["context"]
    {'collection': 'classes', 'index': 3}

Tags:
    error-handling, exception-hierarchy, error-context, symref

Doc-Types:
    - API Reference
    - Error Handling Guide
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Standard error categories for classification."""

    VALIDATION = "VALIDATION"
    USAGE = "USAGE"
    SOURCE = "SOURCE"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"


class SymrefError(Exception):
    """
    Base exception for all symref errors.

    Subclasses set ``default_category`` so callers can route on the
    category without matching on concrete types.

    Examples:
        >>> error = SymrefError("Something went wrong")
        >>> error.category
        <ErrorCategory.INTERNAL: 'INTERNAL'>

        Chaining the underlying exception:

        >>> try:
        ...     raise KeyError("missing")
        ... except KeyError as e:
        ...     error = SymrefError("Lookup failed", cause=e)
        >>> error.cause
        KeyError('missing')
    """

    default_category: ErrorCategory = ErrorCategory.INTERNAL

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.category = category or self.default_category
        self.context: dict[str, Any] = dict(context or {})
        self.cause = cause

        if cause is not None:
            self.__cause__ = cause

    def with_context(self, **kwargs: Any) -> SymrefError:
        """
        Add context to this error (fluent API).

        Usage:
            raise InvalidSymbolError("bad entry").with_context(index=2)
        """
        self.context.update(kwargs)
        return self

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        result: dict[str, Any] = {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "category": self.category.value,
        }
        if self.context:
            result["context"] = dict(self.context)
        if self.cause is not None:
            result["cause"] = str(self.cause)
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r}, category={self.category.value})"


# =============================================================================
# MODEL / INPUT CONTRACT ERRORS
# =============================================================================


class InvalidSymbolError(SymrefError):
    """Aggregator input violates its contract (None entry, wrong kind, missing collection)."""

    default_category = ErrorCategory.VALIDATION


class SymbolInvariantError(SymrefError):
    """A symbol model was constructed in a shape the model forbids."""

    default_category = ErrorCategory.VALIDATION


class DocumentNotBuiltError(SymrefError):
    """A renderer was invoked without a built Document."""

    default_category = ErrorCategory.USAGE


class IntrospectionError(SymrefError):
    """A module requested for introspection could not be loaded."""

    default_category = ErrorCategory.SOURCE


# =============================================================================
# CONFIGURATION ERRORS
# =============================================================================


class ConfigError(SymrefError):
    """Configuration error."""

    default_category = ErrorCategory.CONFIG


class MissingConfigError(ConfigError):
    """Configuration source is missing."""

    def __init__(self, key: str, message: str | None = None):
        msg = message or f"Missing configuration: {key}"
        super().__init__(msg, context={"config_key": key})


class InvalidConfigError(ConfigError):
    """Configuration value is invalid."""

    def __init__(
        self,
        key: str,
        value: Any,
        message: str | None = None,
        cause: Exception | None = None,
    ):
        msg = message or f"Invalid configuration for {key}: {value!r}"
        super().__init__(
            msg,
            context={"config_key": key, "config_value": str(value)},
            cause=cause,
        )


__all__ = [
    "ErrorCategory",
    "SymrefError",
    "InvalidSymbolError",
    "SymbolInvariantError",
    "DocumentNotBuiltError",
    "IntrospectionError",
    "ConfigError",
    "MissingConfigError",
    "InvalidConfigError",
]
