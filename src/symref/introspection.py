"""
Live introspection of Python modules.

Reports the functions, classes (with methods) and constants of already
imported modules as ``RawSymbol`` values, using the interpreter's own
reflection (``inspect``) rather than reading source files. Symbols from the
``builtins`` module are reported too, flagged as not user-defined, so the
Aggregator can decide whether to keep them.

Example:
    >>> import json
    >>> result = ModuleIntrospector([json]).introspect()
    >>> [f.short_name for f in result.functions["user"]][:2]
    ['detect_encoding', 'dump']
"""

from __future__ import annotations

import builtins
import importlib
import inspect
import re
from collections.abc import Sequence
from types import ModuleType
from typing import Any

from symref.errors import IntrospectionError
from symref.logging import get_logger
from symref.model.symbols import (
    BUILTIN_PARTITION,
    USER_PARTITION,
    IntrospectionResult,
    Parameter,
    RawSymbol,
    SourceLocation,
    SymbolKind,
)

logger = get_logger(__name__)

CONSTANT_NAME = re.compile(r"^[A-Z][A-Z0-9_]*$")

METHOD_KINDS = ("method", "class method", "static method")


class ModuleIntrospector:
    """Collect RawSymbols from live modules.

    Architecture:
        ```
        modules ──► inspect.getmembers()
                        │
                        ├──► functions defined here ──► RawSymbol(FUNCTION)
                        ├──► classes defined here   ──► RawSymbol(CLASS)
                        │         └──► classify_class_attrs() ──► RawSymbol(METHOD)
                        └──► UPPER_CASE values      ──► constants["user"]

        builtins ──► same extraction, user_defined=False, "builtin" partition
        ```

    Features:
        - Parameters from ``inspect.signature`` (``*args``/``**kwargs`` are optional)
        - Source file and line range when the source is available
        - Raw docstrings, cleaned of indentation
        - Methods include inherited ones; only Python functions from the
          inspected modules count as user-defined

    Guardrails:
        - Do NOT fail on objects without a signature or source
          ✅ Treat the missing attribute as absent

    Tags:
        - introspection
        - inspect
        - reflection
    """

    def __init__(self, modules: Sequence[ModuleType], include_builtins: bool = True):
        """Initialize the introspector.

        Args:
            modules: Imported modules whose symbols count as user-defined
            include_builtins: Also report the ``builtins`` module's symbols
        """
        self.modules = list(modules)
        self.include_builtins = include_builtins
        self._user_modules = {module.__name__ for module in self.modules}

    @classmethod
    def from_names(cls, names: Sequence[str], include_builtins: bool = True) -> ModuleIntrospector:
        """Import modules by dotted name and build an introspector.

        Raises:
            IntrospectionError: If a module cannot be imported
        """
        modules = []
        for name in names:
            try:
                modules.append(importlib.import_module(name))
            except ImportError as e:
                raise IntrospectionError(
                    f"Cannot import module {name!r}: {e}", cause=e
                ).with_context(module=name) from e
        return cls(modules, include_builtins=include_builtins)

    def introspect(self) -> IntrospectionResult:
        """Report every function, class and constant.

        Returns:
            IntrospectionResult with ``user`` (and ``builtin``) partitions
        """
        functions: dict[str, list[RawSymbol]] = {USER_PARTITION: []}
        classes: list[RawSymbol] = []
        constants: dict[str, dict[str, Any]] = {}

        user_constants: dict[str, Any] = {}
        for module in self.modules:
            functions[USER_PARTITION].extend(
                self._function(obj, user_defined=True)
                for _, obj in inspect.getmembers(module, inspect.isfunction)
                if obj.__module__ == module.__name__
            )
            classes.extend(
                self._class(obj, user_defined=True)
                for _, obj in inspect.getmembers(module, inspect.isclass)
                if obj.__module__ == module.__name__
            )
            user_constants.update(self._constants(module))
        constants[USER_PARTITION] = dict(sorted(user_constants.items()))

        if self.include_builtins:
            functions[BUILTIN_PARTITION] = [
                self._function(obj, user_defined=False)
                for _, obj in inspect.getmembers(builtins, inspect.isbuiltin)
            ]
            classes.extend(
                self._class(obj, user_defined=False)
                for _, obj in inspect.getmembers(builtins, inspect.isclass)
            )
            constants[BUILTIN_PARTITION] = dict(sorted(self._builtin_constants().items()))

        logger.info(
            "modules_introspected",
            modules=sorted(self._user_modules),
            functions=sum(len(symbols) for symbols in functions.values()),
            classes=len(classes),
            constants=sum(len(values) for values in constants.values()),
        )
        return IntrospectionResult(functions=functions, classes=classes, constants=constants)

    def _function(self, obj: Any, user_defined: bool) -> RawSymbol:
        return RawSymbol(
            kind=SymbolKind.FUNCTION,
            short_name=obj.__name__,
            parameters=self._parameters(obj),
            location=self._location(obj),
            doc_comment=self._doc(obj),
            user_defined=user_defined,
        )

    def _class(self, cls: type, user_defined: bool) -> RawSymbol:
        methods = []
        for attr in inspect.classify_class_attrs(cls):
            if attr.kind not in METHOD_KINDS:
                continue
            func = getattr(attr.object, "__func__", attr.object)
            methods.append(
                RawSymbol(
                    kind=SymbolKind.METHOD,
                    short_name=attr.name,
                    owner=cls.__name__,
                    parameters=self._parameters(func),
                    location=self._location(func),
                    doc_comment=self._doc(func),
                    user_defined=self._is_user_function(func),
                )
            )

        return RawSymbol(
            kind=SymbolKind.CLASS,
            short_name=cls.__name__,
            location=self._location(cls),
            doc_comment=self._doc(cls),
            user_defined=user_defined,
            methods=tuple(methods),
        )

    def _is_user_function(self, func: Any) -> bool:
        return inspect.isfunction(func) and func.__module__ in self._user_modules

    def _parameters(self, obj: Any) -> tuple[Parameter, ...]:
        """Describe the declared parameters; empty when no signature is available."""
        try:
            signature = inspect.signature(obj)
        except (TypeError, ValueError) as e:
            logger.debug("signature_unavailable", symbol=getattr(obj, "__name__", repr(obj)), error=str(e))
            return ()

        parameters = []
        for param in signature.parameters.values():
            name = param.name
            if param.kind is inspect.Parameter.VAR_POSITIONAL:
                name = f"*{name}"
            elif param.kind is inspect.Parameter.VAR_KEYWORD:
                name = f"**{name}"

            has_default = param.default is not inspect.Parameter.empty
            variadic = param.kind in (
                inspect.Parameter.VAR_POSITIONAL,
                inspect.Parameter.VAR_KEYWORD,
            )
            parameters.append(
                Parameter(
                    name=name,
                    optional=has_default or variadic,
                    has_default=has_default,
                    default=param.default if has_default else None,
                )
            )
        return tuple(parameters)

    def _location(self, obj: Any) -> SourceLocation | None:
        """Source file and line range; None for built-ins or missing source."""
        try:
            path = inspect.getsourcefile(obj)
            lines, start = inspect.getsourcelines(obj)
        except (TypeError, OSError) as e:
            logger.debug("source_unavailable", symbol=getattr(obj, "__name__", repr(obj)), error=str(e))
            return None

        if not path:
            return None
        return SourceLocation(file_path=path, start_line=start, end_line=start + len(lines) - 1)

    @staticmethod
    def _doc(obj: Any) -> str | None:
        # Own docstring only; inspect.getdoc would inherit a base class's.
        doc = getattr(obj, "__doc__", None)
        if not isinstance(doc, str) or not doc.strip():
            return None
        return inspect.cleandoc(doc)

    @staticmethod
    def _constants(module: ModuleType) -> dict[str, Any]:
        return {
            name: value
            for name, value in vars(module).items()
            if CONSTANT_NAME.match(name) and not _is_code_object(value)
        }

    @staticmethod
    def _builtin_constants() -> dict[str, Any]:
        return {
            name: value
            for name, value in vars(builtins).items()
            if not name.startswith("_") and not _is_code_object(value)
        }


def _is_code_object(value: Any) -> bool:
    return callable(value) or inspect.ismodule(value) or inspect.isclass(value)
