"""Shared fixtures for symref tests."""

import pytest

from symref.aggregator import Aggregator
from symref.logging import configure_logging
from symref.model.symbols import (
    BUILTIN_PARTITION,
    USER_PARTITION,
    IntrospectionResult,
    Parameter,
    RawSymbol,
    SourceLocation,
    SymbolKind,
)
from symref.parser.comment_parser import CommentParser

SAMPLE_MODULE = "fixtures.sample_program"

ADD_COMMENT = """/**
 * Adds two numbers.
 * @param int $a First operand
 * @param int $b Second operand
 */"""


def function(name, *parameters, doc=None, user_defined=True, location=None):
    """Shorthand for a function RawSymbol."""
    return RawSymbol(
        kind=SymbolKind.FUNCTION,
        short_name=name,
        parameters=tuple(parameters),
        doc_comment=doc,
        user_defined=user_defined,
        location=location,
    )


def method(name, *parameters, owner=None, doc=None, user_defined=True):
    """Shorthand for a method RawSymbol."""
    return RawSymbol(
        kind=SymbolKind.METHOD,
        short_name=name,
        owner=owner,
        parameters=tuple(parameters),
        doc_comment=doc,
        user_defined=user_defined,
    )


def klass(name, *methods, doc=None, user_defined=True):
    """Shorthand for a class RawSymbol."""
    return RawSymbol(
        kind=SymbolKind.CLASS,
        short_name=name,
        doc_comment=doc,
        user_defined=user_defined,
        methods=tuple(methods),
    )


@pytest.fixture(autouse=True, scope="session")
def _quiet_logging():
    """Only warnings and errors during tests."""
    configure_logging(level="WARNING", json_format=True)


@pytest.fixture
def parser():
    """Create a comment parser."""
    return CommentParser()


@pytest.fixture
def aggregator():
    """Create an aggregator."""
    return Aggregator()


@pytest.fixture
def introspection_result():
    """Hand-built introspection result with user and built-in partitions."""
    return IntrospectionResult(
        functions={
            USER_PARTITION: [
                function(
                    "zeta",
                    Parameter("x", by_reference=True),
                    location=SourceLocation("/src/app.py", 20, 24),
                ),
                function(
                    "alpha",
                    Parameter("a"),
                    Parameter("b", optional=True, has_default=True, default=5),
                    doc=ADD_COMMENT,
                    location=SourceLocation("/src/app.py", 3, 9),
                ),
            ],
            BUILTIN_PARTITION: [
                function("strlen", Parameter("string"), user_defined=False),
            ],
        },
        classes=[
            klass(
                "Widget",
                method("render", Parameter("self"), doc="Render the widget."),
                method("build", Parameter("self"), Parameter("z", optional=True, has_default=True, default="")),
                method("__repr__", Parameter("self"), user_defined=False),
                doc="A widget.\n@since 2.0",
            ),
            klass("Exception", method("getMessage"), user_defined=False),
        ],
        constants={
            USER_PARTITION: {"APP_NAME": "demo", "MAX": 3},
            BUILTIN_PARTITION: {"E_ALL": 32767},
        },
    )


@pytest.fixture
def document(aggregator, introspection_result):
    """Document built from the hand-built result (user symbols only)."""
    return aggregator.build_from(introspection_result)


@pytest.fixture
def quiet_cli(monkeypatch):
    """Keep info logs out of CLI output."""
    monkeypatch.setenv("SYMREF_LOG_LEVEL", "WARNING")
    monkeypatch.delenv("SYMREF_INCLUDE_ALL", raising=False)
    monkeypatch.delenv("SYMREF_OUTPUT_FORMAT", raising=False)
