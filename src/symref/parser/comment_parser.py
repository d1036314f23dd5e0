"""
Documentation comment parser.

Turns one raw documentation comment (``/** ... */`` blocks with per-line
``*`` markers, or an already-clean docstring) into a ``ParsedComment``: a
free-text description plus an ordered list of ``@tag`` entries.

Example:
    >>> parser = CommentParser()
    >>> parsed = parser.parse('''/**
    ...  * Adds two numbers.
    ...  * @param int $a First operand
    ...  * @param int $b Second operand
    ...  */''')
    >>> parsed.description
    'Adds two numbers.'
    >>> [(t.name, t.body) for t in parsed.tags]
    [('param', 'int $a First operand'), ('param', 'int $b Second operand')]
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import ClassVar

from symref.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class CommentTag:
    """One ``@name body`` entry of a documentation comment."""

    name: str
    body: str = ""


@dataclass(frozen=True)
class ParsedComment:
    """Structured result of parsing a documentation comment.

    Attributes:
        description: Free text before the first tag, line breaks collapsed
        tags: Tags in source order; names may repeat (several ``@param``)
    """

    description: str = ""
    tags: tuple[CommentTag, ...] = field(default_factory=tuple)

    EMPTY: ClassVar[ParsedComment]

    @classmethod
    def empty(cls) -> ParsedComment:
        """Return the empty comment (no description, no tags)."""
        return cls.EMPTY

    @property
    def is_empty(self) -> bool:
        return not self.description and not self.tags

    def tags_named(self, name: str) -> list[str]:
        """Bodies of every tag called ``name``, in source order."""
        return [tag.body for tag in self.tags if tag.name == name]


ParsedComment.EMPTY = ParsedComment()


class CommentParser:
    """Parse raw documentation comments into ``ParsedComment`` values.

    Manifesto:
        A reference document is only as good as the comments it shows,
        and real comments are messy. The parser never rejects input: a
        malformed comment yields whatever description and tags could be
        recovered.

    Architecture:
        ```
        Raw comment text
              │
              ▼
        _content_lines() ──► delimiters and leading '*' stripped
              │
              ▼
        scan loop
              │
              ├──► before first tag: collect description words
              │
              └──► in tag: '@name body' opens a tag,
                           other lines extend its body
        ```

    Guardrails:
        - Do NOT raise on malformed comments
          ✅ Return a partial ParsedComment
        - Do NOT validate tag vocabulary
          ✅ Unknown tags are kept verbatim for the renderer

    Tags:
        - parser
        - comment
        - core_infrastructure

    Doc-Types:
        - API_REFERENCE (section: "Parser Module", priority: 9)
    """

    TAG_MARKER = "@"

    _EMPTY_BLOCK = re.compile(r"^\s*/\*+/\s*$")
    _OPEN_DELIMITER = re.compile(r"^\s*/\*+")
    _CLOSE_DELIMITER = re.compile(r"\*+/\s*$")
    _LINE_PREFIX = re.compile(r"^\s*\*(?!/)")

    def parse(self, raw: str | None) -> ParsedComment:
        """Parse a raw comment.

        Args:
            raw: Comment text including delimiters, or None

        Returns:
            ParsedComment; ``ParsedComment.EMPTY`` for empty/absent input
        """
        if not raw or not isinstance(raw, str):
            return ParsedComment.EMPTY

        description: list[str] = []
        tags: list[CommentTag] = []
        tag_name: str | None = None
        tag_body: list[str] = []

        for line in self._content_lines(raw):
            if line.startswith(self.TAG_MARKER):
                if tag_name is not None:
                    tags.append(CommentTag(tag_name, self._collapse(" ".join(tag_body))))
                tag_name, tag_body = self._split_tag(line)
            elif not line:
                continue
            elif tag_name is None:
                description.append(line)
            else:
                tag_body.append(line)

        if tag_name is not None:
            tags.append(CommentTag(tag_name, self._collapse(" ".join(tag_body))))

        parsed = ParsedComment(
            description=self._collapse(" ".join(description)),
            tags=tuple(tags),
        )
        logger.debug(
            "comment_parsed",
            description_chars=len(parsed.description),
            tags=len(parsed.tags),
        )
        return parsed

    def _content_lines(self, raw: str) -> list[str]:
        """Strip comment delimiters and per-line markers.

        Args:
            raw: Raw comment text

        Returns:
            Trimmed content lines, blank lines kept as empty strings
        """
        # "/**/" shares its stars between both delimiters.
        if self._EMPTY_BLOCK.match(raw):
            return []

        lines = raw.splitlines()
        if not lines:
            return []

        lines[0] = self._OPEN_DELIMITER.sub("", lines[0], count=1)
        lines[-1] = self._CLOSE_DELIMITER.sub("", lines[-1], count=1)

        return [self._LINE_PREFIX.sub("", line, count=1).strip() for line in lines]

    def _split_tag(self, line: str) -> tuple[str, list[str]]:
        """Split ``@name body`` into the name and the initial body words."""
        rest = line[len(self.TAG_MARKER):]
        if not rest or rest[0].isspace():
            name, body = "", rest
        else:
            name, _, body = rest.replace("\t", " ").partition(" ")
        body = body.strip()
        return name, [body] if body else []

    @staticmethod
    def _collapse(text: str) -> str:
        """Collapse whitespace runs to single spaces and trim."""
        return " ".join(text.split())
