"""Tests for the comment parser."""

import pytest

from symref.parser.comment_parser import CommentParser, CommentTag, ParsedComment

from conftest import ADD_COMMENT


# =============================================================================
# Description and tags
# =============================================================================

class TestCommentParser:
    """Tests for CommentParser.parse."""

    def test_description_and_params(self, parser):
        """Test the canonical block comment with two @param tags."""
        parsed = parser.parse(ADD_COMMENT)

        assert parsed.description == "Adds two numbers."
        assert parsed.tags == (
            CommentTag("param", "int $a First operand"),
            CommentTag("param", "int $b Second operand"),
        )

    def test_multiline_description_is_collapsed(self, parser):
        """Test that description lines and blank lines collapse to one line."""
        parsed = parser.parse("/**\n * Line one\n * line two\n *\n * line three\n */")

        assert parsed.description == "Line one line two line three"
        assert parsed.tags == ()

    def test_continuation_lines_extend_tag_body(self, parser):
        """Test that lines after a tag belong to that tag."""
        parsed = parser.parse(
            "/**\n * Format it.\n * @return string The\n *    formatted output\n */"
        )

        assert parsed.tags == (CommentTag("return", "string The formatted output"),)

    def test_blank_line_does_not_end_tag(self, parser):
        """Test that a blank line inside a tag body is skipped."""
        parsed = parser.parse("@param a first\n\n continued")

        assert parsed.tags == (CommentTag("param", "a first continued"),)

    def test_unknown_tags_are_kept(self, parser):
        """Test that the tag vocabulary is not validated."""
        parsed = parser.parse("/**\n * @frobnicate whatever you like\n */")

        assert parsed.tags == (CommentTag("frobnicate", "whatever you like"),)

    def test_tag_without_body(self, parser):
        """Test a bare tag such as @deprecated."""
        parsed = parser.parse("/**\n * Old.\n * @deprecated\n */")

        assert parsed.tags == (CommentTag("deprecated", ""),)

    def test_tab_separates_tag_name(self, parser):
        """Test that a tab works as the name/body separator."""
        parsed = parser.parse("@param\tint $x")

        assert parsed.tags == (CommentTag("param", "int $x"),)

    def test_lone_marker_has_empty_name(self, parser):
        """Test that '@' followed by nothing yields an unnamed tag."""
        parsed = parser.parse("Text\n@")

        assert parsed.description == "Text"
        assert parsed.tags == (CommentTag("", ""),)

    def test_internal_whitespace_is_collapsed(self, parser):
        """Test whitespace runs inside tag bodies."""
        parsed = parser.parse("@param   int    $a   First")

        assert parsed.tags[0].body == "int $a First"

    def test_single_line_comment(self, parser):
        """Test a one-line /** ... */ comment."""
        parsed = parser.parse("/** Short summary. */")

        assert parsed.description == "Short summary."
        assert parsed.tags == ()

    def test_docstring_without_delimiters(self, parser):
        """Test an already-clean docstring."""
        parsed = parser.parse("Does a thing.\n\n@param x the x\n@return None")

        assert parsed.description == "Does a thing."
        assert parsed.tags == (
            CommentTag("param", "x the x"),
            CommentTag("return", "None"),
        )

    def test_tags_keep_source_order(self, parser):
        """Test that repeated and mixed tags stay in source order."""
        parsed = parser.parse("@return int\n@param a\n@param b\n@throws E")

        assert [tag.name for tag in parsed.tags] == ["return", "param", "param", "throws"]
        assert parsed.tags_named("param") == ["a", "b"]


# =============================================================================
# Degenerate input
# =============================================================================

class TestDegenerateInput:
    """Tests that the parser never raises."""

    @pytest.mark.parametrize("raw", [None, "", 42, b"/** bytes */"])
    def test_absent_or_non_text_returns_empty(self, parser, raw):
        """Test that missing input yields the empty comment."""
        assert parser.parse(raw) is ParsedComment.EMPTY

    def test_whitespace_only_is_empty(self, parser):
        """Test that whitespace-only input has nothing to show."""
        parsed = parser.parse("   \n\t\n  ")

        assert parsed == ParsedComment.empty()
        assert parsed.is_empty

    @pytest.mark.parametrize("raw", ["/** */", "/**/", "/***/", "  /**/  ", "/**\n */"])
    def test_empty_block_comment(self, parser, raw):
        """Test block comments with nothing inside."""
        parsed = parser.parse(raw)

        assert parsed.is_empty
        assert parsed.description == ""

    @pytest.mark.parametrize(
        "raw",
        [
            "*/ @@@ /**",
            "/**",
            "*/",
            "/** @",
            "@@@@",
            " * * * ",
            "/**\n *\n *\n",
            "\x00\x01 @tag \x02",
            "@param" + " " * 1000 + "x",
        ],
    )
    def test_malformed_input_returns_parsed_comment(self, parser, raw):
        """Test that malformed comments still produce a result."""
        parsed = parser.parse(raw)

        assert isinstance(parsed, ParsedComment)

    def test_parse_is_pure(self, parser):
        """Test that parsing the same text twice gives equal results."""
        assert parser.parse(ADD_COMMENT) == parser.parse(ADD_COMMENT)
        assert CommentParser().parse(ADD_COMMENT) == parser.parse(ADD_COMMENT)


# =============================================================================
# ParsedComment
# =============================================================================

class TestParsedComment:
    """Tests for the ParsedComment value."""

    def test_empty_singleton(self):
        """Test the shared empty comment."""
        assert ParsedComment.empty() is ParsedComment.EMPTY
        assert ParsedComment.EMPTY.description == ""
        assert ParsedComment.EMPTY.tags == ()

    def test_is_empty(self):
        """Test is_empty for description-only and tag-only comments."""
        assert not ParsedComment(description="x").is_empty
        assert not ParsedComment(tags=(CommentTag("since", "1.0"),)).is_empty

    def test_tags_named_missing(self):
        """Test tags_named when no tag matches."""
        assert ParsedComment(description="x").tags_named("param") == []
