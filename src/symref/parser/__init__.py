"""
Parser module for symref.

Turns raw documentation comments into structured descriptions and tags.
"""

from symref.parser.comment_parser import CommentParser, CommentTag, ParsedComment

__all__ = [
    "CommentParser",
    "CommentTag",
    "ParsedComment",
]
