"""
Utility functions for Twig CS Formatter.
"""

import re

# Regex pattern matching the indentation at the start of a line
_INDENT_PATTERN = re.compile(r"[ \t]*")

_WHITESPACE_PATTERN = re.compile(r"\s+")


def leading_whitespace(line: str) -> str:
    """Return the indentation (spaces and tabs) at the start of a line."""
    return _INDENT_PATTERN.match(line).group(0)


def line_start(text: str, offset: int) -> int:
    """Return the offset of the first character of the line containing offset."""
    return text.rfind("\n", 0, offset) + 1


def indentation_at(text: str, offset: int) -> str:
    """Return the indentation of the line that contains the given offset.

    Examples:
        indentation_at("a\\n    b", 6) -> "    "
        indentation_at("    a", 0) -> "    "

    Args:
        text: The full document text
        offset: Any offset inside the line of interest

    Returns:
        The leading whitespace of that line
    """
    return leading_whitespace(text[line_start(text, offset) :])


def collapse_whitespace(text: str) -> str:
    """Trim text and collapse every run of whitespace to a single space."""
    return _WHITESPACE_PATTERN.sub(" ", text.strip())
