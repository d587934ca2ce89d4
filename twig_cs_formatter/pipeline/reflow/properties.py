"""
Helpers for the properties of inline Twig hash literals (`{a: 1, 'b': 2}`).
"""

from __future__ import annotations

import re

_UNQUOTED_KEY_PATTERN = re.compile(r"^(?P<key>[A-Za-z_][\w-]*)\s*:\s*(?P<value>.*)$", re.DOTALL)

_OPENING = "([{"
_CLOSING = ")]}"


def split_properties(body: str) -> list[str]:
    """Split a hash literal body on top-level commas.

    Commas nested in parentheses, brackets or string literals do not split.
    Each property is trimmed and empty pieces (trailing commas) are dropped.

    Examples:
        "a: 1, b: foo(1, 2)" -> ["a: 1", "b: foo(1, 2)"]
        "title: 'a, b'," -> ["title: 'a, b'"]
    """
    parts = []
    depth = 0
    quote = None
    current = []
    for i, char in enumerate(body):
        if quote:
            if char == quote and body[i - 1] != "\\":
                quote = None
        elif char in "'\"":
            quote = char
        elif char in _OPENING:
            depth += 1
        elif char in _CLOSING:
            depth = max(depth - 1, 0)
        elif char == "," and depth == 0:
            parts.append("".join(current))
            current = []
            continue
        current.append(char)
    parts.append("".join(current))
    return [part.strip() for part in parts if part.strip()]


def quote_key(prop: str) -> str:
    """Wrap an unquoted `key: value` key in single quotes.

    Already quoted keys and entries without a key are returned unchanged.
    """
    match = _UNQUOTED_KEY_PATTERN.match(prop)
    if match is None:
        return prop
    return f"'{match.group('key')}': {match.group('value')}"


def format_properties(body: str, indent: str, newline: str = "\n") -> str | None:
    """Render a hash literal body one quoted property per line.

    Args:
        body: Text between the braces of the literal
        indent: Indentation placed before every property
        newline: Line terminator of the document

    Returns:
        The properties joined with a comma and newline, or None if the literal is empty
    """
    props = [quote_key(prop) for prop in split_properties(body)]
    if not props:
        return None
    return ("," + newline).join(indent + prop for prop in props)
