"""
Inline-element shield: keeps short text elements on a single line.

Prettier with `htmlWhitespaceSensitivity: ignore` breaks `<a href="#">Home</a>`
into three lines. Shielding the element as one token keeps it intact.
"""

from __future__ import annotations

import re

from ..config import TwigSyntax
from .base import Shield

# <tag attrs>text</tag> on one line, with no markup inside the text content
INLINE_ELEMENT_PATTERN = re.compile(r"<(?P<tag>[A-Za-z][\w:.-]*)(?P<attrs>(?:\s[^<>\n]*)?)>(?P<content>[^<>\n]*)</(?P=tag)\s*>")


class InlineElementShield(Shield):
    """Shields single-line elements whose text fits within max_width."""

    kind = "INLINE"

    def __init__(self, max_width: int = 120, syntax: TwigSyntax | None = None, strict: bool = False):
        super().__init__(strict=strict)
        self.max_width = max_width
        self.component_prefix = (syntax or TwigSyntax()).component_prefix

    def pattern(self) -> re.Pattern[str]:
        return INLINE_ELEMENT_PATTERN

    def accepts(self, match: re.Match[str]) -> bool:
        # Component tags are left to the external formatter and the attribute reflow
        if match.group("tag").startswith(self.component_prefix):
            return False
        return len(match.group(0)) <= self.max_width
