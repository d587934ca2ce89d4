"""
Comment shield: hides Twig comments from the external formatter.
"""

from __future__ import annotations

import re

from ..config import TwigSyntax
from .base import Shield


class CommentShield(Shield):
    """Shields `{# ... #}` regions.

    The match is non-greedy and spans lines, so the first end marker closes
    the comment; nested comments are not supported.
    """

    kind = "COMMENT"

    def __init__(self, syntax: TwigSyntax | None = None, strict: bool = False):
        super().__init__(strict=strict)
        syntax = syntax or TwigSyntax()
        self._pattern = re.compile(re.escape(syntax.comment_start) + r".*?" + re.escape(syntax.comment_end), re.DOTALL)

    def pattern(self) -> re.Pattern[str]:
        return self._pattern
