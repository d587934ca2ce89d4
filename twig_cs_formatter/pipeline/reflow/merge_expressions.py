"""
Merge-expression reflow.

Expands `{% set data = base|merge({id: 1, 'name': n}) %}` to

    {% set data = base|merge({
            'id': 1,
            'name': n
        }) %}

Keys are quoted and every property gets its own line, whatever the width.
"""

from __future__ import annotations

import logging
import re

from ...utils import indentation_at
from ..config import TwigSyntax
from .properties import format_properties

logger = logging.getLogger(__name__)


class MergeExpressionReflow:
    """Reflows inline hash literals passed to the merge filter in set statements."""

    def __init__(self, indent_unit: str = "    ", syntax: TwigSyntax | None = None):
        self.indent_unit = indent_unit
        syntax = syntax or TwigSyntax()
        self._pattern = re.compile(
            r"(?P<head>" + re.escape(syntax.block_start) + r"-?\s*set\s+[\w.]+\s*=\s*[^{}%]*?)"
            r"\|\s*merge\(\s*\{(?P<props>[^{}]*)\}\s*\)\s*"
            r"(?P<close>-?" + re.escape(syntax.block_end) + r")"
        )

    def apply(self, text: str, newline: str = "\n") -> str:
        count = 0

        def replace(match: re.Match[str]) -> str:
            nonlocal count
            base = indentation_at(match.string, match.start())
            props = format_properties(match.group("props"), base + self.indent_unit * 2, newline)
            if props is None:
                return match.group(0)
            count += 1
            head = match.group("head").rstrip()
            return f"{head}|merge({{{newline}{props}{newline}{base}{self.indent_unit}}}) {match.group('close')}"

        result = self._pattern.sub(replace, text)
        logger.debug("Reflowed %d merge expression(s)", count)
        return result
