"""
Path-parameter reflow.

Expands route helper calls with an inline parameter hash, found inside a
reference attribute, into one parameter per line:

    href="{{ path('app_show', {
        'id': item.id,
        'slug': item.slug
    }) }}"

The line holding the attribute gives the reference indentation.
"""

from __future__ import annotations

import logging
import re

from ...utils import indentation_at
from .properties import format_properties

logger = logging.getLogger(__name__)


class PathParameterReflow:
    """Reflows `path('route', {...})` style calls relative to an attribute line."""

    def __init__(self, functions: list[str] | None = None, attribute: str = "href", indent_unit: str = "    "):
        functions = functions or ["path"]
        self.indent_unit = indent_unit
        self.marker = f"{attribute}="
        names = "|".join(re.escape(name) for name in functions)
        self._pattern = re.compile(
            r"(?<![\w.])(?P<func>" + names + r")\(\s*"
            r"(?P<route>'[^']*'|\"[^\"]*\")\s*,\s*"
            r"\{(?P<props>[^{}]*)\}\s*\)"
        )

    def find_edits(self, text: str, newline: str = "\n") -> list[tuple[int, int, str]]:
        """
        Compute the replacements for every qualifying call.

        Calls with no reference attribute anywhere before them are skipped.

        Args:
            text: Template text, not modified
            newline: Line terminator used inside the replacements

        Returns:
            Non-overlapping (start, end, replacement) edits in document order
        """
        edits = []
        for match in self._pattern.finditer(text):
            marker_pos = text.rfind(self.marker, 0, match.start())
            if marker_pos == -1:
                continue
            reference = indentation_at(text, marker_pos)
            props = format_properties(match.group("props"), reference + self.indent_unit, newline)
            if props is None:
                continue
            replacement = f"{match.group('func')}({match.group('route')}, {{{newline}{props}{newline}{reference}}})"
            edits.append((match.start(), match.end(), replacement))
        return edits

    def apply(self, text: str, newline: str = "\n") -> str:
        edits = self.find_edits(text, newline)
        # Right to left, so earlier offsets stay valid
        for start, end, replacement in reversed(edits):
            text = text[:start] + replacement + text[end:]
        logger.debug("Reflowed %d path call(s)", len(edits))
        return text
