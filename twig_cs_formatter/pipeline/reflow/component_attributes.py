"""
Component attribute reflow.

Rewrites Twig component tags carrying several attributes into the
one-attribute-per-line layout:

    <twig:Card
        title="A"
        subtitle="B"
    />
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass

from ...utils import collapse_whitespace, leading_whitespace
from ..config import TwigSyntax

logger = logging.getLogger(__name__)

_CLOSE_PATTERN = re.compile(r"/?>")
_SPACE_PATTERN = re.compile(r"\s*")


@dataclass
class Attribute:
    """An attribute of a component tag; value keeps its quotes or delimiters."""

    name: str
    value: str | None = None

    def render(self) -> str:
        if self.value is None:
            return self.name
        return f"{self.name}={self.value}"


class ComponentAttributeReflow:
    """Puts every attribute of a multi-attribute component tag on its own line."""

    def __init__(self, indent_unit: str = "    ", syntax: TwigSyntax | None = None):
        self.indent_unit = indent_unit
        self.syntax = syntax or TwigSyntax()
        self.tag_open = "<" + self.syntax.component_prefix
        self._name_pattern = re.compile(re.escape(self.tag_open) + r"(?P<name>[A-Za-z_][\w:.-]*)")
        expression = re.escape(self.syntax.variable_start) + r".*?" + re.escape(self.syntax.variable_end)
        self._attribute_pattern = re.compile(r"(?P<name>[^\s=<>/\"'{}%]+)(?:=(?P<value>\"[^\"]*\"|'[^']*'|" + expression + r"))?")

    def apply(self, text: str, newline: str = "\n") -> str:
        lines = text.split(newline)
        result = []
        reflowed = 0
        i = 0
        while i < len(lines):
            line = lines[i]
            stripped = line.strip()
            if not (stripped.startswith(self.tag_open) and "=" in stripped):
                result.append(line)
                i += 1
                continue

            end = self._find_span_end(lines, i)
            if end is None:
                # Unterminated tag: leave the line as it is
                result.append(line)
                i += 1
                continue

            span = lines[i : end + 1]
            replacement = self._reflow_tag(span, leading_whitespace(line))
            if replacement is None:
                result.extend(span)
            else:
                result.extend(replacement)
                reflowed += 1
            i = end + 1

        logger.debug("Reflowed %d component tag(s)", reflowed)
        return newline.join(result)

    @staticmethod
    def _find_span_end(lines: list[str], start: int) -> int | None:
        for j in range(start, len(lines)):
            if "/>" in lines[j] or lines[j].rstrip().endswith(">"):
                return j
        return None

    def parse_tag(self, source: str) -> tuple[str, list[Attribute], str, str] | None:
        """
        Scan a component open tag.

        Args:
            source: Tag text starting with the component open marker

        Returns:
            (name, attributes, close marker, text after the marker), or None
            if the tag holds something other than attributes
        """
        match = self._name_pattern.match(source)
        if match is None:
            return None

        attributes = []
        pos = match.end()
        while pos < len(source):
            space = _SPACE_PATTERN.match(source, pos)
            pos = space.end()
            close = _CLOSE_PATTERN.match(source, pos)
            if close:
                return match.group("name"), attributes, close.group(0), source[close.end() :]
            attribute = self._attribute_pattern.match(source, pos)
            if attribute is None or not space.group(0):
                return None
            attributes.append(Attribute(attribute.group("name"), self._normalize_value(attribute.group("value"))))
            pos = attribute.end()
        return None

    def _normalize_value(self, value: str | None) -> str | None:
        if value is None or self.syntax.variable_start not in value:
            return value
        if value[0] in "'\"":
            return value[0] + collapse_whitespace(value[1:-1]) + value[-1]
        return collapse_whitespace(value)

    def _reflow_tag(self, span: list[str], indent: str) -> list[str] | None:
        parsed = self.parse_tag(" ".join(line.strip() for line in span))
        if parsed is None:
            return None

        name, attributes, marker, rest = parsed
        if len(attributes) <= 1:
            return None

        return [
            f"{indent}{self.tag_open}{name}",
            *(f"{indent}{self.indent_unit}{attribute.render()}" for attribute in attributes),
            f"{indent}{marker}{rest}",
        ]
