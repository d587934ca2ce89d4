"""
Base classes for shield/restore passes.

A shield replaces fragile regions of a template with opaque tokens before the
text goes through the external formatter; the matching restore puts the
original regions back afterwards.
"""

from __future__ import annotations

import logging
import random
import re
import string
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

from ..formatters.base import TwigFormatterError

logger = logging.getLogger(__name__)

_SUFFIX_ALPHABET = string.ascii_lowercase + string.digits


class PlaceholderError(TwigFormatterError):
    """Raised in strict mode when a placeholder did not survive formatting."""

    pass


@dataclass
class PlaceholderTable:
    """Mapping from generated placeholder tokens to the text they replace.

    Attributes:
        kind: Short label used in the tokens (e.g. "COMMENT")
        entries: Token to original substring, in insertion order
    """

    kind: str
    entries: dict[str, str] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random, repr=False)

    def new_token(self, source: str) -> str:
        """Generate a token that occurs neither in source nor in the table."""
        index = len(self.entries)
        while True:
            suffix = "".join(self.rng.choices(_SUFFIX_ALPHABET, k=8))
            token = f"__TWIG_CS_{self.kind}_{index}_{suffix}__"
            if token not in source and token not in self.entries:
                return token

    def add(self, original: str, source: str) -> str:
        token = self.new_token(source)
        self.entries[token] = original
        return token

    def __len__(self) -> int:
        return len(self.entries)


class Shield(ABC):
    """Abstract base class for reversible substitutions."""

    kind: str = "REGION"

    def __init__(self, strict: bool = False):
        self.strict = strict

    @abstractmethod
    def pattern(self) -> re.Pattern[str]:
        """Return the compiled pattern of the regions to shield."""

    def accepts(self, match: re.Match[str]) -> bool:
        """Decide whether a pattern match should actually be shielded."""
        return True

    def shield(self, text: str) -> tuple[str, PlaceholderTable]:
        """
        Replace every accepted region with a placeholder token.

        Args:
            text: Template text

        Returns:
            The shielded text and the table needed to restore it
        """
        table = PlaceholderTable(self.kind)

        def replace(match: re.Match[str]) -> str:
            if not self.accepts(match):
                return match.group(0)
            return table.add(match.group(0), text)

        shielded = self.pattern().sub(replace, text)
        logger.debug("Shielded %d %s region(s)", len(table), self.kind.lower())
        return shielded, table

    def restore(self, text: str, table: PlaceholderTable) -> str:
        """
        Substitute every token of the table back with its original text.

        Tokens the external formatter removed are dropped, unless the shield
        is strict, in which case a PlaceholderError is raised.

        Args:
            text: Processed text containing placeholder tokens
            table: Table returned by shield()

        Returns:
            Text with the original regions reinserted
        """
        missing = []
        for token, original in table.entries.items():
            if token not in text:
                missing.append(token)
                continue
            text = text.replace(token, original)

        if missing:
            if self.strict:
                raise PlaceholderError(f"{len(missing)} {self.kind.lower()} placeholder(s) lost during formatting: {', '.join(missing)}")
            logger.warning("Dropped %d %s placeholder(s) lost during formatting", len(missing), self.kind.lower())
        return text
