"""
Base class for external template formatters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class TwigFormatterError(Exception):
    """Base class for errors raised while formatting a template."""

    pass


class ConfigResolutionError(TwigFormatterError):
    """Raised when the project's formatter configuration cannot be read."""

    pass


class ExternalFormatterError(TwigFormatterError):
    """Raised when the external formatting engine fails.

    This can happen when:
    - The engine is not installed or cannot be started
    - The engine cannot parse the template (syntax error)
    - The engine exceeds the configured timeout
    """

    pass


class Formatter(ABC):
    """Abstract base class for external formatters."""

    @abstractmethod
    def format(self, code: str, options: dict[str, Any], cwd: str | None = None) -> str:
        """
        Format the given template text.

        Args:
            code: The template text to format
            options: Engine options, fixed overrides already merged in
            cwd: Directory the engine runs in (used to resolve plugins)

        Returns:
            Formatted text

        Raises:
            ExternalFormatterError: If the engine fails
        """

    @abstractmethod
    def is_available(self) -> bool:
        """
        Check if the formatter is available (engine installed).

        Returns:
            True if the formatter can be used
        """
