"""
Atomic file writer for formatted templates.

Ensures that a template on disk is either fully replaced or left untouched.
"""

from __future__ import annotations

import re
import tempfile
from collections.abc import Callable
from pathlib import Path

from .pipeline import PlaceholderError

# Tokens generated by the shields; none may reach the disk
_LEAKED_TOKEN_PATTERN = re.compile(r"__TWIG_CS_[A-Z]+_\d+_[a-z0-9]{8}__")


class AtomicWriter:
    """Handles atomic file writes with validation.

    Uses a two-phase commit approach:
    1. Write to a temporary file in the same directory
    2. Validate the content
    3. Atomically replace the target file
    """

    def __init__(self, validate_template: Callable[[str], None] | None = None):
        """Initialize the atomic writer.

        Args:
            validate_template: Optional validation function for template text
        """
        self._validate_template = validate_template or self._default_validate_template

    def write(self, path: Path, content: str, validate: bool = True) -> None:
        """Write content to file atomically.

        Args:
            path: Target file path
            content: Content to write
            validate: Whether to validate before finalizing

        Raises:
            PlaceholderError: If validation fails
            OSError: If file operations fail
        """
        path.parent.mkdir(parents=True, exist_ok=True)

        # Same directory ensures atomic rename on the same filesystem
        temp_fd, temp_path_str = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            text=True,
        )

        temp_path = Path(temp_path_str)

        try:
            with open(temp_fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)

            if validate:
                self._validate_template(content)

            temp_path.replace(path)

        except Exception:
            temp_path.unlink(missing_ok=True)
            raise

    def _default_validate_template(self, content: str) -> None:
        """Default template validation.

        Args:
            content: Formatted template text

        Raises:
            PlaceholderError: If a shield placeholder is still present
        """
        leaked = _LEAKED_TOKEN_PATTERN.findall(content)
        if leaked:
            raise PlaceholderError(f"Formatted template still contains placeholder(s): {', '.join(leaked)}")
