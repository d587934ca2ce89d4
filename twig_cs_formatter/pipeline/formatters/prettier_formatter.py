"""
Prettier formatter for Twig templates.
"""

from __future__ import annotations

import json
import logging
import subprocess
import tempfile
from pathlib import Path
from typing import Any

from ..config import PrettierConfig
from .base import ExternalFormatterError, Formatter

logger = logging.getLogger(__name__)


class PrettierFormatter(Formatter):
    """Formatter running the Prettier CLI with the Twig melody plugin."""

    def __init__(self, config: PrettierConfig | None = None):
        self.config = config or PrettierConfig()
        self._available = None

    def is_available(self) -> bool:
        """Check if prettier can be started."""
        if self._available is None:
            try:
                result = subprocess.run(
                    [*self.config.command, "--version"],
                    capture_output=True,
                    text=True,
                    timeout=30,
                )
                self._available = result.returncode == 0
            except (subprocess.SubprocessError, FileNotFoundError):
                self._available = False
        return self._available

    def format(self, code: str, options: dict[str, Any], cwd: str | None = None) -> str:
        """
        Format Twig template text using prettier.

        Args:
            code: Template text to format
            options: Prettier options, including `filepath`
            cwd: Directory prettier runs in, so the plugin resolves from the project

        Returns:
            Formatted text, verbatim from prettier

        Raises:
            ExternalFormatterError: If prettier is missing or fails
        """
        options = dict(options)
        file_path = options.pop("filepath", None) or "template.html.twig"
        # Plugins go on the command line so they resolve from cwd, not the temp dir
        plugins = options.pop("plugins", [])

        # The merged options are handed to prettier as its only configuration file
        with tempfile.NamedTemporaryFile(mode="w", suffix=".json", delete=False, encoding="utf-8") as f:
            json.dump(options, f)
            config_path = Path(f.name)

        try:
            cmd = [*self.config.command, "--config", str(config_path)]
            for plugin in plugins:
                cmd.extend(["--plugin", plugin])
            cmd.extend(["--stdin-filepath", file_path])
            logger.debug("Running %s", " ".join(cmd))

            result = subprocess.run(
                cmd,
                input=code,
                capture_output=True,
                text=True,
                cwd=cwd,
                timeout=self.config.timeout,
            )
        except FileNotFoundError as e:
            raise ExternalFormatterError(f"Cannot start prettier ({self.config.command[0]}): {e}") from e
        except subprocess.TimeoutExpired as e:
            raise ExternalFormatterError(f"prettier did not finish within {self.config.timeout} seconds") from e
        finally:
            config_path.unlink(missing_ok=True)

        if result.returncode != 0:
            message = (result.stderr or result.stdout or "").strip()
            raise ExternalFormatterError(message or f"prettier exited with status {result.returncode}")
        return result.stdout
