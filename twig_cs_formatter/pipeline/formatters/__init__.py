"""
External formatters the pipeline delegates layout normalization to.
"""

from __future__ import annotations

from .base import ConfigResolutionError, ExternalFormatterError, Formatter, TwigFormatterError
from .config_resolver import resolve_project_config
from .prettier_formatter import PrettierFormatter

__all__ = [
    "Formatter",
    "PrettierFormatter",
    "TwigFormatterError",
    "ConfigResolutionError",
    "ExternalFormatterError",
    "resolve_project_config",
]
