"""
Pipeline - reversible Twig formatting pipeline.

This module post-processes prettier's output for Twig templates:

1. Phase 1 (Shields): Hide comments and short inline elements behind placeholders
2. Phase 2 (Formatter): Normalize layout with prettier and the melody plugin
3. Phase 3 (Restore): Put inline elements back
4. Phase 4 (Reflow): Component attributes, merge expressions, path parameters
5. Phase 5 (Restore): Put comments back
"""

from __future__ import annotations

from .config import PipelineConfig, PrettierConfig, TwigSyntax
from .formatters import ConfigResolutionError, ExternalFormatterError, Formatter, PrettierFormatter, TwigFormatterError
from .generator import TwigFormattingPipeline
from .shields import PlaceholderError

__all__ = [
    "TwigFormattingPipeline",
    "PipelineConfig",
    "PrettierConfig",
    "TwigSyntax",
    "Formatter",
    "PrettierFormatter",
    "TwigFormatterError",
    "ConfigResolutionError",
    "ExternalFormatterError",
    "PlaceholderError",
]
