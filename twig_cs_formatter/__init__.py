"""Twig CS Formatter

Formats Twig templates with prettier and the melody plugin, then rewrites
the constructs prettier gets wrong so the result follows the Twig coding
standard: component attributes one per line, expanded merge hashes and
route parameters, and untouched comments.
"""

__version__ = "0.1.0"

from .pipeline import (
    ConfigResolutionError,
    ExternalFormatterError,
    PipelineConfig,
    PlaceholderError,
    PrettierConfig,
    TwigFormatterError,
    TwigFormattingPipeline,
)
from .provider import TextDocument, TextEdit, TwigDocumentFormattingProvider

__all__ = [
    "TwigFormattingPipeline",
    "PipelineConfig",
    "PrettierConfig",
    "TwigDocumentFormattingProvider",
    "TextDocument",
    "TextEdit",
    "TwigFormatterError",
    "ConfigResolutionError",
    "ExternalFormatterError",
    "PlaceholderError",
]
