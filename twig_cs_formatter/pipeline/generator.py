"""
The Twig formatting pipeline.

Runs the shield, external format, restore and reflow passes in order on one
document and returns the replacement text.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .config import PipelineConfig
from .formatters import Formatter, PrettierFormatter, resolve_project_config
from .reflow import ComponentAttributeReflow, MergeExpressionReflow, PathParameterReflow
from .shields import CommentShield, InlineElementShield

logger = logging.getLogger(__name__)


class TwigFormattingPipeline:
    """Formats Twig templates with prettier and Twig coding-standard fixes.

    Stages, in order:
    1. Comment shield
    2. Inline-element shield
    3. External formatter (prettier + melody plugin)
    4. Inline-element restore
    5. Component attribute reflow
    6. Merge-expression reflow
    7. Path-parameter reflow
    8. Comment restore
    """

    def __init__(self, config: PipelineConfig | None = None, formatter: Formatter | None = None):
        self.config = config or PipelineConfig()
        self.formatter = formatter or PrettierFormatter(self.config.formatter)

        strict = self.config.strict_placeholders
        syntax = self.config.syntax
        indent_unit = self.config.formatter.indent_unit
        self.comment_shield = CommentShield(syntax, strict=strict)
        self.inline_shield = InlineElementShield(self.config.formatter.print_width, syntax, strict=strict)
        self.component_reflow = ComponentAttributeReflow(indent_unit, syntax)
        self.merge_reflow = MergeExpressionReflow(indent_unit, syntax)
        self.path_reflow = PathParameterReflow(self.config.path_functions, self.config.path_attribute, indent_unit)

    def external_format(self, text: str, file_path: str, workspace_root: str | None = None) -> str:
        """
        Run the external formatter with the fixed options over the project's.

        Args:
            text: Shielded template text
            file_path: Document path, used for dialect and override selection
            workspace_root: Project root; defaults to the document's directory

        Returns:
            The formatter's output, verbatim

        Raises:
            ConfigResolutionError: If the project configuration is malformed
            ExternalFormatterError: If the formatter fails
        """
        directory = workspace_root or os.path.dirname(os.path.abspath(file_path))
        project_options = resolve_project_config(directory, file_path)
        options = self.config.formatter.build_options(project_options, file_path)
        return self.formatter.format(text, options, cwd=directory)

    def reflow(self, text: str) -> str:
        """Apply the component, merge and path reflows in order, keeping the document's line endings."""
        newline = "\r\n" if "\r\n" in text else "\n"
        text = self.component_reflow.apply(text, newline)
        text = self.merge_reflow.apply(text, newline)
        return self.path_reflow.apply(text, newline)

    def format(self, text: str, file_path: str, workspace_root: str | None = None) -> str:
        """Run the whole pipeline on one document and return its replacement."""
        logger.debug("Formatting %s", file_path)
        text, comments = self.comment_shield.shield(text)
        text, inline_elements = self.inline_shield.shield(text)

        text = self.external_format(text, file_path, workspace_root)

        text = self.inline_shield.restore(text, inline_elements)
        text = self.reflow(text)
        return self.comment_shield.restore(text, comments)

    def format_file(self, path: Path, workspace_root: str | None = None) -> str:
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
        return self.format(text, str(path), workspace_root)
