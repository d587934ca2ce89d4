"""
Document formatting provider.

The boundary between a host (editor, CLI) and the formatting pipeline: takes a
whole document, returns a single full-document replacement edit, or no edits
and a surfaced error message when anything fails.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Callable
from dataclasses import dataclass

from .pipeline import TwigFormattingPipeline

logger = logging.getLogger(__name__)

TWIG_LANGUAGE_ID = "twig"


def language_id_for_path(path: str) -> str:
    """Guess a document's language id from its file name."""
    if path.endswith(".twig"):
        return TWIG_LANGUAGE_ID
    return os.path.splitext(path)[1].lstrip(".") or "plaintext"


@dataclass(frozen=True)
class Position:
    line: int
    character: int


@dataclass(frozen=True)
class Range:
    start: Position
    end: Position


@dataclass
class TextDocument:
    """A document as handed over by the host.

    Attributes:
        text: Full document content
        file_name: Path of the document on disk
        language_id: Declared language of the document
        workspace_folder: Root of the workspace holding the document, if any
    """

    text: str
    file_name: str
    language_id: str = TWIG_LANGUAGE_ID
    workspace_folder: str | None = None

    @classmethod
    def from_path(cls, path: str, workspace_folder: str | None = None) -> TextDocument:
        with open(path, encoding="utf-8", newline="") as f:
            text = f.read()
        return cls(text, path, language_id_for_path(path), workspace_folder)

    def position_at(self, offset: int) -> Position:
        before = self.text[:offset]
        line = before.count("\n")
        return Position(line, offset - (before.rfind("\n") + 1))

    def full_range(self) -> Range:
        return Range(self.position_at(0), self.position_at(len(self.text)))


@dataclass
class TextEdit:
    range: Range
    new_text: str

    @staticmethod
    def replace(range: Range, new_text: str) -> TextEdit:
        return TextEdit(range, new_text)


def apply_edits(document: TextDocument, edits: list[TextEdit]) -> str:
    """Return the document text after applying full-document edits."""
    text = document.text
    for edit in edits:
        if edit.range != document.full_range():
            raise ValueError("Only full-document replacement edits are supported")
        text = edit.new_text
    return text


class TwigDocumentFormattingProvider:
    """Formats whole Twig documents and reports failures to the user."""

    def __init__(
        self,
        pipeline: TwigFormattingPipeline | None = None,
        show_error_message: Callable[[str], None] | None = None,
    ):
        """Initialize the provider.

        Args:
            pipeline: Pipeline to run; a default one is created if omitted
            show_error_message: Callback surfacing an error message to the user
        """
        self.pipeline = pipeline or TwigFormattingPipeline()
        self.show_error_message = show_error_message or (lambda message: None)

    def provide_document_formatting_edits(self, document: TextDocument) -> list[TextEdit]:
        try:
            workspace = document.workspace_folder or os.path.dirname(os.path.abspath(document.file_name))
            formatted = self.pipeline.format(document.text, document.file_name, workspace)
            return [TextEdit.replace(document.full_range(), formatted)]
        except Exception as e:
            logger.exception("Formatting error: %s", document.file_name)
            self.show_error_message(f"Error formatting Twig file: {e}")
            return []


def format_document_command(document: TextDocument | None, provider: TwigDocumentFormattingProvider) -> list[TextEdit] | None:
    """Format the active document if it is a Twig template.

    Returns:
        The provider's edits, or None when there is no Twig document to format
    """
    if document is None or document.language_id != TWIG_LANGUAGE_ID:
        return None
    return provider.provide_document_formatting_edits(document)
