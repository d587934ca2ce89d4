from __future__ import annotations

import pytest

from twig_cs_formatter.atomic_writer import AtomicWriter
from twig_cs_formatter.pipeline import PlaceholderError
from twig_cs_formatter.pipeline.shields import PlaceholderTable


class TestAtomicWriter:
    def test_write(self, tmp_path):
        path = tmp_path / "templates" / "base.html.twig"
        AtomicWriter().write(path, "<p></p>\n")

        assert path.read_text() == "<p></p>\n"
        assert list(path.parent.iterdir()) == [path]

    def test_leaked_placeholder_keeps_original(self, tmp_path):
        path = tmp_path / "base.html.twig"
        path.write_text("{# original #}\n")
        token = PlaceholderTable("COMMENT").add("{# original #}", "")

        with pytest.raises(PlaceholderError):
            AtomicWriter().write(path, f"{token}\n")

        assert path.read_text() == "{# original #}\n"
        assert list(tmp_path.iterdir()) == [path]

    def test_validation_can_be_skipped(self, tmp_path):
        path = tmp_path / "base.html.twig"
        AtomicWriter().write(path, "__TWIG_CS_COMMENT_0_abcdefgh__", validate=False)
        assert path.read_text() == "__TWIG_CS_COMMENT_0_abcdefgh__"
