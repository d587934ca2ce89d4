from __future__ import annotations

import pytest

from twig_cs_formatter.pipeline import Formatter


class StubFormatter(Formatter):
    """Stands in for prettier: records its input and applies a transform."""

    def __init__(self, transform=None):
        self.transform = transform or (lambda code: code)
        self.calls = []

    def format(self, code, options, cwd=None):
        self.calls.append({"code": code, "options": options, "cwd": cwd})
        return self.transform(code)

    def is_available(self):
        return True


@pytest.fixture
def stub_formatter():
    return StubFormatter()


@pytest.fixture
def make_formatter():
    """Build a stub formatter applying the given transform to its input."""
    return StubFormatter
