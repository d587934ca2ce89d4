"""
Shield/restore passes protecting fragile template regions.
"""

from __future__ import annotations

from .base import PlaceholderError, PlaceholderTable, Shield
from .comments import CommentShield
from .inline_elements import InlineElementShield

__all__ = [
    "Shield",
    "PlaceholderTable",
    "PlaceholderError",
    "CommentShield",
    "InlineElementShield",
]
