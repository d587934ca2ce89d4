"""
Reflow passes applied to the external formatter's output.
"""

from __future__ import annotations

from .component_attributes import Attribute, ComponentAttributeReflow
from .merge_expressions import MergeExpressionReflow
from .path_parameters import PathParameterReflow
from .properties import format_properties, quote_key, split_properties

__all__ = [
    "Attribute",
    "ComponentAttributeReflow",
    "MergeExpressionReflow",
    "PathParameterReflow",
    "format_properties",
    "quote_key",
    "split_properties",
]
