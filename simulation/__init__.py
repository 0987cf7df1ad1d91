"""
Simulation Module
=================

This module provides the orchestration layer that ties together signal
synthesis, metrics and rendering of the comparison chart.
"""

from .comparison_runner import (
    ComparisonRunner,
    ComparisonConfiguration,
    ComparisonResults,
    PanelResult,
    DEFAULT_PARAMETER_SETS
)

__all__ = [
    "ComparisonRunner",
    "ComparisonConfiguration",
    "ComparisonResults",
    "PanelResult",
    "DEFAULT_PARAMETER_SETS"
]
