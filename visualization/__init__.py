"""
Visualization Module
====================

This module lays out and draws the sampling comparison chart.
"""

from .subplot_layout import (
    SubplotDescriptor,
    generate_title,
    compute_subplot_domains,
    build_subplot_descriptors
)
from .comparison_plotter import ComparisonPlotter

__all__ = [
    "SubplotDescriptor",
    "generate_title",
    "compute_subplot_domains",
    "build_subplot_descriptors",
    "ComparisonPlotter"
]
