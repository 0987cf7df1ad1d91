"""
Quantization Module
===================

This module contains the amplitude quantizer applied to sampled waveforms.
"""

from .quantizer import (
    AbstractQuantizer,
    SymmetricRoundingQuantizer,
    MINIMUM_BIT_DEPTH,
    MAXIMUM_BIT_DEPTH,
    is_integer
)

__all__ = [
    "AbstractQuantizer",
    "SymmetricRoundingQuantizer",
    "MINIMUM_BIT_DEPTH",
    "MAXIMUM_BIT_DEPTH",
    "is_integer"
]
