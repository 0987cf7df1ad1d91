"""
Metrics Module
==============

This module contains functions for calculating comparison metrics:
- Nyquist ratio and apparent (aliased) frequency
- SQNR (Signal-to-Quantization-Noise Ratio)
"""

from .aliasing import (
    compute_nyquist_ratio,
    compute_apparent_frequency_hz,
    is_aliased
)
from .quantization_noise import (
    compute_quantization_step_size,
    compute_quantization_error,
    compute_signal_to_quantization_noise_ratio_db,
    compute_theoretical_sqnr_db
)

__all__ = [
    "compute_nyquist_ratio",
    "compute_apparent_frequency_hz",
    "is_aliased",
    "compute_quantization_step_size",
    "compute_quantization_error",
    "compute_signal_to_quantization_noise_ratio_db",
    "compute_theoretical_sqnr_db"
]
