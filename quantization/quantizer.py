"""
Quantizer Module
================

This module provides the amplitude quantizer used when a waveform is
sampled for the digital audio comparison.

Quantization maps each sampled amplitude onto a finite grid of levels
determined by the bit depth. A bit depth of N gives 2^N amplitude levels,
which over the symmetric range [-1, 1] means 2^N / 2 steps per unit of
amplitude:

    quantized = round(raw * 2^N / 2) / (2^N / 2)

Rounding is "half away from zero" so that +0.5 and -0.5 steps are treated
symmetrically (numpy's default rounds half to even).

Example (N = 1):
    2 levels -> 1 step per unit -> outputs are restricted to {-1, 0, 1}
"""

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np


MINIMUM_BIT_DEPTH: int = 1
MAXIMUM_BIT_DEPTH: int = 32


def is_integer(value) -> bool:
    """True for Python and numpy integers. Booleans are rejected."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


class AbstractQuantizer(ABC):
    """Abstract base class for quantizers."""

    @abstractmethod
    def quantize(self, signal: np.ndarray) -> np.ndarray:
        """Quantize an array of amplitudes."""
        pass

    @abstractmethod
    def get_number_of_levels(self) -> int:
        """Return the number of quantization levels."""
        pass

    @abstractmethod
    def get_output_range(self) -> Tuple[float, float]:
        """Return the (minimum, maximum) output values."""
        pass


class SymmetricRoundingQuantizer(AbstractQuantizer):
    """
    Uniform rounding quantizer over the symmetric range [-1, 1].

    Simulates fixed-point storage of a sample: the amplitude is scaled by
    half the number of levels, rounded to the nearest integer code and
    scaled back.

    Because half the number of levels is a power of two, scaling a
    quantized value back up yields its integer code exactly, so
    re-quantizing at the same bit depth returns the same values.

    Attributes:
        bit_depth (int): Number of bits per sample (1 to 32).
        number_of_levels (int): 2^bit_depth.
        steps_per_unit (float): number_of_levels / 2.
    """

    def __init__(self, bit_depth: int = 16) -> None:
        """
        Initialize the quantizer.

        Args:
            bit_depth: Number of quantization bits. Must be an integer
                between 1 and 32 so that 2^bit_depth stays representable.

        Raises:
            ValueError: If bit_depth is not an integer in [1, 32].
        """
        if not is_integer(bit_depth):
            raise ValueError(
                f"Bit depth must be an integer. "
                f"Received: {bit_depth!r}"
            )

        if bit_depth < MINIMUM_BIT_DEPTH:
            raise ValueError(
                f"Bit depth must be at least {MINIMUM_BIT_DEPTH} bit. "
                f"Received: {bit_depth} bits"
            )

        if bit_depth > MAXIMUM_BIT_DEPTH:
            raise ValueError(
                f"Bit depth of {bit_depth} bits overflows the amplitude level "
                f"count (2^{bit_depth}). Maximum is {MAXIMUM_BIT_DEPTH} bits."
            )

        self.bit_depth: int = int(bit_depth)
        self.number_of_levels: int = 2 ** self.bit_depth
        self.steps_per_unit: float = self.number_of_levels / 2.0

    def quantize(self, signal: np.ndarray) -> np.ndarray:
        """
        Quantize amplitudes to the nearest level.

        Args:
            signal: Raw amplitudes, ideally within [-1, 1].

        Returns:
            np.ndarray: Quantized amplitudes (float64), same shape as input.
        """
        scaled: np.ndarray = np.asarray(signal, dtype=np.float64) * self.steps_per_unit

        # Round half away from zero. The fractional part scaled - truncated is exact.
        truncated: np.ndarray = np.trunc(scaled)
        codes: np.ndarray = np.where(
            np.abs(scaled - truncated) >= 0.5,
            truncated + np.sign(scaled),
            truncated
        )

        return codes / self.steps_per_unit

    def get_number_of_levels(self) -> int:
        """Return 2^bit_depth."""
        return self.number_of_levels

    def get_step_size(self) -> float:
        """Return the amplitude distance between adjacent levels."""
        return 1.0 / self.steps_per_unit

    def get_output_range(self) -> Tuple[float, float]:
        """Return the (min, max) output values."""
        return (-1.0, 1.0)
