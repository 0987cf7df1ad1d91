"""
Signal Parameters
=================

This module provides the immutable parameter set describing one panel of
the digital audio comparison: which tone is sampled, how fast, and with
how many bits.
"""

from dataclasses import dataclass, field
from typing import Dict, Any

import numpy as np

from metrics.aliasing import compute_nyquist_ratio, is_aliased
from quantization.quantizer import MINIMUM_BIT_DEPTH, MAXIMUM_BIT_DEPTH, is_integer


@dataclass(frozen=True)
class SignalParameters:
    """
    Parameters of one sampled-and-quantized tone.

    Attributes:
        name: Label shown in the panel title (e.g. "Severe Aliasing").
        signal_frequency_hz: Frequency of the damped sine in Hz.
        sampling_rate_hz: Samples per second. Integer, like real audio
            rates (8000, 44100, ...).
        bit_depth: Quantization bits per sample, 1 to 32.
        nyquist_ratio: 2 * signal_frequency_hz / sampling_rate_hz.
            Computed at construction. Values >= 1 mean the sampling rate
            is too low and the sampled series aliases.

    Raises:
        ValueError: On non-positive or non-finite frequency, non-positive
            or non-integer sampling rate, or a bit depth outside [1, 32].
    """
    name: str
    signal_frequency_hz: float
    sampling_rate_hz: int
    bit_depth: int

    # Derived (calculated in __post_init__)
    nyquist_ratio: float = field(init=False)

    def __post_init__(self) -> None:
        """Validate the parameters and compute the Nyquist ratio."""
        self._validate()

        object.__setattr__(
            self,
            "nyquist_ratio",
            compute_nyquist_ratio(self.signal_frequency_hz, self.sampling_rate_hz)
        )

    def _validate(self) -> None:
        """Validate parameters."""
        if isinstance(self.signal_frequency_hz, bool) or not isinstance(
            self.signal_frequency_hz, (int, float, np.integer, np.floating)
        ):
            raise ValueError(
                f"Signal frequency must be a number. "
                f"Received: {self.signal_frequency_hz!r}"
            )

        if not np.isfinite(self.signal_frequency_hz) or self.signal_frequency_hz <= 0:
            raise ValueError(
                f"Signal frequency must be positive and finite. "
                f"Received: {self.signal_frequency_hz} Hz"
            )

        if not is_integer(self.sampling_rate_hz):
            raise ValueError(
                f"Sampling rate must be an integer number of Hz. "
                f"Received: {self.sampling_rate_hz!r}"
            )

        if self.sampling_rate_hz <= 0:
            raise ValueError(
                f"Sampling rate must be positive. "
                f"Received: {self.sampling_rate_hz} Hz"
            )

        if not is_integer(self.bit_depth):
            raise ValueError(
                f"Bit depth must be an integer. "
                f"Received: {self.bit_depth!r}"
            )

        if self.bit_depth < MINIMUM_BIT_DEPTH:
            raise ValueError(
                f"Bit depth must be at least {MINIMUM_BIT_DEPTH} bit. "
                f"Received: {self.bit_depth} bits"
            )

        if self.bit_depth > MAXIMUM_BIT_DEPTH:
            raise ValueError(
                f"Bit depth of {self.bit_depth} bits overflows the amplitude "
                f"level count (2^{self.bit_depth}). "
                f"Maximum is {MAXIMUM_BIT_DEPTH} bits."
            )

    @property
    def nyquist_frequency_hz(self) -> float:
        """Highest frequency the sampling rate can represent (fs / 2)."""
        return self.sampling_rate_hz / 2.0

    @property
    def amplitude_levels(self) -> int:
        """Number of quantization levels, 2^bit_depth."""
        return 2 ** self.bit_depth

    @property
    def is_aliased(self) -> bool:
        """True when the sampling rate violates the Nyquist criterion."""
        return is_aliased(self.nyquist_ratio)

    def get_summary_dict(self) -> Dict[str, Any]:
        """Return a dictionary summary of the parameters."""
        return {
            "name": self.name,
            "signal_frequency_hz": self.signal_frequency_hz,
            "sampling_rate_hz": self.sampling_rate_hz,
            "bit_depth": self.bit_depth,
            "nyquist_ratio": self.nyquist_ratio,
            "nyquist_frequency_hz": self.nyquist_frequency_hz,
            "amplitude_levels": self.amplitude_levels,
            "is_aliased": self.is_aliased
        }
