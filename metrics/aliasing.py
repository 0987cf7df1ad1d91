"""
Aliasing Metrics
================

Quantities describing how well a sampling rate captures a tone.

NYQUIST-SHANNON CRITERION:
==========================

A tone of frequency f can only be reconstructed from samples taken at
rate fs when fs > 2 * f. We express this as the Nyquist ratio:

    ratio = 2 * f / fs

- ratio < 1 : the tone is below the Nyquist frequency (fs / 2)
- ratio >= 1: the sampling rate is insufficient, the samples alias

When a tone aliases, its samples are indistinguishable from those of a
lower "apparent" frequency, obtained by folding f around multiples of fs:

    f_apparent = | f - fs * round(f / fs) |

Example:
    10 Hz sampled at 8 Hz  -> ratio 2.5, appears as 2 Hz
    10 Hz sampled at 240 Hz -> ratio 0.083, appears as 10 Hz
"""

import numpy as np


def compute_nyquist_ratio(signal_frequency_hz: float, sampling_rate_hz: float) -> float:
    """
    Compute the Nyquist ratio 2 * f / fs.

    Args:
        signal_frequency_hz: Frequency of the tone in Hz.
        sampling_rate_hz: Sampling rate in Hz.

    Returns:
        float: The Nyquist ratio. Values >= 1 indicate aliasing.

    Raises:
        ValueError: If the sampling rate is not positive.
    """
    if sampling_rate_hz <= 0:
        raise ValueError(
            f"Sampling rate must be positive. "
            f"Received: {sampling_rate_hz} Hz"
        )

    return (2.0 * signal_frequency_hz) / float(sampling_rate_hz)


def is_aliased(nyquist_ratio: float) -> bool:
    """Return True when the Nyquist ratio says the samples alias."""
    return nyquist_ratio >= 1.0


def compute_apparent_frequency_hz(
    signal_frequency_hz: float,
    sampling_rate_hz: float
) -> float:
    """
    Compute the frequency a sampled tone appears to have.

    The spectrum of a sampled signal repeats every fs, so a tone at f
    shows up at its distance to the nearest multiple of fs. For tones
    below the Nyquist frequency this is f itself.

    Args:
        signal_frequency_hz: Frequency of the tone in Hz.
        sampling_rate_hz: Sampling rate in Hz.

    Returns:
        float: Apparent (folded) frequency in Hz, in [0, fs / 2].
    """
    if sampling_rate_hz <= 0:
        raise ValueError(
            f"Sampling rate must be positive. "
            f"Received: {sampling_rate_hz} Hz"
        )

    nearest_multiple: float = np.floor(signal_frequency_hz / sampling_rate_hz + 0.5)
    apparent_frequency_hz: float = abs(
        signal_frequency_hz - sampling_rate_hz * nearest_multiple
    )

    return float(apparent_frequency_hz)
