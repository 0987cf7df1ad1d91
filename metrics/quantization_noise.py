"""
Quantization Noise Metrics
==========================

Signal-to-Quantization-Noise Ratio (SQNR) for the sampled series.

Rounding a sample to the nearest level introduces an error of at most
half a step. For an ideal N-bit converter and a full-scale sine wave the
resulting noise floor gives the classic rule of thumb:

    SQNR (dB) = 6.02 * N + 1.76

Where:
- 6.02 dB comes from each extra bit doubling the number of levels,
  i.e. 20*log10(2)
- 1.76 dB comes from the power of a full-scale sine against the
  uniform quantization noise power (step^2 / 12)

The comparison chart uses a decaying sine, which spends most of the
window below full scale, so the measured SQNR sits below this figure.
"""

import numpy as np


def compute_quantization_step_size(bit_depth: int) -> float:
    """
    Amplitude distance between adjacent levels.

    With 2^N levels spread as 2^N / 2 steps per unit amplitude, the step
    is 2 / 2^N.
    """
    if bit_depth < 1:
        raise ValueError(
            f"Bit depth must be at least 1 bit. "
            f"Received: {bit_depth} bits"
        )

    return 2.0 / (2 ** bit_depth)


def compute_quantization_error(
    raw_signal: np.ndarray,
    quantized_signal: np.ndarray
) -> np.ndarray:
    """
    Compute the sample-wise quantization error (quantized - raw).

    Raises:
        ValueError: If the two arrays differ in length.
    """
    raw_signal = np.asarray(raw_signal, dtype=np.float64)
    quantized_signal = np.asarray(quantized_signal, dtype=np.float64)

    if len(raw_signal) != len(quantized_signal):
        raise ValueError(
            f"Signal length mismatch: raw has {len(raw_signal)} samples, "
            f"quantized has {len(quantized_signal)}"
        )

    return quantized_signal - raw_signal


def compute_signal_to_quantization_noise_ratio_db(
    raw_signal: np.ndarray,
    quantized_signal: np.ndarray
) -> float:
    """
    Measure SQNR from a raw signal and its quantized version.

    SQNR = 10 * log10(P_signal / P_error)

    Args:
        raw_signal: Unquantized amplitudes.
        quantized_signal: The same samples after quantization.

    Returns:
        float: SQNR in dB. Returns inf when the quantization error is
            exactly zero and -inf when the raw signal has no power.
    """
    error: np.ndarray = compute_quantization_error(raw_signal, quantized_signal)

    if len(error) == 0:
        raise ValueError("Cannot compute SQNR of an empty signal")

    signal_power: float = float(np.mean(np.asarray(raw_signal, dtype=np.float64) ** 2))
    noise_power: float = float(np.mean(error ** 2))

    if noise_power == 0.0:
        return float("inf")

    if signal_power == 0.0:
        return float("-inf")

    return float(10.0 * np.log10(signal_power / noise_power))


def compute_theoretical_sqnr_db(bit_depth: int) -> float:
    """
    Ideal SQNR of a full-scale sine: 6.02 * N + 1.76.

    Example:
        16 bits -> 98.1 dB
    """
    if bit_depth < 1:
        raise ValueError(
            f"Bit depth must be at least 1 bit. "
            f"Received: {bit_depth} bits"
        )

    return 6.02 * bit_depth + 1.76
