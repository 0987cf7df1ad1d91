"""
Tests for aliasing and quantization noise metrics.
"""

import numpy as np
import pytest

from metrics.aliasing import (
    compute_nyquist_ratio,
    compute_apparent_frequency_hz,
    is_aliased
)
from metrics.quantization_noise import (
    compute_quantization_step_size,
    compute_quantization_error,
    compute_signal_to_quantization_noise_ratio_db,
    compute_theoretical_sqnr_db
)
from quantization.quantizer import SymmetricRoundingQuantizer


class TestAliasingMetrics:
    """Test Nyquist ratio and folding."""

    def test_nyquist_ratio(self):
        """Test the ratio formula."""
        assert compute_nyquist_ratio(10.0, 8) == pytest.approx(2.5)
        assert compute_nyquist_ratio(10.0, 240) == pytest.approx(1.0 / 12.0)

    def test_nyquist_ratio_rejects_zero_rate(self):
        """Test a zero sampling rate raises instead of dividing by zero."""
        with pytest.raises(ValueError, match="Sampling rate"):
            compute_nyquist_ratio(10.0, 0)

    def test_is_aliased_threshold(self):
        """Test the aliasing threshold sits at a ratio of 1."""
        assert is_aliased(2.5)
        assert is_aliased(1.0)
        assert not is_aliased(0.999)
        assert not is_aliased(1.0 / 12.0)

    @pytest.mark.parametrize("frequency_hz, sampling_rate_hz, expected_hz", [
        (10.0, 8, 2.0),
        (10.0, 12, 2.0),
        (10.0, 24, 10.0),
        (10.0, 240, 10.0),
        (10.0, 20, 10.0),
        (30.0, 8, 2.0),
        (7.0, 10, 3.0),
    ])
    def test_apparent_frequency(self, frequency_hz, sampling_rate_hz, expected_hz):
        """Test tones fold to their distance from the nearest multiple of fs."""
        assert compute_apparent_frequency_hz(frequency_hz, sampling_rate_hz) == pytest.approx(expected_hz)

    def test_apparent_frequency_matches_samples(self):
        """Test an undersampled tone has the same samples as its alias."""
        sampling_rate_hz = 8
        t = np.arange(16) / sampling_rate_hz
        alias_hz = compute_apparent_frequency_hz(10.0, sampling_rate_hz)

        original = np.cos(2 * np.pi * 10.0 * t)
        alias = np.cos(2 * np.pi * alias_hz * t)

        np.testing.assert_allclose(original, alias, atol=1e-9)


class TestQuantizationNoise:
    """Test SQNR computation."""

    def test_step_size(self):
        """Test the step size is 2 / 2^N."""
        assert compute_quantization_step_size(1) == 1.0
        assert compute_quantization_step_size(16) == pytest.approx(2.0 / 65536)

    def test_step_size_rejects_zero_bits(self):
        """Test zero bits is invalid."""
        with pytest.raises(ValueError):
            compute_quantization_step_size(0)

    def test_theoretical_sqnr(self):
        """Test 6.02 N + 1.76."""
        assert compute_theoretical_sqnr_db(16) == pytest.approx(98.08)
        assert compute_theoretical_sqnr_db(8) == pytest.approx(49.92)

    def test_error_is_difference(self):
        """Test the error is quantized minus raw."""
        np.testing.assert_allclose(
            compute_quantization_error([0.1, 0.2], [0.0, 0.5]),
            [-0.1, 0.3]
        )

    def test_error_length_mismatch(self):
        """Test arrays of different lengths are rejected."""
        with pytest.raises(ValueError, match="length mismatch"):
            compute_quantization_error([0.1, 0.2], [0.0])

    def test_sqnr_of_exact_signal_is_infinite(self):
        """Test zero error gives infinite SQNR."""
        signal = np.array([0.0, 0.5, -0.5, 1.0])
        assert compute_signal_to_quantization_noise_ratio_db(signal, signal) == float("inf")

    def test_sqnr_empty_signal(self):
        """Test an empty signal is rejected."""
        with pytest.raises(ValueError, match="empty"):
            compute_signal_to_quantization_noise_ratio_db([], [])

    @pytest.mark.parametrize("bit_depth", [8, 12, 16])
    def test_full_scale_sine_matches_rule_of_thumb(self, bit_depth):
        """Test a full-scale sine measures close to 6.02 N + 1.76 dB."""
        t = np.arange(200_000) / 48_000.0
        raw = np.sin(2 * np.pi * 997.0 * t)
        quantized = SymmetricRoundingQuantizer(bit_depth).quantize(raw)

        measured = compute_signal_to_quantization_noise_ratio_db(raw, quantized)

        assert measured == pytest.approx(compute_theoretical_sqnr_db(bit_depth), abs=1.0)

    def test_more_bits_less_noise(self):
        """Test SQNR grows with bit depth."""
        t = np.linspace(0, 1, 5000)
        raw = 0.9 * np.sin(2 * np.pi * 3.3 * t)

        sqnr_8 = compute_signal_to_quantization_noise_ratio_db(
            raw, SymmetricRoundingQuantizer(8).quantize(raw)
        )
        sqnr_16 = compute_signal_to_quantization_noise_ratio_db(
            raw, SymmetricRoundingQuantizer(16).quantize(raw)
        )

        assert sqnr_16 > sqnr_8 + 40
