"""
Tests for the symmetric rounding quantizer.
"""

import numpy as np
import pytest

from quantization.quantizer import SymmetricRoundingQuantizer, is_integer


class TestQuantizerConstruction:
    """Test quantizer setup and validation."""

    def test_levels_and_step(self):
        """Test level count and step size follow the bit depth."""
        quantizer = SymmetricRoundingQuantizer(16)
        assert quantizer.get_number_of_levels() == 65536
        assert quantizer.steps_per_unit == 32768.0
        assert quantizer.get_step_size() == pytest.approx(1.0 / 32768.0)
        assert quantizer.get_output_range() == (-1.0, 1.0)

    @pytest.mark.parametrize("bit_depth", [0, -1, 33, 64])
    def test_out_of_range_bit_depth(self, bit_depth):
        """Test bit depths outside [1, 32] are rejected."""
        with pytest.raises(ValueError):
            SymmetricRoundingQuantizer(bit_depth)

    @pytest.mark.parametrize("bit_depth", [8.0, "8", False])
    def test_non_integer_bit_depth(self, bit_depth):
        """Test only integers are accepted."""
        with pytest.raises(ValueError, match="integer"):
            SymmetricRoundingQuantizer(bit_depth)


class TestQuantize:
    """Test the rounding behaviour."""

    def test_one_bit_maps_to_three_values(self):
        """Test 1 bit rounds to whole units, so only -1, 0 and 1 remain."""
        quantizer = SymmetricRoundingQuantizer(1)
        raw = np.linspace(-1.0, 1.0, 201)

        quantized = quantizer.quantize(raw)

        assert set(np.unique(quantized)) <= {-1.0, 0.0, 1.0}
        assert set(np.unique(quantized)) == {-1.0, 0.0, 1.0}

    def test_half_steps_round_away_from_zero(self):
        """Test exact half steps move away from zero on both sides."""
        quantizer = SymmetricRoundingQuantizer(1)
        raw = np.array([0.5, -0.5, 0.49, -0.49, 1.0, -1.0, 0.0])

        np.testing.assert_array_equal(
            quantizer.quantize(raw),
            [1.0, -1.0, 0.0, 0.0, 1.0, -1.0, 0.0]
        )

    @pytest.mark.parametrize("bit_depth", [1, 2, 16])
    def test_just_below_half_step_rounds_toward_zero(self, bit_depth):
        """Test the largest value below half a step quantizes to zero."""
        quantizer = SymmetricRoundingQuantizer(bit_depth)
        below_half_step = np.nextafter(0.5, 0.0) / quantizer.steps_per_unit

        np.testing.assert_array_equal(
            quantizer.quantize(np.array([below_half_step, -below_half_step])),
            [0.0, 0.0]
        )

    def test_two_bits(self):
        """Test 2 bits quantize to multiples of 0.5."""
        quantizer = SymmetricRoundingQuantizer(2)
        raw = np.array([0.2, 0.3, 0.74, 0.76, -0.3])

        np.testing.assert_array_equal(
            quantizer.quantize(raw),
            [0.0, 0.5, 0.5, 1.0, -0.5]
        )

    @pytest.mark.parametrize("bit_depth", [1, 2, 3, 8, 16, 24, 32])
    def test_error_within_half_step(self, bit_depth):
        """Test every sample moves by at most half a step."""
        quantizer = SymmetricRoundingQuantizer(bit_depth)
        raw = np.sin(np.linspace(0.0, 20.0, 1001))

        error = quantizer.quantize(raw) - raw

        assert np.max(np.abs(error)) <= quantizer.get_step_size() / 2 + 1e-15

    @pytest.mark.parametrize("bit_depth", [1, 2, 5, 16, 32])
    def test_idempotent(self, bit_depth):
        """Test quantizing an already quantized signal changes nothing."""
        quantizer = SymmetricRoundingQuantizer(bit_depth)
        raw = np.exp(-0.5 * np.linspace(0, 2, 513)) * np.sin(np.linspace(0, 40, 513))

        once = quantizer.quantize(raw)
        twice = quantizer.quantize(once)

        np.testing.assert_array_equal(once, twice)

    def test_does_not_modify_input(self):
        """Test the input array is left untouched."""
        quantizer = SymmetricRoundingQuantizer(4)
        raw = np.array([0.123, -0.456])
        original = raw.copy()

        quantizer.quantize(raw)

        np.testing.assert_array_equal(raw, original)


class TestIsInteger:
    """Test the shared integer check."""

    @pytest.mark.parametrize("value", [0, 16, -3, np.int64(8), np.uint8(2)])
    def test_integers_accepted(self, value):
        """Test Python and numpy integers pass."""
        assert is_integer(value)

    @pytest.mark.parametrize("value", [True, False, 8.0, np.float64(8.0), "8", None])
    def test_non_integers_rejected(self, value):
        """Test booleans, floats, strings and None fail."""
        assert not is_integer(value)
