"""
Damped Sine Synthesizer
=======================

This module generates the two waveforms drawn in each comparison panel:

1. A "continuous" reference: the ideal damped sine, evaluated on a time
   grid much finer than the sampling interval so that it looks smooth.
2. A "sampled" series: the same damped sine evaluated only at the
   sampling instants and quantized to the panel's bit depth.

The waveform is an exponentially decaying sine:

    x(t) = exp(-decay_rate * t) * sin(2 * π * f * t)

The decay makes aliasing easy to spot: the envelope of the sampled
series follows the original, while its oscillation visibly takes on a
different frequency when f is above fs / 2.

Everything here is a pure function of the inputs. Calling synthesize()
twice with the same parameters returns bit-identical arrays.
"""

from typing import Tuple

import numpy as np

from quantization.quantizer import SymmetricRoundingQuantizer
from .signal_parameters import SignalParameters
from .waveform_series import (
    WaveformSeries,
    CONTINUOUS_SERIES_LABEL,
    SAMPLED_SERIES_LABEL
)


DEFAULT_OBSERVATION_WINDOW_SECONDS: float = 2.0
DEFAULT_DECAY_RATE: float = 0.5
DEFAULT_INTERPOLATION_FACTOR: int = 20


class DampedSineSynthesizer:
    """
    Generates continuous and sampled damped-sine waveforms.

    Attributes:
        observation_window_seconds (float): Length of time shown in each
            panel.

        decay_rate (float): Exponential decay constant in 1/s. Larger
            values make the sine die out faster.

        interpolation_factor (int): How many continuous points are drawn
            per sampling interval (oversampling of the reference curve).
    """

    def __init__(
        self,
        observation_window_seconds: float = DEFAULT_OBSERVATION_WINDOW_SECONDS,
        decay_rate: float = DEFAULT_DECAY_RATE,
        interpolation_factor: int = DEFAULT_INTERPOLATION_FACTOR
    ) -> None:
        """
        Initialize the synthesizer.

        Args:
            observation_window_seconds: Time span of both series. Default 2 s.
            decay_rate: Decay constant of the envelope. Default 0.5 (1/s).
            interpolation_factor: Continuous points per sampling interval.
                Default 20.

        Raises:
            ValueError: If any parameter is invalid.
        """
        # ===== INPUT VALIDATION =====
        if not np.isfinite(observation_window_seconds) or observation_window_seconds <= 0:
            raise ValueError(
                f"Observation window must be positive and finite. "
                f"Received: {observation_window_seconds} s"
            )

        if not np.isfinite(decay_rate) or decay_rate < 0:
            raise ValueError(
                f"Decay rate must be non-negative and finite. "
                f"Received: {decay_rate}"
            )

        if (
            not np.isfinite(interpolation_factor)
            or int(interpolation_factor) != interpolation_factor
            or interpolation_factor < 1
        ):
            raise ValueError(
                f"Interpolation factor must be an integer of at least 1. "
                f"Received: {interpolation_factor}"
            )

        # ===== STORE PARAMETERS =====
        self.observation_window_seconds: float = float(observation_window_seconds)
        self.decay_rate: float = float(decay_rate)
        self.interpolation_factor: int = int(interpolation_factor)

    def evaluate(
        self,
        signal_frequency_hz: float,
        time_axis_seconds: np.ndarray
    ) -> np.ndarray:
        """
        Evaluate the unquantized damped sine at arbitrary times.

        Args:
            signal_frequency_hz: Frequency of the sine in Hz.
            time_axis_seconds: Times at which to evaluate.

        Returns:
            np.ndarray: exp(-decay_rate * t) * sin(2πft), values in [-1, 1].
        """
        time_axis_seconds = np.asarray(time_axis_seconds, dtype=np.float64)

        envelope: np.ndarray = np.exp(-self.decay_rate * time_axis_seconds)
        angular_frequency_radians_per_second: float = 2.0 * np.pi * signal_frequency_hz

        return envelope * np.sin(angular_frequency_radians_per_second * time_axis_seconds)

    def get_number_of_samples(self, parameters: SignalParameters) -> int:
        """Number of sampled points: floor(window * fs)."""
        return int(np.floor(self.observation_window_seconds * parameters.sampling_rate_hz))

    def get_number_of_continuous_points(self, parameters: SignalParameters) -> int:
        """
        Number of continuous points: floor(window * fs * factor) + 1.

        The extra point includes t = window itself when the window is a
        whole number of fine steps.
        """
        fine_steps: float = (
            self.observation_window_seconds
            * parameters.sampling_rate_hz
            * self.interpolation_factor
        )
        return int(np.floor(fine_steps)) + 1

    def get_sampled_time_axis(self, parameters: SignalParameters) -> np.ndarray:
        """Sampling instants i * dt for i in [0, number_of_samples)."""
        sampling_interval_seconds: float = 1.0 / parameters.sampling_rate_hz
        return np.arange(self.get_number_of_samples(parameters)) * sampling_interval_seconds

    def synthesize(
        self,
        parameters: SignalParameters
    ) -> Tuple[WaveformSeries, WaveformSeries]:
        """
        Generate the continuous and sampled series for one panel.

        Args:
            parameters: Frequency, sampling rate and bit depth of the panel.

        Returns:
            Tuple[WaveformSeries, WaveformSeries]: (continuous, sampled).

        Raises:
            ValueError: If the window is too short to hold a single sample
                at the requested rate.
        """
        continuous, sampled, _ = self.synthesize_with_raw_samples(parameters)
        return continuous, sampled

    def synthesize_with_raw_samples(
        self,
        parameters: SignalParameters
    ) -> Tuple[WaveformSeries, WaveformSeries, np.ndarray]:
        """
        Like synthesize, also returning the unquantized sample values.

        Returns:
            Tuple[WaveformSeries, WaveformSeries, np.ndarray]:
                (continuous, sampled, raw_samples). raw_samples is read-only
                and aligned with the sampled time axis.
        """
        number_of_samples: int = self.get_number_of_samples(parameters)
        if number_of_samples < 1:
            raise ValueError(
                f"Observation window of {self.observation_window_seconds} s holds "
                f"no samples at {parameters.sampling_rate_hz} Hz. "
                f"Increase the window or the sampling rate."
            )

        sampling_interval_seconds: float = 1.0 / parameters.sampling_rate_hz

        # ===== CONTINUOUS REFERENCE =====
        continuous_x: np.ndarray = (
            np.arange(self.get_number_of_continuous_points(parameters))
            * sampling_interval_seconds
            / self.interpolation_factor
        )
        continuous_y: np.ndarray = self.evaluate(parameters.signal_frequency_hz, continuous_x)

        # ===== SAMPLING AND QUANTIZATION =====
        sampled_x: np.ndarray = self.get_sampled_time_axis(parameters)
        raw_samples: np.ndarray = self.evaluate(parameters.signal_frequency_hz, sampled_x)

        quantizer: SymmetricRoundingQuantizer = SymmetricRoundingQuantizer(parameters.bit_depth)
        sampled_y: np.ndarray = quantizer.quantize(raw_samples)

        continuous: WaveformSeries = WaveformSeries(
            time_axis_seconds=continuous_x,
            amplitude=continuous_y,
            label=CONTINUOUS_SERIES_LABEL
        )
        sampled: WaveformSeries = WaveformSeries(
            time_axis_seconds=sampled_x,
            amplitude=sampled_y,
            label=SAMPLED_SERIES_LABEL
        )

        raw_samples.setflags(write=False)

        return continuous, sampled, raw_samples
