"""
Waveform Series
===============

This module provides an immutable (time, amplitude) pair of arrays, the
unit of data handed from the synthesizer to the plotter.
"""

import numpy as np
from dataclasses import dataclass


CONTINUOUS_SERIES_LABEL: str = "Original Signal"
SAMPLED_SERIES_LABEL: str = "Sampled & Reconstructed"


@dataclass(frozen=True, eq=False)
class WaveformSeries:
    """
    One plotted waveform.

    Both arrays are copied to float64 and marked read-only on
    construction, so a series cannot change after the synthesizer
    produced it.

    Attributes:
        time_axis_seconds: Time of each point in seconds.
        amplitude: Amplitude of each point.
        label: Legend name of the series.
    """
    time_axis_seconds: np.ndarray
    amplitude: np.ndarray
    label: str = ""

    def __post_init__(self) -> None:
        time_axis: np.ndarray = np.array(self.time_axis_seconds, dtype=np.float64)
        amplitude: np.ndarray = np.array(self.amplitude, dtype=np.float64)

        if time_axis.ndim != 1 or amplitude.ndim != 1:
            raise ValueError(
                f"Waveform arrays must be one-dimensional. "
                f"Received shapes {time_axis.shape} and {amplitude.shape}"
            )

        if len(time_axis) != len(amplitude):
            raise ValueError(
                f"Waveform length mismatch: {len(time_axis)} time points, "
                f"{len(amplitude)} amplitude values"
            )

        time_axis.setflags(write=False)
        amplitude.setflags(write=False)

        object.__setattr__(self, "time_axis_seconds", time_axis)
        object.__setattr__(self, "amplitude", amplitude)

    def get_number_of_samples(self) -> int:
        """Return the number of points in the series."""
        return len(self.time_axis_seconds)

    def get_duration_seconds(self) -> float:
        """Return the time span covered by the series."""
        if len(self.time_axis_seconds) == 0:
            return 0.0
        return float(self.time_axis_seconds[-1] - self.time_axis_seconds[0])
