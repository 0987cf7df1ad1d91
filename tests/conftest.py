"""
Shared test setup.

Forces the non-interactive Agg backend so figures can be built and saved
without a display.
"""

import matplotlib

matplotlib.use("Agg")

import pytest

from signals.signal_parameters import SignalParameters
from signals.damped_sine_synthesizer import DampedSineSynthesizer


@pytest.fixture
def synthesizer():
    """Synthesizer with the reference window, decay and interpolation."""
    return DampedSineSynthesizer(
        observation_window_seconds=2.0,
        decay_rate=0.5,
        interpolation_factor=20
    )


@pytest.fixture
def severe_aliasing_parameters():
    """10 Hz sampled at 8 Hz, 16 bit."""
    return SignalParameters("Severe Aliasing", 10.0, 8, 16)


@pytest.fixture
def hi_resolution_parameters():
    """10 Hz sampled at 240 Hz, 16 bit."""
    return SignalParameters("Hi Resolution", 10.0, 240, 16)
