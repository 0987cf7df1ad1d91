"""
Signals Module
==============

This module contains the parameter set, waveform container and
synthesizer used to build the digital audio comparison.
"""

from .signal_parameters import SignalParameters
from .waveform_series import WaveformSeries
from .damped_sine_synthesizer import DampedSineSynthesizer

__all__ = ["SignalParameters", "WaveformSeries", "DampedSineSynthesizer"]
