"""
Digital Audio Sampling Comparison - Main Entry Point
====================================================

Renders a 2x2 chart showing what sampling rate and bit depth do to a
decaying 10 Hz sine:

1. Severe Aliasing  (sampled at 8 Hz)
2. Aliasing         (sampled at 12 Hz)
3. Near Nyquist     (sampled at 24 Hz)
4. Hi Resolution    (sampled at 240 Hz)

Each panel overlays the ideal waveform with the sampled, 16-bit quantized
series. The chart is written to export/digital_audio_comparison.png.

Usage:
    python main.py
"""

from simulation.comparison_runner import (
    ComparisonRunner,
    ComparisonConfiguration,
    ComparisonResults,
    DEFAULT_PARAMETER_SETS
)


def main() -> ComparisonResults:
    """Produce the comparison chart with the default panels."""
    runner = ComparisonRunner(ComparisonConfiguration())
    results = runner.run(DEFAULT_PARAMETER_SETS, verbose=True)
    results.print_summary()
    return results


if __name__ == "__main__":
    main()
