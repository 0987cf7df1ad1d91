"""
Comparison Runner
=================

This module provides the orchestration class that turns a list of
SignalParameters into the finished comparison chart.

The ComparisonRunner handles:
1. Waveform synthesis for every panel (sequentially)
2. Aliasing and quantization metrics per panel
3. Building the subplot descriptors
4. Rendering and exporting the PNG once

This is the main entry point for producing the chart.
"""

import numpy as np
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Dict, Any, List, Sequence

from signals.signal_parameters import SignalParameters
from signals.waveform_series import WaveformSeries
from signals.damped_sine_synthesizer import (
    DampedSineSynthesizer,
    DEFAULT_OBSERVATION_WINDOW_SECONDS,
    DEFAULT_DECAY_RATE,
    DEFAULT_INTERPOLATION_FACTOR
)
from metrics.aliasing import compute_apparent_frequency_hz
from metrics.quantization_noise import (
    compute_signal_to_quantization_noise_ratio_db,
    compute_theoretical_sqnr_db
)
from visualization.subplot_layout import (
    SubplotDescriptor,
    build_subplot_descriptors,
    DEFAULT_GRID_ROWS,
    DEFAULT_GRID_COLUMNS
)
from visualization.comparison_plotter import ComparisonPlotter


DEFAULT_OUTPUT_PATH: str = "export/digital_audio_comparison.png"

# One panel per sampling regime, from heavy aliasing to comfortably above Nyquist
DEFAULT_PARAMETER_SETS: List[SignalParameters] = [
    SignalParameters("Severe Aliasing", 10.0, 8, 16),
    SignalParameters("Aliasing", 10.0, 12, 16),
    SignalParameters("Near Nyquist", 10.0, 24, 16),
    SignalParameters("Hi Resolution", 10.0, 240, 16),
]


@dataclass
class ComparisonConfiguration:
    """
    Configuration parameters for producing the comparison chart.

    Attributes:
        observation_window_seconds: Time span of every panel.
        decay_rate: Envelope decay constant of the damped sine (1/s).
        interpolation_factor: Continuous points per sampling interval.
        output_path: Where the PNG is written.
        image_width_px: Layout width in pixels.
        image_height_px: Layout height in pixels.
        image_scale: Resolution multiplier applied at export.
        grid_rows: Panel rows.
        grid_columns: Panel columns.
        show_layout_guides: Overlay figure-fraction guide marks.
    """
    # Signal shape
    observation_window_seconds: float = DEFAULT_OBSERVATION_WINDOW_SECONDS
    decay_rate: float = DEFAULT_DECAY_RATE
    interpolation_factor: int = DEFAULT_INTERPOLATION_FACTOR

    # Output image
    output_path: str = DEFAULT_OUTPUT_PATH
    image_width_px: int = ComparisonPlotter.DEFAULT_IMAGE_WIDTH_PX
    image_height_px: int = ComparisonPlotter.DEFAULT_IMAGE_HEIGHT_PX
    image_scale: float = ComparisonPlotter.DEFAULT_IMAGE_SCALE

    # Layout
    grid_rows: int = DEFAULT_GRID_ROWS
    grid_columns: int = DEFAULT_GRID_COLUMNS
    show_layout_guides: bool = False

    # Derived parameters (calculated in __post_init__)
    output_width_px: int = 0
    output_height_px: int = 0

    def __post_init__(self) -> None:
        """Validate and calculate the exported pixel size."""
        self._validate()

        self.output_width_px = int(round(self.image_width_px * self.image_scale))
        self.output_height_px = int(round(self.image_height_px * self.image_scale))

    def _validate(self) -> None:
        """Validate configuration parameters."""
        if not np.isfinite(self.observation_window_seconds) or self.observation_window_seconds <= 0:
            raise ValueError("Observation window must be positive")

        if not np.isfinite(self.decay_rate) or self.decay_rate < 0:
            raise ValueError("Decay rate must be non-negative")

        if self.interpolation_factor < 1:
            raise ValueError("Interpolation factor must be at least 1")

        if self.image_width_px <= 0 or self.image_height_px <= 0:
            raise ValueError(
                f"Image dimensions must be positive. "
                f"Received: {self.image_width_px}x{self.image_height_px} px"
            )

        if self.image_scale <= 0:
            raise ValueError("Image scale must be positive")

        if self.grid_rows < 1 or self.grid_columns < 1:
            raise ValueError("Grid must have at least one row and one column")

        if not str(self.output_path).lower().endswith(".png"):
            print(
                f"WARNING: Output path '{self.output_path}' does not end in .png. "
                f"The file is written as PNG regardless."
            )

    def get_summary_dict(self) -> Dict[str, Any]:
        """Return a dictionary summary of the configuration."""
        return {
            "observation_window_seconds": self.observation_window_seconds,
            "decay_rate": self.decay_rate,
            "interpolation_factor": self.interpolation_factor,
            "output_path": self.output_path,
            "image_width_px": self.image_width_px,
            "image_height_px": self.image_height_px,
            "image_scale": self.image_scale,
            "output_width_px": self.output_width_px,
            "output_height_px": self.output_height_px,
            "grid": f"{self.grid_rows}x{self.grid_columns}",
            "show_layout_guides": self.show_layout_guides
        }


@dataclass
class PanelResult:
    """
    Waveforms and metrics of a single comparison panel.

    Attributes:
        parameters: The SignalParameters of the panel.
        continuous: Ideal reference waveform.
        sampled: Sampled and quantized waveform.
        raw_samples: Sampled amplitudes before quantization.
        apparent_frequency_hz: Frequency the sampled series appears to have.
        sqnr_measured_db: Measured signal-to-quantization-noise ratio.
        sqnr_theoretical_db: 6.02 * bits + 1.76 for comparison.
    """
    parameters: SignalParameters
    continuous: WaveformSeries
    sampled: WaveformSeries
    raw_samples: np.ndarray
    apparent_frequency_hz: float = 0.0
    sqnr_measured_db: float = 0.0
    sqnr_theoretical_db: float = 0.0

    def get_metrics_dict(self) -> Dict[str, Any]:
        """Return the panel metrics as a dictionary."""
        return {
            "name": self.parameters.name,
            "nyquist_ratio": self.parameters.nyquist_ratio,
            "is_aliased": self.parameters.is_aliased,
            "apparent_frequency_hz": self.apparent_frequency_hz,
            "number_of_samples": self.sampled.get_number_of_samples(),
            "number_of_continuous_points": self.continuous.get_number_of_samples(),
            "sqnr_measured_db": self.sqnr_measured_db,
            "sqnr_theoretical_db": self.sqnr_theoretical_db
        }


@dataclass
class ComparisonResults:
    """
    Container for everything produced by one run.

    Attributes:
        configuration: The ComparisonConfiguration used for this run.
        panels: One PanelResult per parameter set, in slot order.
        descriptors: The subplot descriptors handed to the plotter.
        output_path: The written PNG, None if rendering was skipped.
        render_completed: Whether the image was written.
    """
    configuration: ComparisonConfiguration
    panels: List[PanelResult] = field(default_factory=list)
    descriptors: tuple = ()
    output_path: Optional[Path] = None
    render_completed: bool = False

    def print_summary(self) -> None:
        """
        Print a formatted summary of the comparison.

        One block per panel with its sampling regime and quantization
        figures, followed by the output location.
        """
        print("\n" + "=" * 70)
        print("DIGITAL AUDIO SAMPLING COMPARISON")
        print("=" * 70)

        print("\n--- Configuration ---")
        print(f"  Observation Window:      {self.configuration.observation_window_seconds:.2f} s")
        print(f"  Decay Rate:              {self.configuration.decay_rate}")
        print(f"  Interpolation Factor:    {self.configuration.interpolation_factor}x")
        print(f"  Image Size:              {self.configuration.output_width_px} x "
              f"{self.configuration.output_height_px} px")

        for panel in self.panels:
            parameters = panel.parameters
            print(f"\n--- {parameters.name} ---")
            print(f"  Signal Frequency:        {parameters.signal_frequency_hz:.1f} Hz")
            print(f"  Sampling Rate:           {parameters.sampling_rate_hz} Hz")
            print(f"  Bit Depth:               {parameters.bit_depth} bits")
            print(f"  Nyquist Ratio:           {parameters.nyquist_ratio:.3f}")

            if parameters.is_aliased:
                print(f"  Aliasing:                YES (appears as "
                      f"{panel.apparent_frequency_hz:.1f} Hz)")
            else:
                print("  Aliasing:                No")

            print(f"  Samples:                 {panel.sampled.get_number_of_samples()}")
            print(f"  SQNR (measured):         {panel.sqnr_measured_db:.1f} dB")
            print(f"  SQNR (theoretical):      {panel.sqnr_theoretical_db:.1f} dB")

        print("\n--- Status ---")
        print(f"  Image Written:           {'Yes' if self.render_completed else 'No'}")
        if self.output_path is not None:
            print(f"  Output:                  {self.output_path}")

        print("\n" + "=" * 70)

    def get_metrics_dict(self) -> Dict[str, Any]:
        """
        Return all metrics as a dictionary.

        Returns:
            Dict keyed by panel name, plus the output path.
        """
        return {
            "panels": {
                panel.parameters.name: panel.get_metrics_dict()
                for panel in self.panels
            },
            "output_path": str(self.output_path) if self.output_path is not None else None,
            "render_completed": self.render_completed
        }


class ComparisonRunner:
    """
    Main orchestrator for the sampling comparison chart.

    Usage:
        runner = ComparisonRunner(ComparisonConfiguration())
        results = runner.run(DEFAULT_PARAMETER_SETS)
        results.print_summary()

    Attributes:
        configuration: The ComparisonConfiguration for this runner.
        synthesizer: The DampedSineSynthesizer instance.
    """

    def __init__(self, configuration: Optional[ComparisonConfiguration] = None) -> None:
        """
        Initialize the runner.

        Args:
            configuration: Run configuration. Defaults are used if None.
        """
        if configuration is None:
            configuration = ComparisonConfiguration()

        self.configuration: ComparisonConfiguration = configuration

        self.synthesizer: DampedSineSynthesizer = DampedSineSynthesizer(
            observation_window_seconds=configuration.observation_window_seconds,
            decay_rate=configuration.decay_rate,
            interpolation_factor=configuration.interpolation_factor
        )

    def compute_panel(self, parameters: SignalParameters) -> PanelResult:
        """
        Synthesize the waveforms of one panel and measure them.

        Args:
            parameters: The panel's signal parameters.

        Returns:
            PanelResult with both series and their metrics.
        """
        continuous, sampled, raw_samples = self.synthesizer.synthesize_with_raw_samples(
            parameters
        )

        return PanelResult(
            parameters=parameters,
            continuous=continuous,
            sampled=sampled,
            raw_samples=raw_samples,
            apparent_frequency_hz=compute_apparent_frequency_hz(
                parameters.signal_frequency_hz,
                parameters.sampling_rate_hz
            ),
            sqnr_measured_db=compute_signal_to_quantization_noise_ratio_db(
                raw_samples, sampled.amplitude
            ),
            sqnr_theoretical_db=compute_theoretical_sqnr_db(parameters.bit_depth)
        )

    def run(
        self,
        parameter_sets: Sequence[SignalParameters] = tuple(DEFAULT_PARAMETER_SETS),
        render: bool = True,
        verbose: bool = True
    ) -> ComparisonResults:
        """
        Execute the complete comparison.

        Args:
            parameter_sets: One SignalParameters per panel, in slot order.
            render: If False, compute everything but skip the PNG export.
            verbose: If True, print progress messages.

        Returns:
            ComparisonResults containing all panels and the output path.

        Raises:
            ValueError: If there are no parameter sets or more than the
                grid holds.
        """
        config = self.configuration
        slot_count: int = config.grid_rows * config.grid_columns

        if len(parameter_sets) == 0:
            raise ValueError("At least one parameter set is required")

        if len(parameter_sets) > slot_count:
            raise ValueError(
                f"{len(parameter_sets)} parameter sets do not fit in a "
                f"{config.grid_rows}x{config.grid_columns} grid"
            )

        if verbose:
            print("\n" + "-" * 50)
            print(f"Running comparison: {len(parameter_sets)} panels, "
                  f"{config.observation_window_seconds:.1f} s window")
            print("-" * 50)

        # ===== STEP 1: SYNTHESIZE AND MEASURE =====
        if verbose:
            print("  [1/3] Synthesizing waveforms...")

        panels: List[PanelResult] = []
        for parameters in parameter_sets:
            panel = self.compute_panel(parameters)
            panels.append(panel)

            if verbose:
                aliasing_note = (
                    f"aliased to {panel.apparent_frequency_hz:.1f} Hz"
                    if parameters.is_aliased else "no aliasing"
                )
                print(f"        {parameters.name}: ratio={parameters.nyquist_ratio:.2f}, "
                      f"{panel.sampled.get_number_of_samples()} samples, {aliasing_note}")

        # ===== STEP 2: BUILD LAYOUT =====
        if verbose:
            print("  [2/3] Building subplot layout...")

        descriptors = build_subplot_descriptors(
            [(panel.parameters, panel.continuous, panel.sampled) for panel in panels],
            rows=config.grid_rows,
            columns=config.grid_columns
        )

        results: ComparisonResults = ComparisonResults(
            configuration=config,
            panels=panels,
            descriptors=descriptors
        )

        # ===== STEP 3: RENDER =====
        if not render:
            if verbose:
                print("  [3/3] Rendering skipped.")
            return results

        if verbose:
            print("  [3/3] Rendering image...")

        results.output_path = self.render(descriptors, verbose=verbose)
        results.render_completed = True

        return results

    def render(
        self,
        descriptors: Sequence[SubplotDescriptor],
        verbose: bool = True
    ) -> Path:
        """Write the chart for the given descriptors using the configured output settings."""
        config = self.configuration

        return ComparisonPlotter.render_comparison(
            descriptors,
            output_path=config.output_path,
            image_width_px=config.image_width_px,
            image_height_px=config.image_height_px,
            image_scale=config.image_scale,
            show_layout_guides=config.show_layout_guides,
            verbose=verbose
        )
