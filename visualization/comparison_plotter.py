"""
Comparison Plotter
==================

This module draws the digital audio comparison grid with matplotlib and
exports it as a fixed-size PNG.

Each panel shows:
1. The ideal damped sine (thin translucent grey line)
2. The sampled and quantized series (blue line, red sample markers)
3. A boxed parameter summary in the upper-right corner

The output size is given in "layout pixels" plus a scale factor, so the
default 1200 x 800 layout at scale 4.0 produces a 4800 x 3200 pixel
image with the same proportions.
"""

from pathlib import Path
from typing import Sequence, Tuple, Union

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure

from .subplot_layout import SubplotDescriptor


class ComparisonPlotter:
    """
    Plotting utilities for the sampling comparison chart.

    All methods are static to allow easy use without instantiation.
    """

    DEFAULT_IMAGE_WIDTH_PX: int = 1200
    DEFAULT_IMAGE_HEIGHT_PX: int = 800
    DEFAULT_IMAGE_SCALE: float = 4.0

    # Matplotlib lays figures out at 100 dots per inch before scaling
    LAYOUT_DPI: float = 100.0

    AMPLITUDE_LIMITS: Tuple[float, float] = (-1.2, 1.2)

    FONT_FAMILY: str = "monospace"
    TEXT_COLOR: str = "#333333"
    GUIDE_COLOR: str = "#999999"

    CONTINUOUS_LINE_COLOR: Tuple[float, float, float, float] = (170 / 255, 170 / 255, 170 / 255, 0.5)
    SAMPLED_LINE_COLOR: Tuple[float, float, float, float] = (31 / 255, 119 / 255, 180 / 255, 1.0)
    SAMPLE_MARKER_COLOR: Tuple[float, float, float, float] = (1.0, 0.0, 0.0, 0.7)

    @staticmethod
    def create_comparison_figure(
        descriptors: Sequence[SubplotDescriptor],
        image_width_px: int = DEFAULT_IMAGE_WIDTH_PX,
        image_height_px: int = DEFAULT_IMAGE_HEIGHT_PX,
        show_layout_guides: bool = False
    ) -> Figure:
        """
        Build the comparison figure without saving it.

        Args:
            descriptors: One SubplotDescriptor per panel.
            image_width_px: Layout width in pixels.
            image_height_px: Layout height in pixels.
            show_layout_guides: If True, overlay figure-fraction guide marks.

        Returns:
            Figure: The populated matplotlib figure. The caller owns it
                and must close it.
        """
        if image_width_px <= 0 or image_height_px <= 0:
            raise ValueError(
                f"Image dimensions must be positive. "
                f"Received: {image_width_px}x{image_height_px} px"
            )

        fig: Figure = plt.figure(
            figsize=(
                image_width_px / ComparisonPlotter.LAYOUT_DPI,
                image_height_px / ComparisonPlotter.LAYOUT_DPI
            ),
            dpi=ComparisonPlotter.LAYOUT_DPI
        )
        fig.patch.set_facecolor("white")

        for descriptor in descriptors:
            ComparisonPlotter._draw_subplot(fig, descriptor)

        if show_layout_guides:
            ComparisonPlotter._draw_layout_guides(fig)

        return fig

    @staticmethod
    def render_comparison(
        descriptors: Sequence[SubplotDescriptor],
        output_path: Union[str, Path],
        image_width_px: int = DEFAULT_IMAGE_WIDTH_PX,
        image_height_px: int = DEFAULT_IMAGE_HEIGHT_PX,
        image_scale: float = DEFAULT_IMAGE_SCALE,
        show_layout_guides: bool = False,
        verbose: bool = True
    ) -> Path:
        """
        Draw all panels and write the PNG.

        Args:
            descriptors: One SubplotDescriptor per panel.
            output_path: Destination file. Parent directories are created.
            image_width_px: Layout width in pixels.
            image_height_px: Layout height in pixels.
            image_scale: Resolution multiplier applied at export.
            show_layout_guides: If True, overlay figure-fraction guide marks.
            verbose: If True, print the saved path.

        Returns:
            Path: The written file.
        """
        if image_scale <= 0:
            raise ValueError(
                f"Image scale must be positive. "
                f"Received: {image_scale}"
            )

        output_path = Path(output_path)
        if output_path.parent != Path("."):
            output_path.parent.mkdir(parents=True, exist_ok=True)

        fig: Figure = ComparisonPlotter.create_comparison_figure(
            descriptors,
            image_width_px=image_width_px,
            image_height_px=image_height_px,
            show_layout_guides=show_layout_guides
        )

        try:
            # No bbox_inches='tight': the pixel size must stay fixed
            fig.savefig(
                output_path,
                format="png",
                dpi=ComparisonPlotter.LAYOUT_DPI * image_scale,
                facecolor=fig.get_facecolor()
            )
        finally:
            plt.close(fig)

        if verbose:
            print(f"Figure saved to:  {output_path}")

        return output_path

    @staticmethod
    def _draw_subplot(fig: Figure, descriptor: SubplotDescriptor) -> Axes:
        """Add one panel at its computed domain."""
        left, right = descriptor.x_domain
        bottom, top = descriptor.y_domain

        ax: Axes = fig.add_axes([left, bottom, right - left, top - bottom])

        ax.plot(
            descriptor.continuous.time_axis_seconds,
            descriptor.continuous.amplitude,
            color=ComparisonPlotter.CONTINUOUS_LINE_COLOR,
            linewidth=1.0,
            label=descriptor.continuous.label
        )
        ax.plot(
            descriptor.sampled.time_axis_seconds,
            descriptor.sampled.amplitude,
            color=ComparisonPlotter.SAMPLED_LINE_COLOR,
            linewidth=1.0,
            marker="o",
            markersize=4,
            markerfacecolor=ComparisonPlotter.SAMPLE_MARKER_COLOR,
            markeredgecolor=ComparisonPlotter.SAMPLE_MARKER_COLOR,
            label=descriptor.sampled.label
        )

        ax.set_ylim(*ComparisonPlotter.AMPLITUDE_LIMITS)
        ax.set_xlabel(
            "Time (s)", fontsize=7,
            family=ComparisonPlotter.FONT_FAMILY, color=ComparisonPlotter.TEXT_COLOR
        )
        ax.set_ylabel(
            "Amplitude", fontsize=7,
            family=ComparisonPlotter.FONT_FAMILY, color=ComparisonPlotter.TEXT_COLOR
        )
        ax.tick_params(labelsize=6, labelcolor=ComparisonPlotter.TEXT_COLOR)
        ax.grid(True, alpha=0.3)

        # Parameter summary box, anchored at its top-right corner
        ax.text(
            0.98,
            0.96,
            descriptor.title,
            transform=ax.transAxes,
            ha="right",
            va="top",
            multialignment="left",
            fontsize=8,
            family=ComparisonPlotter.FONT_FAMILY,
            color=ComparisonPlotter.TEXT_COLOR,
            bbox=dict(
                boxstyle="square,pad=0.3",
                facecolor="white",
                edgecolor=ComparisonPlotter.TEXT_COLOR
            )
        )

        return ax

    @staticmethod
    def _draw_layout_guides(fig: Figure) -> None:
        """
        Overlay figure-fraction guide marks every 0.1.

        Draws "x: 0.0" ... "x: 1.0" along the bottom edge with "|" marks
        across the middle, and "y: 0.0" ... "y: 1.0" along the left edge
        with dash marks down the middle.
        """
        guide_style = dict(
            fontsize=8,
            family=ComparisonPlotter.FONT_FAMILY,
            color=ComparisonPlotter.GUIDE_COLOR,
            ha="center",
            va="center"
        )

        for i in range(11):
            position: float = i * 0.1

            fig.text(position, 0.0, f"x: {position:.1f}", **guide_style)
            fig.text(position, 0.5, "|", **guide_style)

            fig.text(0.0, position, f"y: {position:.1f}", **guide_style)
            fig.text(0.5, position, "—", **guide_style)
