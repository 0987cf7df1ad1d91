"""
Subplot Layout
==============

Builds the immutable description of the comparison grid before anything
is drawn:

1. Panel titles (parameter summary text)
2. Axes domains for each grid slot, computed from the slot index
3. SubplotDescriptor records pairing a slot with its two waveforms

The plotter receives the complete tuple of descriptors in one call.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from signals.signal_parameters import SignalParameters
from signals.waveform_series import WaveformSeries


DEFAULT_GRID_ROWS: int = 2
DEFAULT_GRID_COLUMNS: int = 2

# Figure-fraction inset of each axes inside its grid cell
DEFAULT_CELL_MARGIN: float = 0.05


Domain = Tuple[float, float]


@dataclass(frozen=True, eq=False)
class SubplotDescriptor:
    """
    Everything needed to draw one panel.

    Attributes:
        slot_index: Position in the grid, row-major from the top left.
        row: Grid row (0 = top).
        column: Grid column (0 = left).
        x_domain: (left, right) of the axes in figure fractions.
        y_domain: (bottom, top) of the axes in figure fractions.
        title: Parameter summary drawn in the panel corner.
        continuous: Ideal reference waveform.
        sampled: Sampled and quantized waveform.
    """
    slot_index: int
    row: int
    column: int
    x_domain: Domain
    y_domain: Domain
    title: str
    continuous: WaveformSeries
    sampled: WaveformSeries


def generate_title(parameters: SignalParameters) -> str:
    """
    Format the multi-line panel title.

    Example:
        Severe Aliasing (Nyquist Ratio: 2.50)
        Signal: 10.0Hz
        Sampling: 8Hz
        Bit Depth: 16-bit
    """
    return (
        f"{parameters.name} (Nyquist Ratio: {parameters.nyquist_ratio:.2f})\n"
        f"Signal: {parameters.signal_frequency_hz:.1f}Hz\n"
        f"Sampling: {parameters.sampling_rate_hz}Hz\n"
        f"Bit Depth: {parameters.bit_depth}-bit"
    )


def compute_subplot_domains(
    rows: int = DEFAULT_GRID_ROWS,
    columns: int = DEFAULT_GRID_COLUMNS,
    cell_margin: float = DEFAULT_CELL_MARGIN
) -> List[Tuple[Domain, Domain]]:
    """
    Compute the (x_domain, y_domain) of every grid slot.

    Slots are numbered row-major starting at the top left. Each axes
    fills its cell minus cell_margin on every side. For the default 2x2
    grid this gives:

        slot 0: x (0.05, 0.45), y (0.55, 0.95)
        slot 1: x (0.55, 0.95), y (0.55, 0.95)
        slot 2: x (0.05, 0.45), y (0.05, 0.45)
        slot 3: x (0.55, 0.95), y (0.05, 0.45)

    Raises:
        ValueError: If the grid is empty or the margin leaves no room.
    """
    if rows < 1 or columns < 1:
        raise ValueError(
            f"Grid must have at least one row and one column. "
            f"Received: {rows}x{columns}"
        )

    cell_width: float = 1.0 / columns
    cell_height: float = 1.0 / rows

    if cell_margin < 0 or 2 * cell_margin >= min(cell_width, cell_height):
        raise ValueError(
            f"Cell margin {cell_margin} leaves no room for axes in a "
            f"{rows}x{columns} grid"
        )

    domains: List[Tuple[Domain, Domain]] = []
    for slot_index in range(rows * columns):
        row, column = divmod(slot_index, columns)

        x_domain: Domain = (
            column * cell_width + cell_margin,
            (column + 1) * cell_width - cell_margin
        )
        # Row 0 is at the top of the figure
        y_domain: Domain = (
            1.0 - (row + 1) * cell_height + cell_margin,
            1.0 - row * cell_height - cell_margin
        )
        domains.append((x_domain, y_domain))

    return domains


def build_subplot_descriptors(
    panels: Sequence[Tuple[SignalParameters, WaveformSeries, WaveformSeries]],
    rows: int = DEFAULT_GRID_ROWS,
    columns: int = DEFAULT_GRID_COLUMNS
) -> Tuple[SubplotDescriptor, ...]:
    """
    Pair each panel with a grid slot.

    Args:
        panels: (parameters, continuous, sampled) per panel, in slot order.
        rows: Grid rows.
        columns: Grid columns.

    Returns:
        Tuple[SubplotDescriptor, ...]: One descriptor per panel.

    Raises:
        ValueError: If there are more panels than grid slots.
    """
    domains = compute_subplot_domains(rows, columns)

    if len(panels) > len(domains):
        raise ValueError(
            f"{len(panels)} panels do not fit in a {rows}x{columns} grid"
        )

    descriptors: List[SubplotDescriptor] = []
    for slot_index, (parameters, continuous, sampled) in enumerate(panels):
        x_domain, y_domain = domains[slot_index]
        row, column = divmod(slot_index, columns)

        descriptors.append(SubplotDescriptor(
            slot_index=slot_index,
            row=row,
            column=column,
            x_domain=x_domain,
            y_domain=y_domain,
            title=generate_title(parameters),
            continuous=continuous,
            sampled=sampled
        ))

    return tuple(descriptors)
