"""Matplotlib line chart of angular diameter versus date."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import numpy as np
from matplotlib.figure import Figure

if TYPE_CHECKING:
    from angular_size_tools.angular_size import AngularSizeResult

_LINE_COLOR = 'blue'
_BOUND_COLOR = 'gray'


def render_angular_size_chart(
    result: AngularSizeResult,
    title: str = '',
    show_bounds: bool = True,
) -> Figure:
    """Render the windowed series as a line chart.

    A fresh Figure is built per call; nothing is kept between renders.

    Parameters:
        result: Computed angular size result.
        title: Plot title; empty uses "<Target> as seen from <Observer>".
        show_bounds: Draw the apsis-based min/max as dashed horizontal lines.

    Returns:
        matplotlib Figure (not attached to pyplot).
    """
    fig = Figure(figsize=(10, 5))
    ax = fig.add_subplot()
    dates = np.array(result.dates, dtype='datetime64[D]')
    angles = np.array(result.angles_arcsec, dtype=np.float64)
    ax.plot(dates, angles, color=_LINE_COLOR, label='Angular Diameter (arcsec)')

    if show_bounds:
        for value, label in (
            (result.bounds.max_arcsec, f'Max {result.max_label}'),
            (result.bounds.min_arcsec, f'Min {result.min_label}'),
        ):
            ax.axhline(value, color=_BOUND_COLOR, linestyle='--', linewidth=0.8, label=label)

    ax.set_title(title.strip() or result.default_title)
    ax.set_xlabel('Date')
    ax.set_ylabel('Arcseconds')
    ax.legend(loc='upper right')
    fig.autofmt_xdate()
    return fig


def save_angular_size_chart(
    result: AngularSizeResult,
    output_path: str | Path,
    title: str = '',
) -> Path:
    """Render and save the chart (format from the file suffix, e.g. .png).

    Returns:
        Path of the written file.
    """
    path = Path(output_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_angular_size_chart(result, title=title)
    fig.savefig(path)
    return path
