"""Angular size tool: compute the windowed series and bounds, then render."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TextIO

from angular_size_tools.bodies import display_label, normalize_body_name
from angular_size_tools.catalog import load_body
from angular_size_tools.errors import InvalidSelection
from angular_size_tools.extremes import ExtremeBounds, estimate_extremes
from angular_size_tools.params import AngularSizeParams
from angular_size_tools.series import build_series, window_series

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AngularSizeResult:
    """Everything a renderer needs for one request.

    dates, angles_arcsec and distances_km are parallel and in time order.
    """

    observer: str
    target: str
    years: int
    dates: tuple[str, ...]
    angles_arcsec: tuple[float, ...]
    distances_km: tuple[float, ...]
    bounds: ExtremeBounds
    start_date: str | None = None
    end_date: str | None = None
    warnings: tuple[str, ...] = field(default=())

    @property
    def min_label(self) -> str:
        return self.bounds.min_label

    @property
    def max_label(self) -> str:
        return self.bounds.max_label

    @property
    def default_title(self) -> str:
        return f'{display_label(self.target)} as seen from {display_label(self.observer)}'


def compute_angular_size(params: AngularSizeParams) -> AngularSizeResult:
    """Run the full pipeline for one observer/target pair.

    Selection is validated and both bodies are loaded before any series work.

    Parameters:
        params: Observer, target, window length and data directory.

    Returns:
        AngularSizeResult holding the windowed series and the apsis bounds.

    Raises:
        InvalidSelection: Observer and target are the same body.
        BodyNotFound: Unknown body, or a target without a known radius.
        TimestampParseError: The first sample timestamp cannot be parsed.
        DegenerateGeometry: A zero distance occurs in the samples or the bounds.
    """
    observer_name = normalize_body_name(params.observer)
    target_name = normalize_body_name(params.target)
    if observer_name == target_name:
        raise InvalidSelection('Observer and target cannot be the same')

    observer = load_body(observer_name, params.data_path)
    target = load_body(target_name, params.data_path)
    target.require_radius()

    series = build_series(observer, target)
    bounds = estimate_extremes(observer, target)
    window = window_series(series, params.years)
    logger.info(
        '%s from %s: %d of %d samples within %d years',
        target_name,
        observer_name,
        len(window),
        len(series),
        params.years,
    )

    return AngularSizeResult(
        observer=observer_name,
        target=target_name,
        years=params.years,
        dates=tuple(window.dates),
        angles_arcsec=tuple(p.arcsec for p in window.points),
        distances_km=tuple(p.distance_km for p in window.points),
        bounds=bounds,
        start_date=window.start.date_label() if window.start is not None else None,
        end_date=window.end.date_label() if window.end is not None else None,
        warnings=window.warnings,
    )


def run_angular_size(
    params: AngularSizeParams,
    output_txt: TextIO | None = None,
) -> AngularSizeResult:
    """Compute, then write the text table and/or PNG chart requested in params."""
    from angular_size_tools.table import write_series_table

    result = compute_angular_size(params)
    out_txt = output_txt or params.output_txt
    if out_txt is not None:
        write_series_table(out_txt, result)
    if params.output_png:
        from angular_size_tools.rendering.matplotlib_series import save_angular_size_chart

        save_angular_size_chart(result, params.output_png, title=params.title)
    return result
