"""Angular size time series: paired-sample builder and year-window filter."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass, field

import numpy as np

from angular_size_tools.bodies import Body
from angular_size_tools.errors import InvalidSelection, TimestampParseError
from angular_size_tools.geometry import angular_size, line_of_sight_distance
from angular_size_tools.time_utils import Instant, add_years, parse_ephemeris_timestamp

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeriesPoint:
    """One paired sample: observer timestamp, observer-target range, angular size."""

    time_iso: str
    distance_km: float
    arcsec: float


@dataclass(frozen=True)
class AngularSizeSeries:
    """Ordered angular size samples, one per paired sample index."""

    points: tuple[SeriesPoint, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[SeriesPoint]:
        return iter(self.points)

    @property
    def times(self) -> list[str]:
        return [p.time_iso for p in self.points]

    @property
    def angles(self) -> np.ndarray:
        return np.array([p.arcsec for p in self.points], dtype=np.float64)


@dataclass(frozen=True)
class WindowedSeries:
    """Series points inside a year window, with their parsed instants.

    warnings lists the timestamps that could not be parsed and were dropped.
    start/end are None only for an empty input series.
    """

    points: tuple[SeriesPoint, ...] = ()
    instants: tuple[Instant, ...] = ()
    start: Instant | None = None
    end: Instant | None = None
    warnings: tuple[str, ...] = field(default=())

    def __len__(self) -> int:
        return len(self.points)

    @property
    def dates(self) -> list[str]:
        """Date labels (YYYY-MM-DD, UTC) parallel to points."""
        return [t.date_label() for t in self.instants]

    @property
    def angles(self) -> np.ndarray:
        return np.array([p.arcsec for p in self.points], dtype=np.float64)


def build_series(observer: Body, target: Body) -> AngularSizeSeries:
    """Angular size of target seen from observer at each paired weekly sample.

    Samples are paired by index (no timestamp join); the series has
    min(len(observer.samples), len(target.samples)) points and carries the
    observer's timestamps.

    Parameters:
        observer: Body the target is seen from.
        target: Body whose angular diameter is measured.

    Returns:
        AngularSizeSeries in sample order.

    Raises:
        InvalidSelection: If observer and target are the same body.
        BodyNotFound: If the target has no known radius.
        DegenerateGeometry: If a paired sample has zero observer-target distance.
    """
    if observer.name == target.name:
        raise InvalidSelection('Observer and target cannot be the same')
    radius_km = target.require_radius()

    nobs = len(observer.samples)
    ntar = len(target.samples)
    n = min(nobs, ntar)
    if nobs != ntar:
        logger.info(
            'Sample counts differ (%s=%d, %s=%d); using the first %d',
            observer.name,
            nobs,
            target.name,
            ntar,
            n,
        )

    points: list[SeriesPoint] = []
    for i in range(n):
        obs = observer.samples[i]
        tar = target.samples[i]
        dist = line_of_sight_distance(obs.position_km, tar.position_km)
        points.append(
            SeriesPoint(
                time_iso=obs.time_iso,
                distance_km=dist,
                arcsec=angular_size(radius_km, dist),
            )
        )
    return AngularSizeSeries(tuple(points))


def window_series(
    series: AngularSizeSeries,
    years: int,
    first_timestamp: str | None = None,
) -> WindowedSeries:
    """Keep the points no later than first timestamp + years (calendar years).

    The boundary is inclusive. Points whose timestamp cannot be parsed are
    dropped and reported in the result's warnings.

    Parameters:
        series: Series to filter.
        years: Window length in whole years (>= 0).
        first_timestamp: Reference start; defaults to the series' first timestamp.

    Returns:
        WindowedSeries in the original order.

    Raises:
        ValueError: If years is negative.
        TimestampParseError: If the reference start timestamp cannot be parsed.
    """
    if years < 0:
        raise ValueError(f'Window length must be >= 0 years, got {years}')
    if first_timestamp is None:
        if not series.points:
            return WindowedSeries()
        first_timestamp = series.points[0].time_iso

    start = parse_ephemeris_timestamp(first_timestamp)
    end = add_years(start, years)

    kept: list[SeriesPoint] = []
    instants: list[Instant] = []
    warnings: list[str] = []
    for point in series.points:
        try:
            instant = parse_ephemeris_timestamp(point.time_iso)
        except TimestampParseError as e:
            logger.warning('Dropping sample: %s', e)
            warnings.append(str(e))
            continue
        if instant <= end:
            kept.append(point)
            instants.append(instant)
    return WindowedSeries(
        points=tuple(kept),
        instants=tuple(instants),
        start=start,
        end=end,
        warnings=tuple(warnings),
    )
