"""Tests for the paired-sample series builder and the year-window filter."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from datetime import date

import pytest

from angular_size_tools.bodies import Body
from angular_size_tools.errors import (
    BodyNotFound,
    DegenerateGeometry,
    InvalidSelection,
    TimestampParseError,
)
from angular_size_tools.geometry import angular_size
from angular_size_tools.series import (
    AngularSizeSeries,
    SeriesPoint,
    build_series,
    window_series,
)

BodyFactory = Callable[..., Body]


def _point(time_iso: str, arcsec: float = 1.0) -> SeriesPoint:
    return SeriesPoint(time_iso=time_iso, distance_km=1.0e8, arcsec=arcsec)


def test_build_series_truncates_to_shorter_sequence(body_factory: BodyFactory) -> None:
    """Observer with 5 samples and target with 3 yields exactly 3 points."""
    observer = body_factory('earth', [(1.0e8, 0.0, 0.0)] * 5)
    target = body_factory('mars', [(2.0e8, 0.0, 0.0)] * 3, radius_km=3389.5)

    series = build_series(observer, target)

    assert len(series) == 3
    assert series.times == [s.time_iso for s in observer.samples[:3]]


def test_build_series_values_follow_target_minus_observer(body_factory: BodyFactory) -> None:
    """Distance is |target - observer| per index and angles use the target radius."""
    observer = body_factory('earth', [(1.0e8, 0.0, 0.0), (0.0, 1.0e8, 0.0)])
    target = body_factory(
        'mars',
        [(1.0e8, 3.0e7, 4.0e7), (0.0, 3.0e8, 0.0)],
        radius_km=3389.5,
    )

    series = build_series(observer, target)

    assert [p.distance_km for p in series] == pytest.approx([5.0e7, 2.0e8])
    assert series.angles[0] == pytest.approx(angular_size(3389.5, 5.0e7))
    assert series.angles[1] == pytest.approx(angular_size(3389.5, 2.0e8))
    assert series.angles[0] > series.angles[1]


def test_build_series_uses_observer_timestamps(body_factory: BodyFactory) -> None:
    observer = body_factory('earth', [(1.0e8, 0.0, 0.0)] * 2, start=date(2021, 1, 1))
    target = body_factory('mars', [(2.0e8, 0.0, 0.0)] * 2, start=date(1999, 1, 1))

    series = build_series(observer, target)

    assert series.times[0].startswith('A.D. 2021-Jan-01')


def test_build_series_rejects_identical_selection(body_factory: BodyFactory) -> None:
    earth = body_factory('earth', [(1.0e8, 0.0, 0.0)] * 3)

    with pytest.raises(InvalidSelection):
        build_series(earth, earth)


def test_build_series_requires_target_radius(body_factory: BodyFactory) -> None:
    observer = body_factory('earth', [(1.0e8, 0.0, 0.0)])
    target = body_factory('ceres', [(4.0e8, 0.0, 0.0)], radius_km=None)

    with pytest.raises(BodyNotFound):
        build_series(observer, target)


def test_build_series_zero_distance_is_degenerate(body_factory: BodyFactory) -> None:
    """Coincident positions raise instead of producing an infinite angle."""
    observer = body_factory('earth', [(1.0e8, 0.0, 0.0), (1.0e8, 5.0, 0.0)])
    target = body_factory('mars', [(2.0e8, 0.0, 0.0), (1.0e8, 5.0, 0.0)])

    with pytest.raises(DegenerateGeometry):
        build_series(observer, target)


def test_build_series_empty_when_a_body_has_no_samples(body_factory: BodyFactory) -> None:
    observer = body_factory('earth', [])
    target = body_factory('mars', [(2.0e8, 0.0, 0.0)])

    assert len(build_series(observer, target)) == 0


def test_window_zero_years_keeps_only_start_date(body_factory: BodyFactory) -> None:
    """years=0 on a series starting 2020-01-01 keeps only the 2020-01-01 entry."""
    observer = body_factory('earth', [(1.0e8, 0.0, 0.0)] * 6)
    target = body_factory('mars', [(2.0e8, 0.0, 0.0)] * 6)
    series = build_series(observer, target)

    window = window_series(series, 0)

    assert window.dates == ['2020-01-01']
    assert window.start == window.end
    assert window.warnings == ()


def test_window_boundary_is_inclusive() -> None:
    """A sample exactly one year after the first one is kept; the next day is not."""
    series = AngularSizeSeries(
        (
            _point('A.D. 2020-Jan-01 00:00:00.0000', 5.0),
            _point('A.D. 2020-Jul-01 00:00:00.0000', 4.0),
            _point('A.D. 2021-Jan-01 00:00:00.0000', 3.0),
            _point('A.D. 2021-Jan-01 00:00:01.0000', 2.0),
            _point('A.D. 2021-Jan-02 00:00:00.0000', 1.0),
        )
    )

    window = window_series(series, 1)

    assert window.dates == ['2020-01-01', '2020-07-01', '2021-01-01']
    assert list(window.angles) == [5.0, 4.0, 3.0]
    assert window.end is not None
    assert window.end.date_label() == '2021-01-01'


def test_window_weekly_series_three_years(body_factory: BodyFactory) -> None:
    """Weekly samples from 2020-01-01 within 1 year: 53 points through 2020-12-30."""
    observer = body_factory('earth', [(1.0e8, 0.0, 0.0)] * 156)
    target = body_factory('mars', [(2.0e8, 0.0, 0.0)] * 156)

    window = window_series(build_series(observer, target), 1)

    assert len(window) == 53
    assert window.dates[-1] == '2020-12-30'


def test_window_drops_unparseable_entries_with_warning(caplog: pytest.LogCaptureFixture) -> None:
    series = AngularSizeSeries(
        (
            _point('A.D. 2020-Jan-01 00:00:00.0000', 3.0),
            _point('A.D. 2020-Foo-08 00:00:00.0000', 2.0),
            _point('A.D. 2020-Jan-15 00:00:00.0000', 1.0),
        )
    )

    with caplog.at_level('WARNING', logger='angular_size_tools.series'):
        window = window_series(series, 1)

    assert window.dates == ['2020-01-01', '2020-01-15']
    assert list(window.angles) == [3.0, 1.0]
    assert len(window.warnings) == 1
    assert 'Foo' in window.warnings[0]
    assert 'Dropping sample' in caplog.text


def test_window_unparseable_start_is_fatal() -> None:
    series = AngularSizeSeries(
        (
            _point('A.D. 2020-Foo-01 00:00:00.0000'),
            _point('A.D. 2020-Jan-08 00:00:00.0000'),
        )
    )

    with pytest.raises(TimestampParseError):
        window_series(series, 5)


def test_window_explicit_first_timestamp() -> None:
    series = AngularSizeSeries(
        (
            _point('A.D. 2020-Jan-01 00:00:00.0000'),
            _point('A.D. 2021-Jun-01 00:00:00.0000'),
        )
    )

    window = window_series(series, 0, first_timestamp='A.D. 2021-Jun-01 00:00:00.0000')

    assert window.dates == ['2020-01-01', '2021-06-01']


def test_window_empty_series_and_negative_years() -> None:
    assert len(window_series(AngularSizeSeries(), 3)) == 0
    assert window_series(AngularSizeSeries(), 3).start is None
    with pytest.raises(ValueError):
        window_series(AngularSizeSeries((_point('A.D. 2020-Jan-01 00:00:00'),)), -1)


def test_series_points_are_immutable() -> None:
    point = _point('A.D. 2020-Jan-01 00:00:00')
    with pytest.raises(dataclasses.FrozenInstanceError):
        point.arcsec = 2.0  # type: ignore[misc]
