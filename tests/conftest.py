"""Shared fixtures: ephemeris timestamps and on-disk body data directories."""

from __future__ import annotations

import json
import math
from collections.abc import Callable
from datetime import date, timedelta
from pathlib import Path
from typing import Any

import pytest

from angular_size_tools.bodies import Body, Sample

_MONTHS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun', 'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')

# Circular-orbit radii (km) and periods (days) for synthetic samples.
_ORBITS: dict[str, tuple[float, float, float, float]] = {
    # name: (orbit radius, period, periapsis, apoapsis)
    'earth': (1.496e8, 365.25, 1.471e8, 1.521e8),
    'mars': (2.279e8, 687.0, 2.066e8, 2.492e8),
    'venus': (1.082e8, 224.7, 1.075e8, 1.089e8),
}


def ephemeris_timestamp(d: date, hms: str = '00:00:00.0000') -> str:
    """Format a date the way the weekly sample files do."""
    return f'A.D. {d.year:04d}-{_MONTHS[d.month - 1]}-{d.day:02d} {hms}'


def weekly_timestamps(start: date, count: int) -> list[str]:
    return [ephemeris_timestamp(start + timedelta(weeks=i)) for i in range(count)]


def body_record(name: str, start: date, count: int) -> dict[str, Any]:
    """Per-body JSON record with circular-orbit weekly positions."""
    radius, period, peri, apo = _ORBITS[name]
    samples = []
    for i, stamp in enumerate(weekly_timestamps(start, count)):
        angle = 2.0 * math.pi * (7.0 * i) / period
        samples.append(
            {
                'time_iso': stamp,
                'position_km': [radius * math.cos(angle), radius * math.sin(angle), 0.0],
            }
        )
    return {'samples_weekly': samples, 'periapsis_km': peri, 'apoapsis_km': apo}


def make_body(
    name: str,
    positions: list[tuple[float, float, float]],
    start: date = date(2020, 1, 1),
    periapsis_km: float = 1.0e8,
    apoapsis_km: float = 1.1e8,
    radius_km: float | None = 6371.0,
) -> Body:
    """In-memory Body with one weekly sample per position."""
    stamps = weekly_timestamps(start, len(positions))
    return Body(
        name=name,
        periapsis_km=periapsis_km,
        apoapsis_km=apoapsis_km,
        radius_km=radius_km,
        samples=tuple(Sample(t, p) for t, p in zip(stamps, positions)),
    )


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Data directory with earth (156 weeks), mars (120 weeks) and venus (156 weeks)."""
    start = date(2020, 1, 1)
    counts = {'earth': 156, 'mars': 120, 'venus': 156}
    manifest = {'bodies': [{'body': name} for name in counts]}
    (tmp_path / 'manifest.json').write_text(json.dumps(manifest), encoding='utf-8')
    for name, count in counts.items():
        record = body_record(name, start, count)
        (tmp_path / f'{name}.json').write_text(json.dumps(record), encoding='utf-8')
    return tmp_path


@pytest.fixture
def body_factory() -> Callable[..., Body]:
    return make_body
