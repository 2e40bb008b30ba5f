"""Body and sample dataclasses, radius table lookup, and record conversion."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from angular_size_tools.constants import PLANET_RADII_KM
from angular_size_tools.errors import BodyNotFound, InvalidBodyRecord


@dataclass(frozen=True)
class Sample:
    """One weekly position sample: raw ephemeris timestamp and position (km)."""

    time_iso: str
    position_km: tuple[float, float, float]


@dataclass(frozen=True)
class Body:
    """Body identity, orbital apsides and its ordered weekly samples."""

    name: str
    periapsis_km: float
    apoapsis_km: float
    radius_km: float | None = None
    samples: tuple[Sample, ...] = field(default=(), repr=False)

    @property
    def label(self) -> str:
        """Display label ("earth" -> "Earth")."""
        return display_label(self.name)

    def require_radius(self) -> float:
        """Return the mean radius (km) or raise BodyNotFound if none is known."""
        if self.radius_km is None:
            raise BodyNotFound(self.name, f'No mean radius known for body {self.name!r}')
        return self.radius_km


def normalize_body_name(name: str) -> str:
    """Canonical body identifier: stripped and lower case."""
    return name.strip().lower()


def display_label(name: str) -> str:
    """Capitalized label for menus and captions."""
    return name[:1].upper() + name[1:]


def body_radius_km(name: str) -> float:
    """Mean radius (km) from the fixed radius table.

    Raises:
        BodyNotFound: If the body has no entry in the table.
    """
    key = normalize_body_name(name)
    if key not in PLANET_RADII_KM:
        raise BodyNotFound(name, f'No mean radius known for body {name!r}')
    return PLANET_RADII_KM[key]


def _sample_from_record(name: str, index: int, raw: Any) -> Sample:
    """Convert one samples_weekly entry, validating its position vector."""
    if not isinstance(raw, Mapping):
        raise InvalidBodyRecord(f'{name}: sample {index} is not an object')
    try:
        time_iso = raw['time_iso']
        position = np.asarray(raw['position_km'], dtype=np.float64)
    except KeyError as e:
        raise InvalidBodyRecord(f'{name}: sample {index} missing {e.args[0]!r}') from e
    except (TypeError, ValueError) as e:
        raise InvalidBodyRecord(f'{name}: sample {index} has a bad position: {e}') from e
    if not isinstance(time_iso, str):
        raise InvalidBodyRecord(f'{name}: sample {index} time_iso must be a string')
    if position.shape != (3,) or not np.all(np.isfinite(position)):
        raise InvalidBodyRecord(
            f'{name}: sample {index} position_km must be 3 finite numbers'
        )
    return Sample(
        time_iso=time_iso,
        position_km=(float(position[0]), float(position[1]), float(position[2])),
    )


def body_from_record(name: str, record: Mapping[str, Any]) -> Body:
    """Build a Body from a per-body data record.

    Parameters:
        name: Body identifier (e.g. "mars").
        record: Mapping with samples_weekly, periapsis_km and apoapsis_km.

    Returns:
        Body with samples in file order and the radius from the radius table
        (None when the body is not in the table).

    Raises:
        InvalidBodyRecord: If a required field is missing or malformed.
    """
    key = normalize_body_name(name)
    try:
        periapsis = float(record['periapsis_km'])
        apoapsis = float(record['apoapsis_km'])
        raw_samples = record['samples_weekly']
    except KeyError as e:
        raise InvalidBodyRecord(f'{key}: missing field {e.args[0]!r}') from e
    except (TypeError, ValueError) as e:
        raise InvalidBodyRecord(f'{key}: bad apsis value: {e}') from e
    if not isinstance(raw_samples, list):
        raise InvalidBodyRecord(f'{key}: samples_weekly must be a list')
    samples = tuple(_sample_from_record(key, i, raw) for i, raw in enumerate(raw_samples))
    return Body(
        name=key,
        periapsis_km=periapsis,
        apoapsis_km=apoapsis,
        radius_km=PLANET_RADII_KM.get(key),
        samples=samples,
    )
