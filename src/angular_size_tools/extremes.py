"""Theoretical angular size bounds from orbital apsides.

This is a two-body heuristic: it pairs the apsides of the two orbits without
regard to orbital phase, so the bounds are not true worst-case geometry.
Periapsis order decides which apsides are paired.
"""

from __future__ import annotations

from dataclasses import dataclass

from angular_size_tools.bodies import Body
from angular_size_tools.constants import ANGLE_UNIT
from angular_size_tools.geometry import angular_size


@dataclass(frozen=True)
class ExtremeBounds:
    """Minimum and maximum angular size (arcsec) with the distances behind them."""

    min_arcsec: float
    max_arcsec: float
    closest_km: float
    farthest_km: float
    observing_outward: bool

    @property
    def min_label(self) -> str:
        """Minimum angular size rounded to 2 decimals with unit."""
        return format_arcsec(self.min_arcsec)

    @property
    def max_label(self) -> str:
        """Maximum angular size rounded to 2 decimals with unit."""
        return format_arcsec(self.max_arcsec)


def format_arcsec(value: float) -> str:
    """Format an angle as "12.34 arcsec"."""
    return f'{value:.2f} {ANGLE_UNIT}'


def approach_distances(
    observer_periapsis_km: float,
    observer_apoapsis_km: float,
    target_periapsis_km: float,
    target_apoapsis_km: float,
) -> tuple[float, float, bool]:
    """Closest and farthest observer-target distances from apsides alone.

    Parameters:
        observer_periapsis_km, observer_apoapsis_km: Observer orbit apsides (km).
        target_periapsis_km, target_apoapsis_km: Target orbit apsides (km).

    Returns:
        (closest_km, farthest_km, observing_outward), where observing_outward
        is True when the target's periapsis lies beyond the observer's.
    """
    observing_outward = target_periapsis_km > observer_periapsis_km
    if observing_outward:
        closest = abs(target_periapsis_km - observer_apoapsis_km)
        farthest = abs(target_apoapsis_km + observer_apoapsis_km)
    else:
        closest = abs(observer_periapsis_km - target_apoapsis_km)
        farthest = abs(observer_apoapsis_km + target_apoapsis_km)
    return (closest, farthest, observing_outward)


def extremes_from_apsides(
    observer_periapsis_km: float,
    observer_apoapsis_km: float,
    target_periapsis_km: float,
    target_apoapsis_km: float,
    radius_km: float,
) -> ExtremeBounds:
    """Angular size bounds for a target of radius_km.

    Raises:
        DegenerateGeometry: If the closest distance is zero (orbits touch) or
            the radius is not positive.
    """
    closest, farthest, outward = approach_distances(
        observer_periapsis_km,
        observer_apoapsis_km,
        target_periapsis_km,
        target_apoapsis_km,
    )
    return ExtremeBounds(
        min_arcsec=angular_size(radius_km, farthest),
        max_arcsec=angular_size(radius_km, closest),
        closest_km=closest,
        farthest_km=farthest,
        observing_outward=outward,
    )


def estimate_extremes(observer: Body, target: Body) -> ExtremeBounds:
    """Angular size bounds of target as seen from observer (sampled positions unused)."""
    return extremes_from_apsides(
        observer.periapsis_km,
        observer.apoapsis_km,
        target.periapsis_km,
        target.apoapsis_km,
        target.require_radius(),
    )
