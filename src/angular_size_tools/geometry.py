"""Line-of-sight geometry: vector difference, range, and angular diameter."""

from __future__ import annotations

import math
from collections.abc import Sequence

import cspyce
import numpy as np

from angular_size_tools.constants import RAD_TO_ARCSEC
from angular_size_tools.errors import DegenerateGeometry


def subtract(a: Sequence[float], b: Sequence[float]) -> np.ndarray:
    """Vector difference a - b (km)."""
    return np.asarray(cspyce.vsub(a, b), dtype=np.float64)


def magnitude(v: Sequence[float]) -> float:
    """Euclidean length of a 3-vector (km)."""
    return float(cspyce.vnorm(v))


def line_of_sight_distance(
    observer_km: Sequence[float],
    target_km: Sequence[float],
) -> float:
    """Distance from observer to target (km), both in the same inertial frame."""
    return magnitude(subtract(target_km, observer_km))


def angular_size(radius_km: float, distance_km: float) -> float:
    """Angular diameter (arcsec) of a sphere of given radius at given distance.

    Uses the full arctangent, 2 * atan(r / d), rather than the small-angle form.

    Parameters:
        radius_km: Mean body radius (km), > 0.
        distance_km: Center-to-observer distance (km), > 0.

    Returns:
        Angular diameter in arcseconds.

    Raises:
        DegenerateGeometry: If either input is non-positive or not finite.
    """
    if not (math.isfinite(radius_km) and radius_km > 0.0):
        raise DegenerateGeometry(f'Radius must be positive and finite, got {radius_km!r} km')
    if not (math.isfinite(distance_km) and distance_km > 0.0):
        raise DegenerateGeometry(
            f'Distance must be positive and finite, got {distance_km!r} km'
        )
    return 2.0 * math.atan(radius_km / distance_km) * RAD_TO_ARCSEC
