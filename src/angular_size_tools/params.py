"""Request parameters for angular size computation (CLI and API)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TextIO

from angular_size_tools.bodies import normalize_body_name
from angular_size_tools.constants import (
    DEFAULT_OBSERVER,
    DEFAULT_TARGET,
    DEFAULT_YEARS,
    MAX_YEARS,
)


def parse_body(value: str) -> str:
    """Parse a body specifier for --observer/--target.

    Parameters:
        value: Body name (case-insensitive, e.g. "Mars").

    Returns:
        Lower-case body identifier.

    Raises:
        ValueError: If value is empty.
    """
    name = normalize_body_name(value)
    if not name:
        raise ValueError('body name must not be empty')
    return name


def parse_years(value: str) -> int:
    """Parse the window length in whole years (0..MAX_YEARS).

    Raises:
        ValueError: If value is not an integer in range.
    """
    years = int(value.strip())
    if not 0 <= years <= MAX_YEARS:
        raise ValueError(f'years must be 0-{MAX_YEARS}, got {years}')
    return years


@dataclass
class AngularSizeParams:
    """Structured inputs for one angular size computation."""

    observer: str = DEFAULT_OBSERVER
    target: str = DEFAULT_TARGET
    years: int = DEFAULT_YEARS
    data_path: str | None = None
    title: str = ''
    output_png: str | None = None
    output_txt: TextIO | None = None
