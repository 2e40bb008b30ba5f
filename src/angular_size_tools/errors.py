"""Error kinds raised by the angular size pipeline.

All derive from ValueError so the CLI reports them the same way it reports any
other bad request.
"""

from __future__ import annotations


class AngularSizeError(ValueError):
    """Base class for angular size computation errors."""


class InvalidSelection(AngularSizeError):
    """Observer and target are the same body."""


class BodyNotFound(AngularSizeError):
    """Body identifier is unknown to the catalog or the radius table."""

    def __init__(self, name: str, reason: str | None = None) -> None:
        self.name = name
        super().__init__(reason or f'Body not found: {name!r}')


class InvalidBodyRecord(AngularSizeError):
    """Body data file is present but malformed."""


class TimestampParseError(AngularSizeError):
    """Ephemeris timestamp has an unknown month or malformed structure."""

    def __init__(self, timestamp: str, reason: str) -> None:
        self.timestamp = timestamp
        super().__init__(f'Invalid timestamp {timestamp!r}: {reason}')


class DegenerateGeometry(AngularSizeError):
    """Distance or radius is zero, negative, or not finite."""
