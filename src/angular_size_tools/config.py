"""Configuration: body data directory and leap seconds path from environment."""

import os
from pathlib import Path

# Env var overrides with sensible defaults.
DEFAULT_DATA_PATH = 'data/'


def get_data_path() -> str:
    """Return directory holding manifest.json and per-body files.

    Returns:
        Path string (ANGULAR_SIZE_DATA env var or default).
    """
    return os.environ.get('ANGULAR_SIZE_DATA', DEFAULT_DATA_PATH)


def get_leapsecs_path() -> str | None:
    """Return path to a NAIF LSK leap seconds file for rms-julian, if any.

    Prefers JULIAN_LEAPSECS, then a .tls kernel stored beside the body data.
    None means rms-julian's bundled LSK is used.

    Returns:
        Path string to an LSK, or None.
    """
    path = os.environ.get('JULIAN_LEAPSECS', '').strip()
    if path:
        return path
    base = Path(get_data_path())
    for name in ('naif0012.tls', 'leapseconds.tls'):
        p = base / name
        if p.exists():
            return str(p)
    return None
