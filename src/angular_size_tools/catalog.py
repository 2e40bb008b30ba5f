"""Body data loading: manifest of body names and per-body sample files."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any

from angular_size_tools.bodies import Body, body_from_record, normalize_body_name
from angular_size_tools.config import get_data_path
from angular_size_tools.constants import BODY_FILE_SUFFIX, MANIFEST_FILENAME
from angular_size_tools.errors import BodyNotFound, InvalidBodyRecord

logger = logging.getLogger(__name__)

# Body identifiers double as file names.
_BODY_NAME_RE = re.compile(r'[a-z0-9_\-]+')


def _data_dir(data_path: str | Path | None) -> Path:
    """Resolve the data directory (argument, else ANGULAR_SIZE_DATA/default)."""
    base = Path(data_path) if data_path is not None else Path(get_data_path())
    if not base.is_dir():
        raise RuntimeError(f'Body data directory does not exist: {base}')
    return base


def _read_json(path: Path) -> Any:
    """Read one JSON document; decoding problems become InvalidBodyRecord."""
    logger.debug('Reading %s', path)
    try:
        with path.open(encoding='utf-8') as f:
            return json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidBodyRecord(f'{path.name}: not valid JSON ({e})') from e


def load_manifest(data_path: str | Path | None = None) -> dict[str, Any]:
    """Load manifest.json from the data directory.

    Returns:
        Manifest mapping; its "bodies" entry lists {"body": name} objects.

    Raises:
        RuntimeError: If the directory or the manifest file is missing.
        InvalidBodyRecord: If the manifest is not a JSON object with a bodies list.
    """
    base = _data_dir(data_path)
    path = base / MANIFEST_FILENAME
    if not path.exists():
        raise RuntimeError(f'{MANIFEST_FILENAME} not found under {base}')
    manifest = _read_json(path)
    if not isinstance(manifest, dict) or not isinstance(manifest.get('bodies'), list):
        raise InvalidBodyRecord(f'{MANIFEST_FILENAME}: expected an object with a "bodies" list')
    return manifest


def list_body_names(data_path: str | Path | None = None) -> list[str]:
    """Body identifiers in manifest order.

    Parameters:
        data_path: Data directory; None uses the configured default.

    Returns:
        List of lower-case body names.
    """
    names: list[str] = []
    for i, entry in enumerate(load_manifest(data_path)['bodies']):
        if isinstance(entry, dict) and isinstance(entry.get('body'), str):
            names.append(normalize_body_name(entry['body']))
        else:
            logger.warning('%s entry %d has no body name; skipped', MANIFEST_FILENAME, i)
    return names


def load_body(name: str, data_path: str | Path | None = None) -> Body:
    """Load one body's apsides and weekly samples.

    Parameters:
        name: Body identifier (case-insensitive).
        data_path: Data directory; None uses the configured default.

    Returns:
        Immutable Body snapshot.

    Raises:
        BodyNotFound: If the name is not a valid identifier or has no data file.
        InvalidBodyRecord: If the data file is malformed.
    """
    key = normalize_body_name(name)
    if not _BODY_NAME_RE.fullmatch(key):
        raise BodyNotFound(name)
    path = _data_dir(data_path) / f'{key}{BODY_FILE_SUFFIX}'
    if not path.is_file():
        raise BodyNotFound(name)
    record = _read_json(path)
    if not isinstance(record, dict):
        raise InvalidBodyRecord(f'{path.name}: expected a JSON object')
    body = body_from_record(key, record)
    logger.debug('Loaded %s: %d weekly samples', key, len(body.samples))
    return body
