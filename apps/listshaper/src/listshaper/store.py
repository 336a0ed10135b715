"""Record collection loading from JSON files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import RecordTypeError, StorageError
from .records import Record, to_records


def _extract_items(data: Any) -> list[Any]:
    if isinstance(data, list):
        return data
    if isinstance(data, dict):
        if "records" not in data:
            raise StorageError("Invalid records file structure: missing 'records' key")
        items = data["records"]
        if not isinstance(items, list):
            raise StorageError("Invalid records file structure: 'records' must be an array")
        return items
    raise StorageError("Invalid records file structure: expected an array or an object")


def load_records(path: Path) -> list[Record]:
    """Load a record collection from an array file or a {"records": [...]} file."""
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise StorageError(f"Failed to read records file: {path}: {e}") from e

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise StorageError(f"Invalid JSON in records file: {e}") from e

    try:
        return to_records(_extract_items(data))
    except RecordTypeError as e:
        raise StorageError(str(e)) from e
