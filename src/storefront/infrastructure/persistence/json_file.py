"""File helpers shared by the JSON-backed repositories.

Any I/O failure or unreadable content surfaces as StorageError so the
application layer never sees OSError or JSONDecodeError.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from storefront.domain.exceptions import StorageError


def ensure_file(file_path: Path, empty: str = "[]") -> None:
    try:
        if not file_path.exists():
            file_path.parent.mkdir(parents=True, exist_ok=True)
            file_path.write_text(empty, encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot create {file_path}: {exc}") from exc


def read_json(file_path: Path) -> Any:
    try:
        return json.loads(file_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise StorageError(f"Cannot read {file_path}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise StorageError(f"Corrupt data in {file_path}: {exc}") from exc


def write_json(file_path: Path, data: Any) -> None:
    try:
        file_path.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        raise StorageError(f"Cannot write {file_path}: {exc}") from exc
