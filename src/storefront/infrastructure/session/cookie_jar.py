"""A file-backed cookie jar for the command-line client.

The CLI stands in for the browser: it keeps the ``token`` and ``cart``
cookies between invocations, honours their max age, and applies the
cookie instructions returned by the application handlers.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Callable

from storefront.application.cookies import CookieInstruction
from storefront.infrastructure.persistence.json_file import ensure_file, read_json, write_json


class CookieJar:

    def __init__(self, file_path: Path, clock: Callable[[], float] = time.time) -> None:
        self._file_path = file_path
        self._clock = clock
        ensure_file(self._file_path, empty="{}")

    def cookies(self) -> dict[str, str]:
        """Return the live (unexpired) cookies as name -> value."""
        now = self._clock()
        return {
            name: entry["value"]
            for name, entry in self._load().items()
            if entry.get("expires_at") is None or entry["expires_at"] > now
        }

    def apply(self, instruction: CookieInstruction | None) -> None:
        if instruction is None:
            return

        jar = self._load()
        if instruction.is_delete:
            jar.pop(instruction.name, None)
        else:
            expires_at = None
            if instruction.max_age is not None:
                expires_at = self._clock() + instruction.max_age
            jar[instruction.name] = {
                "value": instruction.value,
                "expires_at": expires_at,
                "http_only": instruction.http_only,
            }
        write_json(self._file_path, jar)

    def _load(self) -> dict[str, dict]:
        jar = read_json(self._file_path)
        return jar if isinstance(jar, dict) else {}
