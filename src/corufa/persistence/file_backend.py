"""Local directory backend: one ``<key>.json`` file per key."""

from __future__ import annotations

import os
import re
from pathlib import Path

from corufa.core.exceptions import RecordDecodeError, StorageError

_SAFE_KEY = re.compile(r"^[A-Za-z0-9_.-]+$")


class JsonFileStore:
    """IKeyValueStore persisting each value as a UTF-8 file under ``directory``."""

    def __init__(self, directory: str | Path) -> None:
        self._directory = Path(directory)

    def _path(self, key: str) -> Path:
        if not _SAFE_KEY.match(key):
            raise StorageError("File path", key, "key contains unsupported characters")
        return self._directory / f"{key}.json"

    def get(self, key: str) -> str | None:
        path = self._path(key)
        try:
            return path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return None
        except UnicodeDecodeError as exc:
            raise RecordDecodeError("File read", key, str(exc)) from exc
        except OSError as exc:
            raise StorageError("File read", key, str(exc)) from exc

    def set(self, key: str, value: str) -> None:
        path = self._path(key)
        tmp = path.with_suffix(".json.tmp")
        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            tmp.write_text(value, encoding="utf-8")
            os.replace(tmp, path)
        except OSError as exc:
            raise StorageError("File write", key, str(exc)) from exc

    def delete(self, key: str) -> None:
        try:
            self._path(key).unlink(missing_ok=True)
        except OSError as exc:
            raise StorageError("File delete", key, str(exc)) from exc
