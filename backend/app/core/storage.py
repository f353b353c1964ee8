"""String-keyed, string-valued persistence in the shape of browser local storage."""

from __future__ import annotations

import json
import logging
import os
from typing import Protocol

logger = logging.getLogger(__name__)

EMPLOYEES_KEY = "employees"
USERS_KEY = "users"
CURRENT_USER_KEY = "currentUser"
DARK_MODE_KEY = "darkMode"


class KeyValueStorage(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...

    def remove(self, key: str) -> None: ...


class MemoryStorage:
    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStorage:
    """All keys in one JSON object on disk, rewritten on every change."""

    def __init__(self, path: str) -> None:
        self.path = path
        self._data: dict[str, str] = self._read()

    def _read(self) -> dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as fh:
                raw = json.load(fh)
        except (OSError, json.JSONDecodeError):
            logger.warning("Could not read storage file %s, starting empty", self.path)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Storage file %s does not hold an object, starting empty", self.path)
            return {}
        data: dict[str, str] = {}
        for key, value in raw.items():
            if not isinstance(value, str):
                logger.warning("Skipping non-string stored value for key=%s", key)
                continue
            data[str(key)] = value
        return data

    def _write(self, data: dict[str, str]) -> None:
        directory = os.path.dirname(os.path.abspath(self.path))
        os.makedirs(directory, exist_ok=True)
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as fh:
            json.dump(data, fh, ensure_ascii=False, indent=2)
        os.replace(tmp_path, self.path)

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        data = {**self._data, key: value}
        self._write(data)
        self._data = data

    def remove(self, key: str) -> None:
        if key not in self._data:
            return
        data = {k: v for k, v in self._data.items() if k != key}
        self._write(data)
        self._data = data


def create_storage(path: str) -> KeyValueStorage:
    if not path:
        return MemoryStorage()
    return JsonFileStorage(path)
