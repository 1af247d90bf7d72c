"""Local key-value storage for users, expenses and logo briefs.

The store mirrors the small surface of browser local storage: JSON values kept
under string keys. ``JsonFileStore`` persists every key in a single JSON
document, ``MemoryStore`` keeps them in a dict for tests and throwaway sessions.
Both are shared between Streamlit session threads, so every read-modify-write
goes through ``update``.
"""

from __future__ import annotations

import copy
import json
import logging
import os
import tempfile
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Callable

from core.errors import StorageError

__all__ = [
    "CURRENT_USER_KEY",
    "EXPENSES_KEY",
    "JsonFileStore",
    "KeyValueStore",
    "LOGOS_KEY",
    "MemoryStore",
    "USERS_KEY",
]

logger = logging.getLogger(__name__)

USERS_KEY = "app_users"
EXPENSES_KEY = "app_expenses"
CURRENT_USER_KEY = "app_currentUser"
LOGOS_KEY = "app_logos"


class KeyValueStore(ABC):
    """Minimal JSON key-value store interface."""

    @abstractmethod
    def get(self, key: str, default: Any = None) -> Any:
        """Return a copy of the value stored under ``key`` or ``default``."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store a JSON-compatible ``value`` under ``key``."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete ``key``; missing keys are ignored."""

    @abstractmethod
    def update(self, key: str, fn: Callable[[Any], Any]) -> Any:
        """Atomically replace the value under ``key`` with ``fn(current)``.

        ``fn`` receives a copy of the current value (``None`` when missing).
        If it raises, nothing is written.
        """

    def get_mapping(self, key: str) -> dict[str, Any]:
        value = self.get(key)
        return value if isinstance(value, dict) else {}

    def update_mapping(self, key: str, fn: Callable[[dict[str, Any]], None]) -> dict[str, Any]:
        """Mutate the mapping under ``key`` in place inside one atomic update."""

        def apply(current: Any) -> dict[str, Any]:
            mapping = current if isinstance(current, dict) else {}
            fn(mapping)
            return mapping

        return self.update(key, apply)


class MemoryStore(KeyValueStore):
    def __init__(self, initial: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self._lock = threading.RLock()

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            if key not in self._data:
                return default
            return copy.deepcopy(self._data[key])

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        with self._lock:
            self._data.pop(key, None)

    def update(self, key: str, fn: Callable[[Any], Any]) -> Any:
        with self._lock:
            value = fn(copy.deepcopy(self._data.get(key)))
            self._data[key] = copy.deepcopy(value)
            return value


class JsonFileStore(KeyValueStore):
    """Store every key in one JSON document at ``path``.

    One lock per instance serialises access, so share a single instance per
    file across threads.
    """

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self._lock = threading.RLock()

    def _read(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise StorageError(f"Could not read local storage at {self.path}") from exc
        if not raw.strip():
            return {}
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise StorageError(f"Local storage at {self.path} is not valid JSON") from exc
        if not isinstance(data, dict):
            raise StorageError(f"Local storage at {self.path} must contain a JSON object")
        return data

    def _write(self, data: dict[str, Any]) -> None:
        tmp_name: str | None = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent
            )
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(data, handle, ensure_ascii=False, indent=2)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except (OSError, TypeError, ValueError) as exc:
            raise StorageError(f"Could not write local storage at {self.path}") from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)
        logger.debug("Wrote %d keys to %s", len(data), self.path)

    def get(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._read().get(key, default)

    def set(self, key: str, value: Any) -> None:
        with self._lock:
            data = self._read()
            data[key] = value
            self._write(data)

    def remove(self, key: str) -> None:
        with self._lock:
            data = self._read()
            if key in data:
                del data[key]
                self._write(data)

    def update(self, key: str, fn: Callable[[Any], Any]) -> Any:
        with self._lock:
            data = self._read()
            value = fn(data.get(key))
            data[key] = value
            self._write(data)
            return value
