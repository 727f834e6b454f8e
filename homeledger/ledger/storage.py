"""Mini README: Durable key-value storage backends for the ledger.

Structure:
    * KeyValueStorage - abstract string-to-string store (local storage style).
    * MemoryStorage - dictionary-backed store used in tests and previews.
    * JsonFileStorage - persists every key inside a single JSON object file.

The ledger store only ever touches one key. Backends hold plain strings so the
serialized ledger is written exactly as it would be in a browser's local
storage, and a file written by one backend can be read by another.
"""

from __future__ import annotations

import json
import os
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class KeyValueStorage(ABC):
    """Base interface for durable key-value storage."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value, or ``None`` when the key is absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Delete ``key`` if present."""


class MemoryStorage(KeyValueStorage):
    """In-process storage that forgets everything when discarded."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self._items: Dict[str, str] = dict(initial or {})

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage(KeyValueStorage):
    """Keep all keys in one JSON object file, rewritten on every change."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)
        LOGGER.debug("Using key-value storage file %s", self.path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except (UnicodeDecodeError, json.JSONDecodeError):
            LOGGER.warning("Storage file %s is not valid UTF-8 JSON; treating it as empty", self.path)
            return {}
        if not isinstance(payload, dict):
            LOGGER.warning("Storage file %s does not hold a JSON object; treating it as empty", self.path)
            return {}
        return {str(key): value for key, value in payload.items() if isinstance(value, str)}

    def _write_all(self, items: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        temp_path = self.path.with_name(self.path.name + ".tmp")
        temp_path.write_text(json.dumps(items, ensure_ascii=False, indent=2), encoding="utf-8")
        os.replace(temp_path, self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def set_item(self, key: str, value: str) -> None:
        items = self._read_all()
        items[key] = value
        self._write_all(items)

    def remove_item(self, key: str) -> None:
        items = self._read_all()
        if items.pop(key, None) is not None:
            self._write_all(items)
