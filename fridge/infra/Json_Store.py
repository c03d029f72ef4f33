"""Key-value stores backing overrides, the recipe cache, the pantry and the shopping list.

Both implementations replace a key's value in one step: readers observe either
the previous value or the new one, never a partially written state.
"""
from __future__ import annotations

import copy
import json
import logging
import os
import shutil
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any, Dict, List, Optional, Protocol, Tuple

from fridge.utilities.exceptions import PersistenceWriteError

logger = logging.getLogger(__name__)

__all__ = ["KeyValueStore", "InMemoryStore", "JsonFileStore"]


class KeyValueStore(Protocol):
    def get(self, key: str) -> Optional[Any]: ...

    def put(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> bool: ...

    def items(self) -> List[Tuple[str, Any]]: ...

    def clear(self) -> None: ...


class InMemoryStore:
    """Dict-backed store. Values are copied in and out so callers never share state."""

    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._lock = Lock()
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            if key not in self._data:
                return None
            return copy.deepcopy(self._data[key])

    def put(self, key: str, value: Any) -> None:
        value = copy.deepcopy(value)
        with self._lock:
            self._data[key] = value

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._data.pop(key, None) is not None

    def items(self) -> List[Tuple[str, Any]]:
        with self._lock:
            return copy.deepcopy(list(self._data.items()))

    def clear(self) -> None:
        with self._lock:
            self._data = {}


class JsonFileStore:
    """Store persisted as a single JSON object on disk.

    Every mutation writes a complete new document to a temp file and moves it
    over the target before the in-memory snapshot is swapped. If the write
    fails the snapshot and the file on disk keep their previous content.
    """

    def __init__(self, path: Path | str):
        self.path = Path(path)
        self._lock = Lock()
        self._data: Dict[str, Any] = self._load()

    def _load(self) -> Dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            with open(self.path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            logger.error(f"Invalid JSON in store file {self.path}: {e}")
            return {}
        if not isinstance(data, dict):
            logger.error(f"Store file {self.path} does not contain a JSON object; ignoring it")
            return {}
        return data

    def _atomic_write(self, data: Dict[str, Any]) -> None:
        tmp_path = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f".{self.path.stem}_", suffix=".json"
            )
            with os.fdopen(fd, "w", encoding="utf-8") as tmp:
                json.dump(data, tmp, indent=2, ensure_ascii=False)
            shutil.move(tmp_path, self.path)
        except (OSError, TypeError, ValueError) as e:
            logger.error(f"Failed to write store file {self.path}: {e}")
            raise PersistenceWriteError(f"Could not write {self.path.name}: {e}") from e
        finally:
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)

    def _commit(self, data: Dict[str, Any]) -> None:
        # caller holds the lock
        self._atomic_write(data)
        self._data = data

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            if key not in self._data:
                return None
            return copy.deepcopy(self._data[key])

    def put(self, key: str, value: Any) -> None:
        with self._lock:
            data = copy.deepcopy(self._data)
            data[key] = copy.deepcopy(value)
            self._commit(data)

    def delete(self, key: str) -> bool:
        with self._lock:
            if key not in self._data:
                return False
            data = copy.deepcopy(self._data)
            del data[key]
            self._commit(data)
            return True

    def items(self) -> List[Tuple[str, Any]]:
        with self._lock:
            return copy.deepcopy(list(self._data.items()))

    def clear(self) -> None:
        with self._lock:
            self._commit({})
