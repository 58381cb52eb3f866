"""
Key/value stores for game state.

Bag, board and rack persist themselves under the keys "bag", "grid" and
"rack". Values must be JSON-serializable.
"""

import json
import logging
from abc import ABC, abstractmethod
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Union


log = logging.getLogger(__name__)


class Store(ABC):
    """Persistent state store with get/set/has/remove."""

    @abstractmethod
    def has(self, key: str) -> bool:
        ...

    @abstractmethod
    def get(self, key: str) -> Any:
        """Return the value stored under `key`, or None if absent."""

    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        ...

    @abstractmethod
    def remove(self, key: str) -> None:
        ...


class MemoryStore(Store):
    """Process-local store. Values are copied in and out, like a serialized store."""

    def __init__(self) -> None:
        self._data: Dict[str, Any] = {}

    def has(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str) -> Any:
        return deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = deepcopy(value)

    def remove(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileStore(Store):
    """
    Store backed by a single JSON document on disk.

    The file is read once on creation and rewritten on every change. A
    missing file is an empty store.
    """

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        self._data: Dict[str, Any] = {}
        if self.path.exists():
            with open(self.path, encoding="utf-8") as f:
                self._data = json.load(f)
            if not isinstance(self._data, dict):
                raise ValueError(f"State file {self.path} does not hold a JSON object")

    def has(self, key: str) -> bool:
        return key in self._data

    def get(self, key: str) -> Any:
        return deepcopy(self._data.get(key))

    def set(self, key: str, value: Any) -> None:
        self._data[key] = deepcopy(value)
        self._save()

    def remove(self, key: str) -> None:
        if key in self._data:
            del self._data[key]
            self._save()

    def _save(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            json.dump(self._data, f)
        log.debug("Saved state to %s (%s)", self.path, ", ".join(sorted(self._data)))
