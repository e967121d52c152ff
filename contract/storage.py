from __future__ import annotations

import copy
import json
import logging
import os
from abc import ABC, abstractmethod
from contextlib import contextmanager
from pathlib import Path
from typing import Any, ContextManager, Dict, Iterator, Tuple, Union

logger = logging.getLogger(__name__)

Key = Union[str, Tuple[Any, ...]]

def key_str(key: Key) -> str:
    """("privacy_level", addr) -> "privacy_level/G..." """
    if isinstance(key, str):
        return key
    return "/".join(str(part) for part in key)

class Storage(ABC):
    """
    Persistent key/value store seen by the contract.
    Last write wins per key. Values are JSON-compatible (int, str, list, dict).

    Writes made inside `transaction()` become visible to other callers only
    if the block finishes without raising. A write outside any transaction
    commits on its own.
    """

    @abstractmethod
    def get(self, key: Key, default: Any = None) -> Any: ...

    @abstractmethod
    def set(self, key: Key, value: Any) -> None: ...

    @abstractmethod
    def has(self, key: Key) -> bool: ...

    @abstractmethod
    def transaction(self) -> ContextManager[Storage]: ...

class MemoryStorage(Storage):
    def __init__(self, data: Dict[str, Any] | None = None):
        self._data: Dict[str, Any] = dict(data or {})
        self._depth = 0
        # pre-transaction state, taken on the first write of a transaction
        self._saved: Dict[str, Any] | None = None

    def get(self, key: Key, default: Any = None) -> Any:
        k = key_str(key)
        if k not in self._data:
            return default
        # callers mutating the result must not touch stored state
        return copy.deepcopy(self._data[k])

    def set(self, key: Key, value: Any) -> None:
        if not self._depth:
            # a bare write is its own single-write transaction
            with self.transaction():
                self.set(key, value)
            return
        if self._saved is None:
            self._saved = copy.deepcopy(self._data)
        self._data[key_str(key)] = copy.deepcopy(value)

    def has(self, key: Key) -> bool:
        return key_str(key) in self._data

    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self._data)

    @contextmanager
    def transaction(self) -> Iterator[Storage]:
        # nested blocks join the outermost transaction
        if self._depth:
            self._depth += 1
            try:
                yield self
            finally:
                self._depth -= 1
            return

        self._depth = 1
        try:
            yield self
            if self._saved is not None:
                self._commit()
        except BaseException:
            # covers a failed flush too: memory must not run ahead of disk
            if self._saved is not None:
                self._data = self._saved
                logger.debug("transaction rolled back")
            raise
        finally:
            self._depth = 0
            self._saved = None

    def _commit(self) -> None:
        pass

class JsonFileStorage(MemoryStorage):
    """
    MemoryStorage flushed to one JSON file after every committed transaction.
    The file is replaced atomically, so a crash mid-write leaves the previous
    state intact.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        data = {}
        if self.path.exists():
            data = json.loads(self.path.read_text(encoding="utf-8"))
        super().__init__(data)

    def _commit(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp = self.path.with_suffix(self.path.suffix + ".tmp")
        tmp.write_text(json.dumps(self._data, indent=2, sort_keys=True), encoding="utf-8")
        os.replace(tmp, self.path)
