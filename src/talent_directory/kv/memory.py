"""Process-local key-value store."""

import copy
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

import structlog

from .base import KeyValueStore

logger = structlog.get_logger(__name__)


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store used for tests and single-process demos."""
    
    def __init__(self, initial: Optional[Dict[str, Any]] = None):
        self._data: Dict[str, Any] = copy.deepcopy(initial) if initial else {}
        self._depth = 0
    
    def get(self, key: str) -> Optional[Any]:
        return copy.deepcopy(self._data.get(key))
    
    def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)
    
    def delete(self, key: str) -> None:
        self._data.pop(key, None)
    
    def scan_by_prefix(self, prefix: str) -> List[Any]:
        return [
            copy.deepcopy(value)
            for key, value in self._data.items()
            if key.startswith(prefix)
        ]
    
    @contextmanager
    def transaction(self) -> Iterator["InMemoryKeyValueStore"]:
        snapshot = copy.deepcopy(self._data) if self._depth == 0 else None
        self._depth += 1
        try:
            yield self
        except Exception:
            if snapshot is not None:
                self._data = snapshot
                logger.debug("In-memory transaction rolled back")
            raise
        finally:
            self._depth -= 1
