"""Key-value store contract consumed by the directory repositories."""

from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import Any, Iterator, List, Optional


class KeyValueStore(ABC):
    """Durable mapping from string key to a JSON-serializable value.
    
    Implementations must return ``scan_by_prefix`` results in the order
    the keys were first written. Values handed out are copies; mutating
    them does not change stored state until ``set`` is called.
    """
    
    @abstractmethod
    def get(self, key: str) -> Optional[Any]:
        """Return the value stored under ``key`` or None."""
    
    @abstractmethod
    def set(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
    
    @abstractmethod
    def delete(self, key: str) -> None:
        """Remove ``key``. Deleting a missing key is a no-op."""
    
    @abstractmethod
    def scan_by_prefix(self, prefix: str) -> List[Any]:
        """Return all values whose key starts with ``prefix``."""
    
    @abstractmethod
    @contextmanager
    def transaction(self) -> Iterator["KeyValueStore"]:
        """Group writes so that they all apply or none do.
        
        Nested transactions join the outermost one.
        """
