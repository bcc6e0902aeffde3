"""Key-value persistence backends."""

from .base import KeyValueStore
from .memory import InMemoryKeyValueStore
from .sql import SqlKeyValueStore, KeyValueEntry

__all__ = [
    "KeyValueStore",
    "InMemoryKeyValueStore",
    "SqlKeyValueStore",
    "KeyValueEntry",
]
