"""SQLAlchemy-backed key-value store."""

import copy
from contextlib import contextmanager
from datetime import datetime
from typing import Any, Iterator, List, Optional

from sqlalchemy import Column, DateTime, Integer, String, JSON
from sqlalchemy.orm import Session
from sqlalchemy.orm.attributes import flag_modified
import structlog

from talent_directory.core.base import Base
from .base import KeyValueStore

logger = structlog.get_logger(__name__)


class KeyValueEntry(Base):
    """One stored key and its JSON value."""
    
    __tablename__ = "kv_store"
    
    # Surrogate id preserves insertion order for prefix scans
    id = Column(Integer, primary_key=True, autoincrement=True)
    key = Column(String(255), unique=True, nullable=False, index=True)
    value = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, nullable=False)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
    
    def __repr__(self) -> str:
        return f"<KeyValueEntry(key='{self.key}')>"


class SqlKeyValueStore(KeyValueStore):
    """Key-value store persisted in the ``kv_store`` table.
    
    Writes outside a transaction are committed immediately. Inside
    ``transaction()`` they are only flushed, and the session is rolled
    back if the block raises.
    """
    
    def __init__(self, db: Session):
        self.db = db
        self._depth = 0
    
    def _entry(self, key: str) -> Optional[KeyValueEntry]:
        return self.db.query(KeyValueEntry).filter(KeyValueEntry.key == key).first()
    
    def get(self, key: str) -> Optional[Any]:
        entry = self._entry(key)
        return copy.deepcopy(entry.value) if entry is not None else None
    
    def set(self, key: str, value: Any) -> None:
        entry = self._entry(key)
        if entry is None:
            self.db.add(KeyValueEntry(key=key, value=copy.deepcopy(value)))
        else:
            entry.value = copy.deepcopy(value)
            flag_modified(entry, "value")
        self._write_through()
    
    def delete(self, key: str) -> None:
        entry = self._entry(key)
        if entry is None:
            return
        self.db.delete(entry)
        self._write_through()
    
    def scan_by_prefix(self, prefix: str) -> List[Any]:
        entries = (
            self.db.query(KeyValueEntry)
            .filter(KeyValueEntry.key.startswith(prefix, autoescape=True))
            .order_by(KeyValueEntry.id)
            .all()
        )
        return [copy.deepcopy(entry.value) for entry in entries]
    
    @contextmanager
    def transaction(self) -> Iterator["SqlKeyValueStore"]:
        self._depth += 1
        try:
            yield self
        except Exception:
            self._depth -= 1
            if self._depth == 0:
                self.db.rollback()
                logger.warning("Key-value transaction rolled back")
            raise
        else:
            self._depth -= 1
            if self._depth == 0:
                self.db.commit()
    
    def _write_through(self) -> None:
        if self._depth == 0:
            self.db.commit()
        else:
            self.db.flush()
