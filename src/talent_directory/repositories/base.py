"""Base repository class with common CRUD operations over a key-value store."""

from typing import Generic, TypeVar, Type, List, Optional, Dict, Any

from pydantic import BaseModel
import structlog

from talent_directory.kv.base import KeyValueStore

logger = structlog.get_logger(__name__)

SchemaType = TypeVar("SchemaType", bound=BaseModel)


class KeyValueRepository(Generic[SchemaType]):
    """Stores one record per key under ``<prefix>:<id>``."""
    
    def __init__(self, schema: Type[SchemaType], prefix: str):
        """Initialize repository.
        
        Args:
            schema: Pydantic model describing a stored record
            prefix: Key namespace for the collection
        """
        self.schema = schema
        self.prefix = prefix
    
    def key_for(self, id: str) -> str:
        return f"{self.prefix}:{id}"
    
    def _load(self, value: Dict[str, Any]) -> SchemaType:
        return self.schema.model_validate(value)
    
    def _dump(self, record: SchemaType) -> Dict[str, Any]:
        return record.model_dump(mode="json")
    
    def create(self, store: KeyValueStore, record: SchemaType) -> SchemaType:
        """Persist a new record.
        
        Args:
            store: Key-value store
            record: Fully populated record with an ``id``
            
        Returns:
            The stored record
        """
        store.set(self.key_for(record.id), self._dump(record))
        
        logger.info(
            "Record created",
            collection=self.prefix,
            id=record.id
        )
        return record
    
    def get_by_id(self, store: KeyValueStore, id: str) -> Optional[SchemaType]:
        """Get record by ID.
        
        Returns:
            Record if found, None otherwise
        """
        value = store.get(self.key_for(id))
        return self._load(value) if value is not None else None
    
    def get_multi(
        self,
        store: KeyValueStore,
        filters: Optional[Dict[str, Any]] = None
    ) -> List[SchemaType]:
        """Get all records in insertion order, optionally filtered by field equality.
        
        Args:
            store: Key-value store
            filters: Field name to required value
            
        Returns:
            List of records
        """
        records = [self._load(value) for value in store.scan_by_prefix(f"{self.prefix}:")]
        if filters:
            records = [
                record for record in records
                if all(getattr(record, field, None) == value for field, value in filters.items())
            ]
        return records
    
    def update(self, store: KeyValueStore, id: str, **kwargs) -> Optional[SchemaType]:
        """Merge fields into an existing record.
        
        Fields passed as None keep their stored value.
        
        Returns:
            Updated record if found, None otherwise
        """
        instance = self.get_by_id(store, id)
        if instance is None:
            logger.warning(
                "Record not found for update",
                collection=self.prefix,
                id=id
            )
            return None
        
        data = self._dump(instance)
        changes = {field: value for field, value in kwargs.items() if value is not None}
        data.update(changes)
        updated = self._load(data)
        store.set(self.key_for(id), self._dump(updated))
        
        logger.info(
            "Record updated",
            collection=self.prefix,
            id=id,
            fields=sorted(changes)
        )
        return updated
    
    def save(self, store: KeyValueStore, record: SchemaType) -> SchemaType:
        """Overwrite a stored record wholesale."""
        store.set(self.key_for(record.id), self._dump(record))
        return record
    
    def delete(self, store: KeyValueStore, id: str) -> bool:
        """Delete record by ID.
        
        Returns:
            True if deleted, False if not found
        """
        if store.get(self.key_for(id)) is None:
            logger.warning(
                "Record not found for deletion",
                collection=self.prefix,
                id=id
            )
            return False
        
        store.delete(self.key_for(id))
        logger.info("Record deleted", collection=self.prefix, id=id)
        return True
