"""Tenant repository."""

from typing import Optional

from talent_directory.kv.base import KeyValueStore
from talent_directory.schemas.tenant import TenantInDB
from .base import KeyValueRepository


class TenantRepository(KeyValueRepository[TenantInDB]):
    """Repository for tenant accounts stored under ``users``."""
    
    def __init__(self):
        super().__init__(TenantInDB, "users")
    
    def get_by_email(self, store: KeyValueStore, email: str) -> Optional[TenantInDB]:
        """Get tenant by login email (case-insensitive)."""
        email = email.lower()
        for tenant in self.get_multi(store):
            if tenant.email.lower() == email:
                return tenant
        return None
