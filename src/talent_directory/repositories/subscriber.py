"""Subscriber repository."""

from typing import Iterable, List

from talent_directory.kv.base import KeyValueStore
from talent_directory.schemas.subscriber import SubscriberResponse
from .base import KeyValueRepository


class SubscriberRepository(KeyValueRepository[SubscriberResponse]):
    """Repository for candidate subscriptions stored under ``subscribers``."""
    
    def __init__(self):
        super().__init__(SubscriberResponse, "subscribers")
    
    def get_for_tenants(
        self,
        store: KeyValueStore,
        tenant_ids: Iterable[str]
    ) -> List[SubscriberResponse]:
        """Get subscribers owned by any of the given tenants, in signup order."""
        wanted = set(tenant_ids)
        return [sub for sub in self.get_multi(store) if sub.tenant_id in wanted]
    
    def get_in_pool(self, store: KeyValueStore, pool_id: str) -> List[SubscriberResponse]:
        """Get every subscriber whose membership set references ``pool_id``."""
        return [sub for sub in self.get_multi(store) if pool_id in sub.talent_pool_ids]
