"""Talent pool repository."""

from typing import Iterable, List

from talent_directory.kv.base import KeyValueStore
from talent_directory.schemas.talent_pool import TalentPoolResponse
from .base import KeyValueRepository


class TalentPoolRepository(KeyValueRepository[TalentPoolResponse]):
    """Repository for talent pools stored under ``talent_pools``."""
    
    def __init__(self):
        super().__init__(TalentPoolResponse, "talent_pools")
    
    def get_for_tenants(
        self,
        store: KeyValueStore,
        tenant_ids: Iterable[str]
    ) -> List[TalentPoolResponse]:
        wanted = set(tenant_ids)
        return [pool for pool in self.get_multi(store) if pool.tenant_id in wanted]
