"""Idempotent demo data bootstrap."""

import structlog

from talent_directory.kv.base import KeyValueStore
from talent_directory.repositories.subscriber import SubscriberRepository
from talent_directory.repositories.talent_pool import TalentPoolRepository
from .demo_data import demo_subscribers, demo_talent_pools, DEMO_TENANT_ID

logger = structlog.get_logger(__name__)

DEMO_INITIALIZED_KEY = "demo_initialized"


class SeedService:
    """Populates the demo tenant's subscribers and talent pools once."""
    
    def __init__(self):
        self.subscribers = SubscriberRepository()
        self.talent_pools = TalentPoolRepository()
    
    def is_seeded(self, store: KeyValueStore) -> bool:
        return bool(store.get(DEMO_INITIALIZED_KEY))
    
    def seed_demo_data(self, store: KeyValueStore) -> bool:
        """Write the demo records unless the guard flag is already set.
        
        Returns:
            True if data was written, False if the store was already seeded
        """
        if self.is_seeded(store):
            logger.debug("Demo data already initialized")
            return False
        
        with store.transaction():
            for pool in demo_talent_pools():
                self.talent_pools.save(store, pool)
            for subscriber in demo_subscribers():
                self.subscribers.save(store, subscriber)
            store.set(DEMO_INITIALIZED_KEY, True)
        
        logger.info("Demo data initialized", tenant_id=DEMO_TENANT_ID)
        return True
