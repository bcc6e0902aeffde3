"""Subscriber/talent-pool membership reconciliation."""

from typing import Dict, Iterable, List

import structlog

from talent_directory.core.errors import ConflictDetectedError, ErrorContext, NotFoundError
from talent_directory.kv.base import KeyValueStore
from talent_directory.repositories.subscriber import SubscriberRepository
from talent_directory.repositories.talent_pool import TalentPoolRepository
from talent_directory.schemas.membership import AssignmentMode, MembershipConflict
from talent_directory.schemas.subscriber import SubscriberResponse

logger = structlog.get_logger(__name__)


def _ordered_union(current: Iterable[str], extra: Iterable[str]) -> List[str]:
    return list(dict.fromkeys([*current, *extra]))


def pool_members(subscribers: Iterable[SubscriberResponse], pool_id: str) -> List[SubscriberResponse]:
    """Subscribers whose membership set contains ``pool_id``."""
    return [sub for sub in subscribers if pool_id in sub.talent_pool_ids]


class MembershipService:
    """Maintains the many-to-many relation between subscribers and pools.
    
    Membership lives on the subscriber record as ``talent_pool_ids``.
    Callers are expected to pass pool ids owned by the subscriber's
    tenant; the reconciler itself does not check ownership.
    """
    
    def __init__(self):
        self.subscribers = SubscriberRepository()
        self.talent_pools = TalentPoolRepository()
    
    def _require_subscriber(self, store: KeyValueStore, subscriber_id: str, operation: str) -> SubscriberResponse:
        subscriber = self.subscribers.get_by_id(store, subscriber_id)
        if subscriber is None:
            raise NotFoundError("Subscriber", subscriber_id, context=ErrorContext(operation=operation))
        return subscriber
    
    def assign(
        self,
        store: KeyValueStore,
        subscriber_id: str,
        pool_ids: Iterable[str]
    ) -> SubscriberResponse:
        """Replace a subscriber's membership set wholesale.
        
        Raises:
            NotFoundError: If the subscriber does not exist
        """
        subscriber = self._require_subscriber(store, subscriber_id, "assign")
        subscriber.talent_pool_ids = list(dict.fromkeys(pool_ids))
        self.subscribers.save(store, subscriber)
        
        logger.info(
            "Subscriber memberships assigned",
            subscriber_id=subscriber_id,
            talent_pool_ids=subscriber.talent_pool_ids
        )
        return subscriber
    
    def remove(self, store: KeyValueStore, subscriber_id: str, pool_id: str) -> SubscriberResponse:
        """Drop a single pool from a subscriber's membership set."""
        subscriber = self._require_subscriber(store, subscriber_id, "remove_membership")
        subscriber.talent_pool_ids = [pid for pid in subscriber.talent_pool_ids if pid != pool_id]
        self.subscribers.save(store, subscriber)
        
        logger.info("Subscriber removed from talent pool", subscriber_id=subscriber_id, pool_id=pool_id)
        return subscriber
    
    def cascade_delete_pool(self, store: KeyValueStore, pool_id: str, tenant_id: str) -> int:
        """Remove ``pool_id`` from every membership set that references it.
        
        Run this inside the same store transaction as the pool deletion.
        
        Returns:
            Number of subscribers updated
        """
        updated = 0
        for subscriber in self.subscribers.get_in_pool(store, pool_id):
            subscriber.talent_pool_ids = [pid for pid in subscriber.talent_pool_ids if pid != pool_id]
            self.subscribers.save(store, subscriber)
            updated += 1
        
        logger.info(
            "Talent pool memberships cleared",
            pool_id=pool_id,
            tenant_id=tenant_id,
            subscribers_updated=updated
        )
        return updated
    
    def detect_conflicts(
        self,
        store: KeyValueStore,
        subscribers: Iterable[SubscriberResponse],
        pool_ids: Iterable[str]
    ) -> List[MembershipConflict]:
        """Find subscribers that would lose memberships if replaced by ``pool_ids``."""
        requested = set(pool_ids)
        titles: Dict[str, str] = {pool.id: pool.title for pool in self.talent_pools.get_multi(store)}
        
        conflicts = []
        for subscriber in subscribers:
            lost = [pid for pid in subscriber.talent_pool_ids if pid not in requested]
            if lost:
                conflicts.append(MembershipConflict(
                    subscriber_id=subscriber.id,
                    email=subscriber.email,
                    existing_pools=[titles.get(pid, pid) for pid in lost],
                ))
        return conflicts
    
    def bulk_assign(
        self,
        store: KeyValueStore,
        subscriber_ids: Iterable[str],
        pool_ids: Iterable[str],
        mode: AssignmentMode = AssignmentMode.ADD,
        confirm: bool = False
    ) -> List[SubscriberResponse]:
        """Apply a membership change to several subscribers at once.
        
        ``add`` unions ``pool_ids`` into each membership set. ``replace``
        overwrites each set, but when that would drop an existing
        membership nothing is written unless ``confirm`` is set.
        
        Raises:
            NotFoundError: If any subscriber does not exist
            ConflictDetectedError: If an unconfirmed replace would drop memberships
        """
        mode = AssignmentMode(mode)
        pool_ids = list(dict.fromkeys(pool_ids))
        subscribers = [
            self._require_subscriber(store, subscriber_id, "bulk_assign")
            for subscriber_id in dict.fromkeys(subscriber_ids)
        ]
        
        if mode is AssignmentMode.REPLACE and not confirm:
            conflicts = self.detect_conflicts(store, subscribers, pool_ids)
            if conflicts:
                logger.info(
                    "Bulk assignment conflicts detected",
                    conflicts=len(conflicts),
                    talent_pool_ids=pool_ids
                )
                raise ConflictDetectedError(
                    conflicts,
                    context=ErrorContext(operation="bulk_assign")
                )
        
        with store.transaction():
            for subscriber in subscribers:
                if mode is AssignmentMode.ADD:
                    subscriber.talent_pool_ids = _ordered_union(subscriber.talent_pool_ids, pool_ids)
                else:
                    subscriber.talent_pool_ids = list(pool_ids)
                self.subscribers.save(store, subscriber)
        
        logger.info(
            "Bulk assignment applied",
            mode=mode.value,
            subscribers=len(subscribers),
            talent_pool_ids=pool_ids
        )
        return subscribers
