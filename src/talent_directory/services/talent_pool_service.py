"""Talent pool management service."""

from datetime import date
from typing import List, Optional
from uuid import uuid4

import structlog

from talent_directory.core.errors import ErrorContext, NotFoundError, ValidationError
from talent_directory.kv.base import KeyValueStore
from talent_directory.repositories.talent_pool import TalentPoolRepository
from talent_directory.schemas.talent_pool import (
    TalentPoolCreate,
    TalentPoolResponse,
    TalentPoolUpdate,
)
from .membership_service import MembershipService
from .subscriber_service import visible_tenant_ids

logger = structlog.get_logger(__name__)


def _validate_pool_fields(
    title: Optional[str],
    departments: Optional[List[str]],
    operation: str
) -> None:
    if title is not None and not title.strip():
        raise ValidationError(
            "Talent pool title is required",
            field="title",
            value=title,
            context=ErrorContext(operation=operation)
        )
    if departments is not None and not [d for d in departments if d.strip()]:
        raise ValidationError(
            "Talent pool needs at least one department",
            field="departments",
            value=departments,
            context=ErrorContext(operation=operation)
        )


class TalentPoolService:
    """Service for managing talent pools."""
    
    def __init__(self):
        self.repository = TalentPoolRepository()
        self.membership = MembershipService()
    
    def list_talent_pools(self, store: KeyValueStore, tenant_id: str) -> List[TalentPoolResponse]:
        """List the tenant's pools plus the demo tenant's."""
        return self.repository.get_for_tenants(store, visible_tenant_ids(tenant_id))
    
    def get_talent_pool(self, store: KeyValueStore, pool_id: str) -> TalentPoolResponse:
        pool = self.repository.get_by_id(store, pool_id)
        if pool is None:
            raise NotFoundError("Talent pool", pool_id, context=ErrorContext(operation="get_talent_pool"))
        return pool
    
    def create_talent_pool(self, store: KeyValueStore, data: TalentPoolCreate) -> TalentPoolResponse:
        """Create a pool with today's creation date.
        
        Raises:
            ValidationError: If the title is blank or no department is given
        """
        _validate_pool_fields(data.title, data.departments, "create_talent_pool")
        
        pool = TalentPoolResponse(
            id=f"pool-{uuid4()}",
            title=data.title.strip(),
            departments=list(data.departments),
            tenant_id=data.tenant_id,
            created_date=date.today(),
            description=data.description,
        )
        self.repository.create(store, pool)
        
        logger.info("Talent pool created", pool_id=pool.id, tenant_id=pool.tenant_id, title=pool.title)
        return pool
    
    def update_talent_pool(
        self,
        store: KeyValueStore,
        pool_id: str,
        updates: TalentPoolUpdate
    ) -> TalentPoolResponse:
        """Merge title, departments or description into a pool.
        
        Raises:
            ValidationError: If a provided title is blank or departments empty
            NotFoundError: If the pool does not exist
        """
        _validate_pool_fields(updates.title, updates.departments, "update_talent_pool")
        
        changes = updates.model_dump(exclude_unset=True)
        if changes.get("title") is not None:
            changes["title"] = changes["title"].strip()
        
        pool = self.repository.update(store, pool_id, **changes)
        if pool is None:
            raise NotFoundError("Talent pool", pool_id, context=ErrorContext(operation="update_talent_pool"))
        return pool
    
    def delete_talent_pool(self, store: KeyValueStore, pool_id: str) -> int:
        """Delete a pool and clear it from every membership set.
        
        Both steps share one store transaction.
        
        Returns:
            Number of subscribers whose membership set changed
            
        Raises:
            NotFoundError: If the pool does not exist
        """
        pool = self.get_talent_pool(store, pool_id)
        
        with store.transaction():
            updated = self.membership.cascade_delete_pool(store, pool_id, pool.tenant_id)
            self.repository.delete(store, pool_id)
        
        logger.info("Talent pool deleted", pool_id=pool_id, tenant_id=pool.tenant_id)
        return updated
