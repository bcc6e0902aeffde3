"""Talent pool endpoints."""

from typing import List

from fastapi import APIRouter, Depends, Response, status
import structlog

from talent_directory.auth.dependencies import ensure_owned, get_current_tenant, get_store
from talent_directory.core.logging import performance_logger
from talent_directory.kv.base import KeyValueStore
from talent_directory.schemas.stats import PoolStats
from talent_directory.schemas.subscriber import SubscriberResponse
from talent_directory.schemas.talent_pool import (
    TalentPoolCreate,
    TalentPoolIn,
    TalentPoolResponse,
    TalentPoolUpdate,
)
from talent_directory.schemas.tenant import TenantResponse
from talent_directory.services import aggregation, export_service
from talent_directory.services.membership_service import MembershipService, pool_members
from talent_directory.services.subscriber_service import SubscriberService, visible_tenant_ids
from talent_directory.services.talent_pool_service import TalentPoolService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/talent-pools", tags=["talent-pools"])


def _visible_pool(store: KeyValueStore, pool_id: str, tenant: TenantResponse) -> TalentPoolResponse:
    pool = TalentPoolService().get_talent_pool(store, pool_id)
    if pool.tenant_id not in visible_tenant_ids(tenant.id):
        ensure_owned(pool, tenant, "Talent pool", "get_talent_pool")
    return pool


def _members(store: KeyValueStore, pool_id: str, tenant: TenantResponse) -> List[SubscriberResponse]:
    return pool_members(SubscriberService().list_subscribers(store, tenant.id), pool_id)


@router.get("/", response_model=List[TalentPoolResponse])
async def list_talent_pools(
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    return TalentPoolService().list_talent_pools(store, current_tenant.id)


@router.post("/", response_model=TalentPoolResponse, status_code=status.HTTP_201_CREATED)
async def create_talent_pool(
    pool_data: TalentPoolIn,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """Create a pool; a title and at least one department are required."""
    with performance_logger.log_operation_time("create_talent_pool", tenant_id=current_tenant.id):
        return TalentPoolService().create_talent_pool(
            store,
            TalentPoolCreate(tenant_id=current_tenant.id, **pool_data.model_dump())
        )


@router.get("/{pool_id}", response_model=TalentPoolResponse)
async def get_talent_pool(
    pool_id: str,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    return _visible_pool(store, pool_id, current_tenant)


@router.patch("/{pool_id}", response_model=TalentPoolResponse)
async def update_talent_pool(
    pool_id: str,
    updates: TalentPoolUpdate,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    service = TalentPoolService()
    ensure_owned(service.get_talent_pool(store, pool_id), current_tenant, "Talent pool", "update_talent_pool")
    return service.update_talent_pool(store, pool_id, updates)


@router.delete("/{pool_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_talent_pool(
    pool_id: str,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """Delete a pool and remove it from every subscriber's memberships."""
    with performance_logger.log_operation_time(
        "delete_talent_pool",
        tenant_id=current_tenant.id,
        pool_id=pool_id
    ):
        service = TalentPoolService()
        ensure_owned(service.get_talent_pool(store, pool_id), current_tenant, "Talent pool", "delete_talent_pool")
        service.delete_talent_pool(store, pool_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{pool_id}/subscribers", response_model=List[SubscriberResponse])
async def list_pool_subscribers(
    pool_id: str,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    _visible_pool(store, pool_id, current_tenant)
    return _members(store, pool_id, current_tenant)


@router.delete("/{pool_id}/subscribers/{subscriber_id}", response_model=SubscriberResponse)
async def remove_pool_subscriber(
    pool_id: str,
    subscriber_id: str,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """Take one candidate out of the pool, keeping their other memberships."""
    ensure_owned(
        TalentPoolService().get_talent_pool(store, pool_id),
        current_tenant,
        "Talent pool",
        "remove_membership"
    )
    ensure_owned(
        SubscriberService().get_subscriber(store, subscriber_id),
        current_tenant,
        "Subscriber",
        "remove_membership"
    )
    return MembershipService().remove(store, subscriber_id, pool_id)


@router.get("/{pool_id}/stats", response_model=PoolStats)
async def get_pool_stats(
    pool_id: str,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    _visible_pool(store, pool_id, current_tenant)
    return aggregation.pool_stats(SubscriberService().list_subscribers(store, current_tenant.id), pool_id)


@router.get("/{pool_id}/export.csv")
async def export_pool_candidates(
    pool_id: str,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """Download the pool's candidates as CSV."""
    pool = _visible_pool(store, pool_id, current_tenant)
    content = export_service.pool_candidates_csv(_members(store, pool_id, current_tenant))
    filename = export_service.export_filename(pool.title, "candidates")
    
    logger.info("Talent pool exported", pool_id=pool_id, tenant_id=current_tenant.id)
    return Response(
        content=content,
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'}
    )
