"""Subscriber management endpoints for recruiters."""

from typing import List

from fastapi import APIRouter, Depends, Response, status
import structlog

from talent_directory.auth.dependencies import (
    ensure_own_pools,
    ensure_owned,
    get_current_tenant,
    get_store,
)
from talent_directory.core.logging import performance_logger
from talent_directory.kv.base import KeyValueStore
from talent_directory.schemas.membership import (
    BulkAssignRequest,
    BulkAssignResult,
    MembershipAssign,
)
from talent_directory.schemas.subscriber import (
    SubscriberCreate,
    SubscriberIn,
    SubscriberResponse,
    SubscriberUpdate,
)
from talent_directory.schemas.tenant import TenantResponse
from talent_directory.services.membership_service import MembershipService
from talent_directory.services.subscriber_service import SubscriberService, visible_tenant_ids

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/subscribers", tags=["subscribers"])


@router.get("/", response_model=List[SubscriberResponse])
async def list_subscribers(
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """List the tenant's subscribers together with the demo tenant's samples."""
    with performance_logger.log_operation_time("list_subscribers", tenant_id=current_tenant.id):
        subscribers = SubscriberService().list_subscribers(store, current_tenant.id)
        logger.info("Subscribers listed via API", tenant_id=current_tenant.id, count=len(subscribers))
        return subscribers


@router.post("/", response_model=SubscriberResponse, status_code=status.HTTP_201_CREATED)
async def create_subscriber(
    subscriber_data: SubscriberIn,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """Add a subscriber owned by the authenticated tenant."""
    with performance_logger.log_operation_time("create_subscriber", tenant_id=current_tenant.id):
        ensure_own_pools(store, current_tenant, subscriber_data.talent_pool_ids)
        return SubscriberService().create_subscriber(
            store,
            SubscriberCreate(tenant_id=current_tenant.id, **subscriber_data.model_dump())
        )


@router.post("/bulk-assign", response_model=BulkAssignResult)
async def bulk_assign(
    request: BulkAssignRequest,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """Add or replace pool memberships for several subscribers.
    
    An unconfirmed replace that would drop existing memberships answers
    409 with the list of affected subscribers and nothing is changed.
    """
    with performance_logger.log_operation_time(
        "bulk_assign",
        tenant_id=current_tenant.id,
        mode=request.mode.value
    ):
        service = SubscriberService()
        for subscriber_id in request.subscriber_ids:
            ensure_owned(
                service.get_subscriber(store, subscriber_id),
                current_tenant,
                "Subscriber",
                "bulk_assign"
            )
        ensure_own_pools(store, current_tenant, request.talent_pool_ids)
        
        updated = MembershipService().bulk_assign(
            store,
            request.subscriber_ids,
            request.talent_pool_ids,
            mode=request.mode,
            confirm=request.confirm
        )
        return BulkAssignResult(mode=request.mode, updated=updated)


@router.get("/{subscriber_id}", response_model=SubscriberResponse)
async def get_subscriber(
    subscriber_id: str,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    subscriber = SubscriberService().get_subscriber(store, subscriber_id)
    if subscriber.tenant_id not in visible_tenant_ids(current_tenant.id):
        ensure_owned(subscriber, current_tenant, "Subscriber", "get_subscriber")
    return subscriber


@router.patch("/{subscriber_id}", response_model=SubscriberResponse)
async def update_subscriber(
    subscriber_id: str,
    updates: SubscriberUpdate,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """Update a subscriber. Only provided fields are changed."""
    with performance_logger.log_operation_time(
        "update_subscriber",
        tenant_id=current_tenant.id,
        subscriber_id=subscriber_id
    ):
        service = SubscriberService()
        ensure_owned(service.get_subscriber(store, subscriber_id), current_tenant, "Subscriber", "update_subscriber")
        if updates.talent_pool_ids is not None:
            ensure_own_pools(store, current_tenant, updates.talent_pool_ids)
        return service.update_subscriber(store, subscriber_id, updates)


@router.put("/{subscriber_id}/talent-pools", response_model=SubscriberResponse)
async def assign_talent_pools(
    subscriber_id: str,
    assignment: MembershipAssign,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """Replace the subscriber's talent pool memberships."""
    ensure_owned(
        SubscriberService().get_subscriber(store, subscriber_id),
        current_tenant,
        "Subscriber",
        "assign"
    )
    ensure_own_pools(store, current_tenant, assignment.talent_pool_ids)
    return MembershipService().assign(store, subscriber_id, assignment.talent_pool_ids)


@router.delete("/{subscriber_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_subscriber(
    subscriber_id: str,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """Permanently delete a subscriber."""
    with performance_logger.log_operation_time(
        "delete_subscriber",
        tenant_id=current_tenant.id,
        subscriber_id=subscriber_id
    ):
        service = SubscriberService()
        ensure_owned(service.get_subscriber(store, subscriber_id), current_tenant, "Subscriber", "delete_subscriber")
        service.delete_subscriber(store, subscriber_id)
        return Response(status_code=status.HTTP_204_NO_CONTENT)
