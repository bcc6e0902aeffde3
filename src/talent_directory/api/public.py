"""Unauthenticated endpoints backing the public subscription page."""

from fastapi import APIRouter, Depends, status
import structlog

from talent_directory.auth.dependencies import get_store
from talent_directory.core.errors import ErrorContext, ValidationError
from talent_directory.core.logging import performance_logger
from talent_directory.kv.base import KeyValueStore
from talent_directory.schemas.subscriber import (
    SubscriberCreate,
    SubscriberProfileUpdate,
    SubscriberResponse,
    SubscriberSignup,
)
from talent_directory.schemas.tenant import PublicTenantProfile
from talent_directory.services.subscriber_service import SubscriberService
from talent_directory.services.tenant_service import TenantService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/public", tags=["public"])


@router.get("/{tenant_id}", response_model=PublicTenantProfile)
async def get_subscription_page(tenant_id: str, store: KeyValueStore = Depends(get_store)):
    """Branding shown on a company's subscription page."""
    return TenantService().get_public_profile(store, tenant_id)


@router.post(
    "/{tenant_id}/subscribe",
    response_model=SubscriberResponse,
    status_code=status.HTTP_201_CREATED
)
async def subscribe(
    tenant_id: str,
    signup: SubscriberSignup,
    store: KeyValueStore = Depends(get_store)
):
    """First step of the subscription flow: capture interest."""
    with performance_logger.log_operation_time("subscribe", tenant_id=tenant_id):
        TenantService().get_tenant(store, tenant_id)
        
        if not signup.departments:
            raise ValidationError(
                "Please select at least one department",
                field="departments",
                context=ErrorContext(operation="subscribe", tenant_id=tenant_id)
            )
        
        subscriber = SubscriberService().create_subscriber(
            store,
            SubscriberCreate(tenant_id=tenant_id, **signup.model_dump())
        )
        logger.info("Public subscription received", tenant_id=tenant_id, subscriber_id=subscriber.id)
        return subscriber


@router.patch("/subscribers/{subscriber_id}/profile", response_model=SubscriberResponse)
async def enrich_profile(
    subscriber_id: str,
    profile: SubscriberProfileUpdate,
    store: KeyValueStore = Depends(get_store)
):
    """Second, optional step of the subscription flow."""
    return SubscriberService().enrich_profile(store, subscriber_id, profile)
