"""Tenant profile endpoints."""

from fastapi import APIRouter, Depends
import structlog

from talent_directory.auth.dependencies import get_current_tenant, get_store
from talent_directory.core.logging import performance_logger
from talent_directory.kv.base import KeyValueStore
from talent_directory.schemas.tenant import TenantResponse, TenantUpdate
from talent_directory.services.tenant_service import TenantService

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/tenants", tags=["tenants"])


@router.get("/me", response_model=TenantResponse)
async def get_my_tenant(current_tenant: TenantResponse = Depends(get_current_tenant)):
    """Return the authenticated tenant's profile."""
    return current_tenant


@router.patch("/me", response_model=TenantResponse)
async def update_my_tenant(
    updates: TenantUpdate,
    store: KeyValueStore = Depends(get_store),
    current_tenant: TenantResponse = Depends(get_current_tenant)
):
    """Update branding, departments, email settings or ATS linkage.
    
    Only provided fields are changed.
    """
    with performance_logger.log_operation_time("update_tenant", tenant_id=current_tenant.id):
        return TenantService().update_tenant(store, current_tenant.id, updates)
