"""FastAPI dependencies for storage access and tenant authentication."""

from typing import Iterable

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
import structlog

from talent_directory.core.database import get_db
from talent_directory.core.errors import ErrorContext, NotFoundError, ValidationError
from talent_directory.kv.base import KeyValueStore
from talent_directory.kv.sql import SqlKeyValueStore
from talent_directory.schemas.tenant import TenantResponse
from talent_directory.services.tenant_service import TenantService
from talent_directory.services.talent_pool_service import TalentPoolService
from .utils import verify_token

logger = structlog.get_logger(__name__)

security = HTTPBearer(auto_error=False)


def get_store(db: Session = Depends(get_db)) -> KeyValueStore:
    """Key-value store bound to the request's database session."""
    return SqlKeyValueStore(db)


async def get_current_tenant(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    store: KeyValueStore = Depends(get_store)
) -> TenantResponse:
    """Resolve the calling tenant from the bearer token.
    
    Raises:
        HTTPException: If authentication fails
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )
    
    if not credentials:
        logger.warning("No credentials provided")
        raise credentials_exception
    
    token_data = verify_token(credentials.credentials)
    if token_data is None:
        raise credentials_exception
    
    try:
        return TenantService().get_tenant(store, token_data.tenant_id)
    except NotFoundError:
        logger.warning("Tenant not found for token", tenant_id=token_data.tenant_id)
        raise credentials_exception


def ensure_owned(record, tenant: TenantResponse, entity: str, operation: str):
    """Hide records of other tenants behind a not-found error.
    
    Demo records stay visible in listings but only the demo tenant may
    change them.
    """
    if record.tenant_id != tenant.id:
        logger.warning(
            "Cross-tenant access rejected",
            entity=entity,
            record_id=record.id,
            tenant_id=tenant.id
        )
        raise NotFoundError(entity, record.id, context=ErrorContext(operation=operation, tenant_id=tenant.id))
    return record


def ensure_own_pools(store: KeyValueStore, tenant: TenantResponse, pool_ids: Iterable[str]) -> None:
    """Reject pool ids that do not belong to the calling tenant."""
    owned = {
        pool.id
        for pool in TalentPoolService().repository.get_for_tenants(store, [tenant.id])
    }
    unknown = [pool_id for pool_id in pool_ids if pool_id not in owned]
    if unknown:
        raise ValidationError(
            f"Unknown talent pool ids: {', '.join(unknown)}",
            field="talent_pool_ids",
            value=unknown,
            context=ErrorContext(operation="assign", tenant_id=tenant.id)
        )
