"""Tenant registration, login and profile management."""

from uuid import uuid4

import structlog

from talent_directory.auth.utils import get_password_hash, verify_password
from talent_directory.core.config import settings, TenantDefaults
from talent_directory.core.errors import (
    DuplicateTenantError,
    ErrorContext,
    InvalidCredentialsError,
    NotFoundError,
)
from talent_directory.kv.base import KeyValueStore
from talent_directory.repositories.tenant import TenantRepository
from talent_directory.schemas.tenant import (
    PublicTenantProfile,
    TenantCreate,
    TenantInDB,
    TenantResponse,
    TenantUpdate,
)
from .demo_data import DEMO_TENANT_ID, demo_tenant

logger = structlog.get_logger(__name__)


class TenantService:
    """Service for managing tenant accounts."""
    
    def __init__(self, defaults: TenantDefaults = None):
        self.repository = TenantRepository()
        self.defaults = defaults or settings.tenant_defaults
    
    def create_tenant(self, store: KeyValueStore, registration: TenantCreate) -> TenantResponse:
        """Register a new tenant.
        
        Args:
            store: Key-value store
            registration: Registration data; omitted branding uses the tenant defaults
            
        Returns:
            Created tenant
            
        Raises:
            DuplicateTenantError: If the email is already registered or reserved
        """
        email = registration.email
        if (
            email.lower() == settings.demo_email.lower()
            or self.repository.get_by_email(store, email) is not None
        ):
            logger.warning("Registration rejected, email in use", email=email)
            raise DuplicateTenantError(email, context=ErrorContext(operation="create_tenant"))
        
        defaults = self.defaults
        tenant = TenantInDB(
            id=f"user-{uuid4()}",
            email=email,
            hashed_password=get_password_hash(registration.password),
            company_name=registration.company_name,
            logo_url=registration.logo_url,
            brand_color=registration.brand_color or defaults.brand_color,
            departments=(
                list(registration.departments)
                if registration.departments is not None
                else list(defaults.departments)
            ),
            intro_text=registration.intro_text or defaults.intro_text(registration.company_name),
            careers_page_url=registration.careers_page_url or defaults.careers_page_url,
        )
        self.repository.create(store, tenant)
        
        logger.info("Tenant registered", tenant_id=tenant.id, company_name=tenant.company_name)
        return tenant.to_response()
    
    def authenticate(self, store: KeyValueStore, email: str, password: str) -> TenantResponse:
        """Check a login email/secret pair.
        
        The reserved demo credentials always resolve to the demo tenant
        without reading the store.
        
        Raises:
            InvalidCredentialsError: If no tenant matches
        """
        if email.lower() == settings.demo_email.lower() and password == settings.demo_password:
            logger.info("Demo tenant login", tenant_id=DEMO_TENANT_ID)
            return demo_tenant()
        
        tenant = self.repository.get_by_email(store, email)
        if tenant is None or not verify_password(password, tenant.hashed_password):
            logger.warning("Login failed", email=email)
            raise InvalidCredentialsError(
                f"Invalid credentials. Try {settings.demo_email} / {settings.demo_password}",
                context=ErrorContext(operation="authenticate")
            )
        
        logger.info("Tenant login", tenant_id=tenant.id)
        return tenant.to_response()
    
    def get_tenant(self, store: KeyValueStore, tenant_id: str) -> TenantResponse:
        """Get a tenant by id; the demo tenant always resolves.
        
        Raises:
            NotFoundError: If the tenant does not exist
        """
        if tenant_id == DEMO_TENANT_ID:
            return demo_tenant()
        
        tenant = self.repository.get_by_id(store, tenant_id)
        if tenant is None:
            raise NotFoundError("Tenant", tenant_id, context=ErrorContext(operation="get_tenant"))
        return tenant.to_response()
    
    def get_public_profile(self, store: KeyValueStore, tenant_id: str) -> PublicTenantProfile:
        """Branding subset shown on the public subscription page."""
        tenant = self.get_tenant(store, tenant_id)
        return PublicTenantProfile(**tenant.model_dump(include=set(PublicTenantProfile.model_fields)))
    
    def update_tenant(
        self,
        store: KeyValueStore,
        tenant_id: str,
        updates: TenantUpdate
    ) -> TenantResponse:
        """Merge provided fields into a persisted tenant.
        
        The demo tenant is not persisted and therefore cannot be updated.
        
        Raises:
            NotFoundError: If the tenant does not exist
        """
        tenant = self.repository.update(
            store,
            tenant_id,
            **updates.model_dump(mode="json", exclude_unset=True)
        )
        if tenant is None:
            raise NotFoundError("Tenant", tenant_id, context=ErrorContext(operation="update_tenant"))
        
        logger.info("Tenant updated", tenant_id=tenant_id)
        return tenant.to_response()
