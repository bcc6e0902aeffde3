"""Tests for tenant registration, login and profile updates."""

import pytest

from talent_directory.core.config import TenantDefaults
from talent_directory.core.errors import (
    DuplicateTenantError,
    InvalidCredentialsError,
    NotFoundError,
)
from talent_directory.repositories.tenant import TenantRepository
from talent_directory.schemas.tenant import EmailSettings, TenantCreate, TenantUpdate
from talent_directory.services.demo_data import DEMO_TENANT_ID
from talent_directory.services.tenant_service import TenantService


class TestTenantRegistration:
    """Test tenant registration."""
    
    def test_register_fills_defaults(self, store):
        tenant = TenantService().create_tenant(
            store,
            TenantCreate(email="hr@globex.com", password="pw", company_name="Globex")
        )
        
        assert tenant.id.startswith("user-")
        assert tenant.brand_color == "#3B82F6"
        assert tenant.departments == ["Engineering", "Product", "Marketing", "Sales"]
        assert tenant.intro_text == (
            "Join our team at Globex! We're always looking for talented individuals."
        )
        assert tenant.careers_page_url == "#"
        assert tenant.logo_url is None
    
    def test_register_keeps_supplied_branding(self, store):
        tenant = TenantService().create_tenant(
            store,
            TenantCreate(
                email="hr@globex.com",
                password="pw",
                company_name="Globex",
                brand_color="#000000",
                departments=["Research"],
                intro_text="Hello",
            )
        )
        
        assert tenant.brand_color == "#000000"
        assert tenant.departments == ["Research"]
        assert tenant.intro_text == "Hello"
    
    def test_register_uses_configured_defaults(self, store):
        defaults = TenantDefaults(brand_color="#FF0000", departments=["Ops"])
        tenant = TenantService(defaults=defaults).create_tenant(
            store,
            TenantCreate(email="hr@globex.com", password="pw", company_name="Globex")
        )
        
        assert tenant.brand_color == "#FF0000"
        assert tenant.departments == ["Ops"]
    
    def test_duplicate_email_rejected(self, store, tenant):
        with pytest.raises(DuplicateTenantError) as exc_info:
            TenantService().create_tenant(
                store,
                TenantCreate(email="recruiter@acme.io", password="other", company_name="Other Co")
            )
        
        assert exc_info.value.message == "User already exists with this email"
        
        # Original record is unchanged
        stored = TenantRepository().get_multi(store)
        assert len(stored) == 1
        assert stored[0].company_name == "Acme Corp"
    
    def test_duplicate_email_is_case_insensitive(self, store, tenant):
        with pytest.raises(DuplicateTenantError):
            TenantService().create_tenant(
                store,
                TenantCreate(email="Recruiter@Acme.io", password="pw", company_name="Other Co")
            )
    
    def test_demo_email_is_reserved(self, store):
        with pytest.raises(DuplicateTenantError):
            TenantService().create_tenant(
                store,
                TenantCreate(email="demo@company.com", password="pw", company_name="Copycat")
            )
    
    def test_password_is_not_returned(self, tenant):
        assert "hashed_password" not in tenant.model_dump()


class TestTenantAuthentication:
    """Test login."""
    
    def test_registered_tenant_can_login(self, store, tenant):
        logged_in = TenantService().authenticate(store, "recruiter@acme.io", "s3cret")
        assert logged_in.id == tenant.id
    
    def test_wrong_password_rejected(self, store, tenant):
        with pytest.raises(InvalidCredentialsError) as exc_info:
            TenantService().authenticate(store, "recruiter@acme.io", "wrong")
        assert "demo@company.com / demo123" in exc_info.value.message
    
    def test_unknown_email_rejected(self, store):
        with pytest.raises(InvalidCredentialsError):
            TenantService().authenticate(store, "nobody@acme.io", "s3cret")
    
    def test_demo_login(self, store):
        tenant = TenantService().authenticate(store, "demo@company.com", "demo123")
        
        assert tenant.id == DEMO_TENANT_ID
        assert tenant.company_name == "Tech Innovations Inc."
        # Demo tenant is never written to the store
        assert store.scan_by_prefix("") == []
    
    def test_demo_email_with_wrong_password(self, store):
        with pytest.raises(InvalidCredentialsError):
            TenantService().authenticate(store, "demo@company.com", "nope")


class TestTenantProfile:
    """Test profile lookups and updates."""
    
    def test_get_tenant(self, store, tenant):
        assert TenantService().get_tenant(store, tenant.id) == tenant
    
    def test_get_demo_tenant(self, store):
        assert TenantService().get_tenant(store, DEMO_TENANT_ID).id == DEMO_TENANT_ID
    
    def test_get_missing_tenant(self, store):
        with pytest.raises(NotFoundError):
            TenantService().get_tenant(store, "user-missing")
    
    def test_public_profile_hides_account_fields(self, store, tenant):
        profile = TenantService().get_public_profile(store, tenant.id)
        
        assert profile.company_name == "Acme Corp"
        assert not hasattr(profile, "email")
    
    def test_update_merges_fields(self, store, tenant):
        updated = TenantService().update_tenant(
            store,
            tenant.id,
            TenantUpdate(
                brand_color="#10B981",
                ats_provider="greenhouse",
                email_settings=EmailSettings(
                    sender_name="Acme Talent",
                    sender_email="talent@acme.io",
                    email_subject="News from Acme",
                ),
            )
        )
        
        assert updated.brand_color == "#10B981"
        assert updated.ats_provider == "greenhouse"
        assert updated.email_settings.sender_name == "Acme Talent"
        assert updated.company_name == "Acme Corp"
        
        # Password still verifies after the merge
        assert TenantService().authenticate(store, "recruiter@acme.io", "s3cret").id == tenant.id
    
    def test_update_missing_tenant(self, store):
        with pytest.raises(NotFoundError):
            TenantService().update_tenant(store, "user-missing", TenantUpdate(brand_color="#000000"))
    
    def test_demo_tenant_cannot_be_updated(self, store):
        with pytest.raises(NotFoundError):
            TenantService().update_tenant(store, DEMO_TENANT_ID, TenantUpdate(brand_color="#000000"))
