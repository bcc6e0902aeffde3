"""Tests for subscriber management."""

from datetime import date

import pytest

from talent_directory.core.errors import NotFoundError, ValidationError
from talent_directory.schemas.subscriber import (
    SubscriberCreate,
    SubscriberProfileUpdate,
    SubscriberUpdate,
)
from talent_directory.services.demo_data import DEMO_TENANT_ID
from talent_directory.services.subscriber_service import SubscriberService, visible_tenant_ids


class TestSubscriberService:
    """Test subscriber CRUD."""
    
    def test_create_sets_id_and_signup_date(self, store, tenant, make_subscriber):
        subscriber = make_subscriber(tenant.id, departments=["Engineering"])
        
        assert subscriber.id.startswith("subscriber-")
        assert subscriber.signup_date == date.today()
        assert subscriber.tenant_id == tenant.id
        assert subscriber.talent_pool_ids == []
    
    def test_created_subscriber_listed_once(self, store, tenant, make_subscriber):
        subscriber = make_subscriber(tenant.id)
        
        listed = SubscriberService().list_subscribers(store, tenant.id)
        assert [s.id for s in listed].count(subscriber.id) == 1
    
    def test_listing_keeps_signup_order(self, store, tenant, make_subscriber):
        first = make_subscriber(tenant.id, email="one@example.com")
        second = make_subscriber(tenant.id, email="two@example.com")
        
        listed = SubscriberService().list_subscribers(store, tenant.id)
        assert [s.id for s in listed] == [first.id, second.id]
    
    def test_duplicate_emails_accepted(self, store, tenant, make_subscriber):
        make_subscriber(tenant.id, email="same@example.com")
        make_subscriber(tenant.id, email="same@example.com")
        
        listed = SubscriberService().list_subscribers(store, tenant.id)
        assert len([s for s in listed if s.email == "same@example.com"]) == 2
    
    def test_missing_email_rejected(self, store, tenant):
        with pytest.raises(ValidationError) as exc_info:
            SubscriberService().create_subscriber(
                store,
                SubscriberCreate(tenant_id=tenant.id, departments=["Sales"])
            )
        
        assert exc_info.value.field == "email"
        assert SubscriberService().list_subscribers(store, tenant.id) == []
    
    def test_pool_ids_deduplicated(self, store, tenant, make_subscriber):
        subscriber = make_subscriber(tenant.id, talent_pool_ids=["p1", "p2", "p1"])
        assert subscriber.talent_pool_ids == ["p1", "p2"]
    
    def test_listing_includes_demo_records(self, seeded_store, tenant, make_subscriber):
        own = make_subscriber(tenant.id)
        
        listed = SubscriberService().list_subscribers(seeded_store, tenant.id)
        tenant_ids = {s.tenant_id for s in listed}
        
        assert tenant_ids == {tenant.id, DEMO_TENANT_ID}
        assert own.id in [s.id for s in listed]
        assert len(listed) == 6
    
    def test_listing_excludes_other_tenants(self, store, make_subscriber):
        make_subscriber("user-other")
        assert SubscriberService().list_subscribers(store, "user-mine") == []
    
    def test_get_missing_subscriber(self, store):
        with pytest.raises(NotFoundError):
            SubscriberService().get_subscriber(store, "subscriber-missing")
    
    def test_update_merges_fields(self, store, tenant, make_subscriber):
        subscriber = make_subscriber(tenant.id, departments=["Sales"], job_title="AE")
        
        updated = SubscriberService().update_subscriber(
            store,
            subscriber.id,
            SubscriberUpdate(current_location="Remote")
        )
        
        assert updated.current_location == "Remote"
        assert updated.job_title == "AE"
        assert updated.departments == ["Sales"]
        assert updated.signup_date == subscriber.signup_date
    
    def test_update_missing_subscriber(self, store):
        with pytest.raises(NotFoundError):
            SubscriberService().update_subscriber(store, "subscriber-missing", SubscriberUpdate(job_title="x"))
    
    def test_enrich_profile(self, store, tenant, make_subscriber):
        subscriber = make_subscriber(tenant.id)
        
        enriched = SubscriberService().enrich_profile(
            store,
            subscriber.id,
            SubscriberProfileUpdate(motivation="Love the mission", job_title="Engineer")
        )
        
        assert enriched.motivation == "Love the mission"
        assert enriched.job_title == "Engineer"
        assert enriched.email == subscriber.email
    
    def test_delete(self, store, tenant, make_subscriber):
        subscriber = make_subscriber(tenant.id)
        SubscriberService().delete_subscriber(store, subscriber.id)
        
        assert SubscriberService().list_subscribers(store, tenant.id) == []
        with pytest.raises(NotFoundError):
            SubscriberService().delete_subscriber(store, subscriber.id)


def test_visible_tenant_ids():
    assert visible_tenant_ids("user-1") == ["user-1", DEMO_TENANT_ID]
