"""Property-based tests for directory invariants."""

import csv
import io
from datetime import date

from hypothesis import given, note, strategies as st

from talent_directory.kv.memory import InMemoryKeyValueStore
from talent_directory.schemas.membership import AssignmentMode
from talent_directory.schemas.subscriber import SubscriberCreate, SubscriberResponse
from talent_directory.schemas.talent_pool import TalentPoolCreate
from talent_directory.schemas.tenant import TenantCreate
from talent_directory.services import aggregation, export_service
from talent_directory.services.membership_service import MembershipService
from talent_directory.services.subscriber_service import SubscriberService
from talent_directory.services.talent_pool_service import TalentPoolService
from talent_directory.services.tenant_service import TenantService

from tests.property_based.generators import (
    LOCATIONS,
    csv_cells,
    department_lists,
    email_addresses,
    subscriber_records,
)


class TestTenantProperties:
    
    @given(emails=st.lists(
        email_addresses().filter(lambda e: e != "demo@company.com"),
        min_size=1,
        max_size=5,
        unique=True
    ))
    def test_registered_tenants_authenticate(self, emails):
        """Every tenant registered with a distinct email can log back in."""
        store = InMemoryKeyValueStore()
        service = TenantService()
        
        registered = {
            email: service.create_tenant(
                store,
                TenantCreate(email=email, password=f"pw-{i}", company_name=f"Company {i}")
            )
            for i, email in enumerate(emails)
        }
        
        for i, email in enumerate(emails):
            assert service.authenticate(store, email, f"pw-{i}").id == registered[email].id


class TestMembershipProperties:
    
    @given(
        pool_count=st.integers(min_value=1, max_value=5),
        data=st.data(),
    )
    def test_pool_deletion_leaves_no_references(self, pool_count, data):
        """After deleting a pool no subscriber references it."""
        store = InMemoryKeyValueStore()
        pools = [
            TalentPoolService().create_talent_pool(
                store,
                TalentPoolCreate(tenant_id="user-1", title=f"Pool {i}", departments=["Engineering"])
            )
            for i in range(pool_count)
        ]
        pool_ids = [pool.id for pool in pools]
        
        memberships = data.draw(st.lists(st.lists(st.sampled_from(pool_ids), unique=True), max_size=8))
        for i, pool_ids_for_subscriber in enumerate(memberships):
            SubscriberService().create_subscriber(
                store,
                SubscriberCreate(tenant_id="user-1", email=f"c{i}@example.com", talent_pool_ids=pool_ids_for_subscriber)
            )
        
        doomed = data.draw(st.sampled_from(pool_ids))
        expected = sum(1 for ids in memberships if doomed in ids)
        note(f"deleting {doomed}, referenced by {expected}")
        
        assert TalentPoolService().delete_talent_pool(store, doomed) == expected
        
        remaining = SubscriberService().list_subscribers(store, "user-1")
        assert all(doomed not in sub.talent_pool_ids for sub in remaining)
        assert doomed not in [p.id for p in TalentPoolService().list_talent_pools(store, "user-1")]
        
        # Other memberships are untouched
        for sub, ids in zip(remaining, memberships):
            assert sub.talent_pool_ids == [pid for pid in ids if pid != doomed]
    
    @given(
        current=st.lists(st.sampled_from(["a", "b", "c"]), unique=True),
        requested=st.lists(st.sampled_from(["a", "b", "c"]), unique=True),
    )
    def test_add_mode_is_union(self, current, requested):
        store = InMemoryKeyValueStore()
        subscriber = SubscriberService().create_subscriber(
            store,
            SubscriberCreate(tenant_id="user-1", email="c@example.com", talent_pool_ids=current)
        )
        
        updated = MembershipService().bulk_assign(store, [subscriber.id], requested, mode=AssignmentMode.ADD)
        
        assert set(updated[0].talent_pool_ids) == set(current) | set(requested)
        assert updated[0].talent_pool_ids[:len(current)] == current


class TestAggregationProperties:
    
    @given(locations=st.lists(st.one_of(st.none(), st.sampled_from(LOCATIONS))))
    def test_top_location_count_is_maximal(self, locations):
        items = [SubscriberResponse(
            id=str(i),
            email=f"c{i}@example.com",
            tenant_id="user-1",
            signup_date=date(2024, 1, 1),
            current_location=location,
        ) for i, location in enumerate(locations)]
        
        top = aggregation.top_by_frequency(items, "current_location")
        present = [location for location in locations if location]
        
        if not present:
            assert top is None
        else:
            assert top.count == max(present.count(location) for location in present)
            assert present.count(top.name) == top.count
    
    @given(records=st.lists(subscriber_records(pool_ids=["p1", "p2"]), max_size=15))
    def test_pool_stats_bounded_by_members(self, records):
        subscribers = [SubscriberResponse(**record) for record in records]
        stats = aggregation.pool_stats(subscribers, "p1", window_days=7, today=date(2024, 6, 30))
        
        assert stats.total_candidates == sum(1 for s in subscribers if "p1" in s.talent_pool_ids)
        assert 0 <= stats.recent_joins <= stats.total_candidates
        assert stats.linkedin_profiles <= stats.total_candidates
        assert stats.with_motivation <= stats.total_candidates
        if stats.total_candidates:
            assert stats.top_location is not None


class TestExportProperties:
    
    @given(rows=st.lists(st.tuples(csv_cells(), department_lists()), max_size=6))
    def test_quoted_csv_preserves_columns(self, rows):
        """Quoted output parses back into the original cells."""
        text = export_service.to_csv(["Motivation", "Departments"], rows, quote_fields=True)
        parsed = list(csv.reader(io.StringIO(text)))
        
        expected = [["Motivation", "Departments"]] + [
            [motivation, "; ".join(departments)] for motivation, departments in rows
        ]
        assert parsed == expected
