"""Service layer for business logic."""

from .tenant_service import TenantService
from .subscriber_service import SubscriberService
from .talent_pool_service import TalentPoolService
from .membership_service import MembershipService
from .seed_service import SeedService

__all__ = [
    "TenantService",
    "SubscriberService",
    "TalentPoolService",
    "MembershipService",
    "SeedService",
]
