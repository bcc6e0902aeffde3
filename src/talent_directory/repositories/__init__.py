"""Repository pattern implementations for key-value data access."""

from .base import KeyValueRepository
from .tenant import TenantRepository
from .subscriber import SubscriberRepository
from .talent_pool import TalentPoolRepository

__all__ = [
    "KeyValueRepository",
    "TenantRepository",
    "SubscriberRepository",
    "TalentPoolRepository",
]
