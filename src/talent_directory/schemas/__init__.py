"""Pydantic schemas for API request/response validation and storage."""

from .tenant import (
    EmailSettings,
    TenantCreate,
    TenantUpdate,
    TenantResponse,
    TenantInDB,
    PublicTenantProfile,
    LoginRequest,
    AuthResponse,
)
from .subscriber import (
    SubscriberSignup,
    SubscriberIn,
    SubscriberCreate,
    SubscriberUpdate,
    SubscriberProfileUpdate,
    SubscriberResponse,
)
from .talent_pool import (
    TalentPoolIn,
    TalentPoolCreate,
    TalentPoolUpdate,
    TalentPoolResponse,
)
from .membership import (
    AssignmentMode,
    MembershipAssign,
    BulkAssignRequest,
    MembershipConflict,
    BulkAssignResult,
)
from .stats import FrequencyBucket, DashboardStats, PoolStats

__all__ = [
    "EmailSettings",
    "TenantCreate",
    "TenantUpdate",
    "TenantResponse",
    "TenantInDB",
    "PublicTenantProfile",
    "LoginRequest",
    "AuthResponse",
    "SubscriberSignup",
    "SubscriberIn",
    "SubscriberCreate",
    "SubscriberUpdate",
    "SubscriberProfileUpdate",
    "SubscriberResponse",
    "TalentPoolIn",
    "TalentPoolCreate",
    "TalentPoolUpdate",
    "TalentPoolResponse",
    "AssignmentMode",
    "MembershipAssign",
    "BulkAssignRequest",
    "MembershipConflict",
    "BulkAssignResult",
    "FrequencyBucket",
    "DashboardStats",
    "PoolStats",
]
