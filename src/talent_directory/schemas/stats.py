"""Read-only statistics schemas."""

from typing import Optional

from pydantic import BaseModel


class FrequencyBucket(BaseModel):
    """Most frequent value of a field and how often it occurred."""
    
    name: str
    count: int


class DashboardStats(BaseModel):
    """Tenant-wide subscriber statistics."""
    
    total_subscribers: int
    recent_signups: int
    linkedin_profiles: int
    top_department: Optional[FrequencyBucket] = None


class PoolStats(BaseModel):
    """Statistics for the members of one talent pool."""
    
    total_candidates: int
    recent_joins: int
    linkedin_profiles: int
    with_motivation: int
    top_location: Optional[FrequencyBucket] = None
