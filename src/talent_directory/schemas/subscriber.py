"""Pydantic schemas for subscriber (candidate) records."""

from datetime import date
from typing import Optional, List

from pydantic import BaseModel, Field, EmailStr, field_validator


def _unique(values: Optional[List[str]]) -> Optional[List[str]]:
    """Drop repeated ids while keeping first-seen order."""
    if values is None:
        return None
    return list(dict.fromkeys(values))


class SubscriberBase(BaseModel):
    """Base subscriber schema with common fields."""
    
    departments: List[str] = Field(default_factory=list, description="Departments of interest")
    linkedin_url: Optional[str] = Field(None, description="LinkedIn profile URL")
    motivation: Optional[str] = Field(None, description="Free-text motivation")
    current_location: Optional[str] = Field(None, max_length=255)
    preferred_location: Optional[str] = Field(None, max_length=255)
    job_title: Optional[str] = Field(None, max_length=255)


class SubscriberSignup(SubscriberBase):
    """Public subscription form: contact details and departments of interest."""
    
    email: Optional[EmailStr] = None


class SubscriberIn(SubscriberSignup):
    """Subscriber added by a recruiter, optionally straight into pools."""
    
    talent_pool_ids: List[str] = Field(default_factory=list)


class SubscriberCreate(SubscriberBase):
    """Schema for creating a new subscriber.
    
    ``email`` is checked by the service so that a missing value surfaces
    as a directory validation error rather than a schema error.
    """
    
    email: Optional[EmailStr] = None
    tenant_id: str = Field(..., min_length=1)
    talent_pool_ids: List[str] = Field(default_factory=list)
    
    @field_validator("talent_pool_ids")
    @classmethod
    def dedupe_pool_ids(cls, v):
        return _unique(v)


class SubscriberUpdate(BaseModel):
    """Schema for updating a subscriber."""
    
    email: Optional[EmailStr] = None
    departments: Optional[List[str]] = None
    linkedin_url: Optional[str] = None
    motivation: Optional[str] = None
    current_location: Optional[str] = Field(None, max_length=255)
    preferred_location: Optional[str] = Field(None, max_length=255)
    job_title: Optional[str] = Field(None, max_length=255)
    talent_pool_ids: Optional[List[str]] = None
    
    @field_validator("talent_pool_ids")
    @classmethod
    def dedupe_pool_ids(cls, v):
        return _unique(v)


class SubscriberProfileUpdate(BaseModel):
    """Second step of the public subscription flow."""
    
    motivation: Optional[str] = None
    current_location: Optional[str] = Field(None, max_length=255)
    preferred_location: Optional[str] = Field(None, max_length=255)
    job_title: Optional[str] = Field(None, max_length=255)


class SubscriberResponse(SubscriberBase):
    """Schema for subscriber response and storage."""
    
    id: str
    email: EmailStr
    tenant_id: str
    signup_date: date
    talent_pool_ids: List[str] = Field(default_factory=list)
