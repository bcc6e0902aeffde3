"""Pydantic schemas for talent pools."""

from datetime import date
from typing import Optional, List

from pydantic import BaseModel, Field


class TalentPoolIn(BaseModel):
    """Talent pool fields supplied by a recruiter."""
    
    title: str = ""
    departments: List[str] = Field(default_factory=list)
    description: Optional[str] = None


class TalentPoolCreate(BaseModel):
    """Schema for creating a talent pool.
    
    Title and departments are checked by the service; an empty value is
    reported as a directory validation error.
    """
    
    tenant_id: str = Field(..., min_length=1)
    title: str = ""
    departments: List[str] = Field(default_factory=list)
    description: Optional[str] = None


class TalentPoolUpdate(BaseModel):
    """Schema for updating a talent pool."""
    
    title: Optional[str] = None
    departments: Optional[List[str]] = None
    description: Optional[str] = None


class TalentPoolResponse(BaseModel):
    """Schema for talent pool response and storage."""
    
    id: str
    title: str
    departments: List[str]
    tenant_id: str
    created_date: date
    description: Optional[str] = None
