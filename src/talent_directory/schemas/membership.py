"""Schemas for subscriber/talent-pool membership changes."""

from enum import Enum
from typing import List

from pydantic import BaseModel, Field

from .subscriber import SubscriberResponse


class AssignmentMode(str, Enum):
    """How a bulk assignment combines with existing memberships."""
    ADD = "add"
    REPLACE = "replace"


class MembershipAssign(BaseModel):
    """Replace one subscriber's membership set."""
    
    talent_pool_ids: List[str] = Field(default_factory=list)


class BulkAssignRequest(BaseModel):
    """Apply a membership change to several subscribers."""
    
    subscriber_ids: List[str] = Field(..., min_length=1)
    talent_pool_ids: List[str] = Field(default_factory=list)
    mode: AssignmentMode = AssignmentMode.ADD
    confirm: bool = Field(False, description="Apply a replace even if memberships would be lost")


class MembershipConflict(BaseModel):
    """A subscriber that would lose pool memberships under replace."""
    
    subscriber_id: str
    email: str
    existing_pools: List[str] = Field(..., description="Titles of pools that would be dropped")


class BulkAssignResult(BaseModel):
    """Outcome of an applied bulk assignment."""
    
    mode: AssignmentMode
    updated: List[SubscriberResponse]
