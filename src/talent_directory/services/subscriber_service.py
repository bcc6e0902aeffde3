"""Subscriber (candidate) management service."""

from datetime import date
from typing import List
from uuid import uuid4

import structlog

from talent_directory.core.errors import ErrorContext, NotFoundError, ValidationError
from talent_directory.kv.base import KeyValueStore
from talent_directory.repositories.subscriber import SubscriberRepository
from talent_directory.schemas.subscriber import (
    SubscriberCreate,
    SubscriberProfileUpdate,
    SubscriberResponse,
    SubscriberUpdate,
)
from .demo_data import DEMO_TENANT_ID

logger = structlog.get_logger(__name__)


def visible_tenant_ids(tenant_id: str) -> List[str]:
    """Tenants whose records a listing for ``tenant_id`` returns.
    
    Listings always include the demo tenant's sample records next to the
    caller's own.
    """
    return [tenant_id, DEMO_TENANT_ID]


class SubscriberService:
    """Service for managing subscriber records."""
    
    def __init__(self):
        self.repository = SubscriberRepository()
    
    def list_subscribers(self, store: KeyValueStore, tenant_id: str) -> List[SubscriberResponse]:
        """List the tenant's subscribers plus the demo tenant's, in signup order."""
        return self.repository.get_for_tenants(store, visible_tenant_ids(tenant_id))
    
    def get_subscriber(self, store: KeyValueStore, subscriber_id: str) -> SubscriberResponse:
        """Get subscriber by id.
        
        Raises:
            NotFoundError: If the subscriber does not exist
        """
        subscriber = self.repository.get_by_id(store, subscriber_id)
        if subscriber is None:
            raise NotFoundError(
                "Subscriber",
                subscriber_id,
                context=ErrorContext(operation="get_subscriber")
            )
        return subscriber
    
    def create_subscriber(self, store: KeyValueStore, data: SubscriberCreate) -> SubscriberResponse:
        """Create a subscriber with today's signup date.
        
        Duplicate emails are accepted as separate records.
        
        Raises:
            ValidationError: If the email is missing
        """
        if not data.email:
            raise ValidationError(
                "Candidate email is required",
                field="email",
                context=ErrorContext(operation="create_subscriber", tenant_id=data.tenant_id)
            )
        
        subscriber = SubscriberResponse(
            id=f"subscriber-{uuid4()}",
            signup_date=date.today(),
            **data.model_dump()
        )
        self.repository.create(store, subscriber)
        
        logger.info(
            "Subscriber created",
            subscriber_id=subscriber.id,
            tenant_id=subscriber.tenant_id,
            departments=subscriber.departments
        )
        return subscriber
    
    def update_subscriber(
        self,
        store: KeyValueStore,
        subscriber_id: str,
        updates: SubscriberUpdate
    ) -> SubscriberResponse:
        """Merge provided fields into a subscriber.
        
        Raises:
            NotFoundError: If the subscriber does not exist
        """
        subscriber = self.repository.update(
            store,
            subscriber_id,
            **updates.model_dump(exclude_unset=True)
        )
        if subscriber is None:
            raise NotFoundError(
                "Subscriber",
                subscriber_id,
                context=ErrorContext(operation="update_subscriber")
            )
        return subscriber
    
    def enrich_profile(
        self,
        store: KeyValueStore,
        subscriber_id: str,
        profile: SubscriberProfileUpdate
    ) -> SubscriberResponse:
        """Apply the optional profile step of the public subscription flow."""
        return self.update_subscriber(
            store,
            subscriber_id,
            SubscriberUpdate(**profile.model_dump(exclude_unset=True))
        )
    
    def delete_subscriber(self, store: KeyValueStore, subscriber_id: str) -> None:
        """Hard-delete a subscriber.
        
        Raises:
            NotFoundError: If the subscriber does not exist
        """
        if not self.repository.delete(store, subscriber_id):
            raise NotFoundError(
                "Subscriber",
                subscriber_id,
                context=ErrorContext(operation="delete_subscriber")
            )
        logger.info("Subscriber deleted", subscriber_id=subscriber_id)
