"""Error taxonomy for directory operations."""

from typing import Any, Dict, List, Optional
from datetime import datetime
from enum import Enum
from dataclasses import dataclass


class ErrorSeverity(Enum):
    """Error severity levels for classification and handling."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ErrorCategory(Enum):
    """Error categories for classification and routing."""
    NOT_FOUND = "not_found"
    DUPLICATE = "duplicate"
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Context information for error handling and logging."""
    operation: str
    tenant_id: Optional[str] = None
    additional_data: Optional[Dict[str, Any]] = None


class DirectoryError(Exception):
    """Base exception class for directory errors."""
    
    def __init__(
        self,
        message: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.MEDIUM,
        context: Optional[ErrorContext] = None,
        original_error: Optional[Exception] = None
    ):
        super().__init__(message)
        self.message = message
        self.category = category
        self.severity = severity
        self.context = context
        self.original_error = original_error
        self.timestamp = datetime.utcnow()
    
    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary for logging and API responses."""
        return {
            "message": self.message,
            "category": self.category.value,
            "severity": self.severity.value,
            "timestamp": self.timestamp.isoformat(),
            "context": {
                "operation": self.context.operation if self.context else None,
                "tenant_id": self.context.tenant_id if self.context else None,
                "additional_data": self.context.additional_data if self.context else None,
            },
            "original_error": str(self.original_error) if self.original_error else None,
        }


class NotFoundError(DirectoryError):
    """Referenced tenant, subscriber or talent pool does not exist."""
    
    def __init__(self, entity: str, entity_id: str, **kwargs):
        super().__init__(
            f"{entity} not found: {entity_id}",
            ErrorCategory.NOT_FOUND,
            ErrorSeverity.LOW,
            **kwargs
        )
        self.entity = entity
        self.entity_id = entity_id


class DuplicateTenantError(DirectoryError):
    """Registration email is already taken."""
    
    def __init__(self, email: str, **kwargs):
        super().__init__(
            "User already exists with this email",
            ErrorCategory.DUPLICATE,
            ErrorSeverity.LOW,
            **kwargs
        )
        self.email = email


class InvalidCredentialsError(DirectoryError):
    """Login email/secret pair did not match."""
    
    def __init__(self, message: str = "Invalid credentials", **kwargs):
        super().__init__(
            message,
            ErrorCategory.AUTHENTICATION,
            ErrorSeverity.HIGH,
            **kwargs
        )


class ValidationError(DirectoryError):
    """Error for data validation failures."""
    
    def __init__(self, message: str, field: str = None, value: Any = None, **kwargs):
        super().__init__(
            message,
            ErrorCategory.VALIDATION,
            ErrorSeverity.LOW,
            **kwargs
        )
        self.field = field
        self.value = value


class ConflictDetectedError(DirectoryError):
    """Bulk replace would drop existing pool memberships."""
    
    def __init__(self, conflicts: List[Any], **kwargs):
        super().__init__(
            f"{len(conflicts)} subscriber(s) would lose existing talent pool memberships",
            ErrorCategory.CONFLICT,
            ErrorSeverity.MEDIUM,
            **kwargs
        )
        self.conflicts = conflicts
    
    def to_dict(self) -> Dict[str, Any]:
        data = super().to_dict()
        data["conflicts"] = [
            conflict.model_dump() if hasattr(conflict, "model_dump") else conflict
            for conflict in self.conflicts
        ]
        return data
