"""
VALUE OBJECTS - Immutable domain types

Each value object:
- Has no identity (compared by value, not by ID)
- Is immutable (frozen dataclass)
- Validates itself on creation
- Is falsy when it holds the empty identifier
"""

from message_api.domain.value_objects.organization_id import OrganizationId
from message_api.domain.value_objects.message_id import MessageId

__all__ = [
    "OrganizationId",
    "MessageId",
]
