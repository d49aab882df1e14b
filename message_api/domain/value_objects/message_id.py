"""
MessageId Value Object - UUID wrapper for message identity.
"""

from dataclasses import dataclass
from uuid import UUID, uuid4

from message_api.domain.value_objects.organization_id import NIL_UUID


@dataclass(frozen=True)
class MessageId:
    value: str  # message_id, presented as UUID string

    def __post_init__(self):
        if self.value:
            UUID(self.value)  # raises ValueError if invalid UUID

    @classmethod
    def generate(cls) -> "MessageId":
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        return bool(self.value) and str(UUID(self.value)) != NIL_UUID
