"""
Message Repository Port - Interface for message persistence.
Implementations:
- message_api/infrastructure/persistence/in_memory_message_repository.py
- message_api/infrastructure/persistence/prisma_message_repository.py

Every lookup is scoped to an organization. Each call is atomic on its own;
nothing is transactional across calls.
"""

from abc import ABC, abstractmethod
from typing import Optional

from message_api.domain.entities.message import Message
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId


class MessageRepository(ABC):
    @abstractmethod
    async def get_all_by_organization(
        self, organization_id: OrganizationId
    ) -> list[Message]: ...

    @abstractmethod
    async def get_by_id(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> Optional[Message]: ...

    @abstractmethod
    async def get_by_title(
        self, organization_id: OrganizationId, title: str
    ) -> Optional[Message]: ...

    @abstractmethod
    async def create(self, message: Message) -> Message: ...

    @abstractmethod
    async def update(self, message: Message) -> None: ...

    @abstractmethod
    async def delete(
        self, organization_id: OrganizationId, message_id: MessageId
    ) -> bool: ...
