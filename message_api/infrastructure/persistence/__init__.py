"""
Persistence Layer - MessageRepository implementations.

Only the in-memory implementation is exported here; the Prisma one needs a
generated client and is imported by the container when MESSAGE_STORE=prisma.
"""

from message_api.infrastructure.persistence.in_memory_message_repository import (
    InMemoryMessageRepository,
    InMemoryMessageStore,
)

__all__ = [
    "InMemoryMessageRepository",
    "InMemoryMessageStore",
]
