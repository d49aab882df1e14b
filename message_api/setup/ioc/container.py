"""
Dishka DI Container Setup.

Guidelines:
- Registers all dependencies (store, repository, handlers)
- Maps the abstract MessageRepository to a concrete implementation
- Manages lifecycle (Scope.APP = singleton, Scope.REQUEST = per request)

Providers:
- AppProvider: command/query handlers (need a MessageRepository)
- InMemoryStorageProvider: process-local store + repository (MESSAGE_STORE=memory)
- PrismaStorageProvider: Prisma client + repository (MESSAGE_STORE=prisma),
  see prisma_provider.py

Flow:
  Container → provides → InMemoryMessageRepository → to → CreateMessageHandler
                                    ↓
                            uses MessageRepository interface
"""

from typing import Optional

from dishka import AsyncContainer, Provider, Scope, make_async_container, provide

from message_api.application.commands.messages import (
    CreateMessageHandler,
    DeleteMessageHandler,
    UpdateMessageHandler,
)
from message_api.application.queries.messages import (
    GetMessageHandler,
    ListMessagesHandler,
)
from message_api.config.settings import Config
from message_api.domain.ports.repositories import MessageRepository
from message_api.infrastructure.persistence import (
    InMemoryMessageRepository,
    InMemoryMessageStore,
)


class InMemoryStorageProvider(Provider):
    """
    Process-local persistence.

    The store is app-scoped, so every request sees the same rows until the
    process exits. Pass a store in to share it with the caller (tests).
    """

    def __init__(self, store: Optional[InMemoryMessageStore] = None):
        super().__init__()
        self._store = store if store is not None else InMemoryMessageStore()

    @provide(scope=Scope.APP)
    def get_message_store(self) -> InMemoryMessageStore:
        return self._store

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, store: InMemoryMessageStore) -> MessageRepository:
        """
        Provide MessageRepository implementation.

        - Return type is ABSTRACT (MessageRepository)
        - Implementation is CONCRETE (InMemoryMessageRepository)
        """
        return InMemoryMessageRepository(store)


class AppProvider(Provider):
    """
    Application dependency provider.

    Registers the message handlers; the repository comes from whichever
    storage provider the container was built with.
    """

    # ==================== HANDLERS ====================

    @provide(scope=Scope.REQUEST)
    def get_list_messages_handler(
        self, message_repository: MessageRepository
    ) -> ListMessagesHandler:
        return ListMessagesHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_get_message_handler(
        self, message_repository: MessageRepository
    ) -> GetMessageHandler:
        return GetMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_create_message_handler(
        self, message_repository: MessageRepository
    ) -> CreateMessageHandler:
        """
        Provide CreateMessageHandler.

        - Parameter asks for MessageRepository (abstract)
        - Dishka resolves it from the storage provider
        """
        return CreateMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_update_message_handler(
        self, message_repository: MessageRepository
    ) -> UpdateMessageHandler:
        return UpdateMessageHandler(message_repository)

    @provide(scope=Scope.REQUEST)
    def get_delete_message_handler(
        self, message_repository: MessageRepository
    ) -> DeleteMessageHandler:
        return DeleteMessageHandler(message_repository)


def create_storage_provider(message_store: str = Config.MESSAGE_STORE) -> Provider:
    """Pick the persistence provider for MESSAGE_STORE ("memory" or "prisma")."""
    if message_store == "memory":
        return InMemoryStorageProvider()
    if message_store == "prisma":
        # Needs a generated Prisma client, so only imported when selected
        from message_api.setup.ioc.prisma_provider import PrismaStorageProvider

        return PrismaStorageProvider()
    raise ValueError(f"Unknown MESSAGE_STORE: {message_store}")


def create_container(storage_provider: Optional[Provider] = None) -> AsyncContainer:
    """
    Create and configure the DI container.

    - make_async_container() creates the container with all providers
    - Call this ONCE per app
    """
    if storage_provider is None:
        storage_provider = create_storage_provider()
    return make_async_container(AppProvider(), storage_provider)
