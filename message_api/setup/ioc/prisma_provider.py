"""
Prisma storage provider.

Run `prisma generate` (schema in prisma/schema.prisma) before selecting
MESSAGE_STORE=prisma; importing this module needs the generated client.
"""

import logging
from typing import AsyncIterable

from dishka import Provider, Scope, provide
from prisma import Prisma

from message_api.config.settings import Config
from message_api.domain.ports.repositories import MessageRepository
from message_api.infrastructure.persistence.prisma_message_repository import (
    PrismaMessageRepository,
)

logger = logging.getLogger(__name__)


class PrismaStorageProvider(Provider):
    @provide(scope=Scope.APP)
    async def get_prisma(self) -> AsyncIterable[Prisma]:
        """
        Provide Prisma client (singleton, app-scoped).

        - Scope.APP = created ONCE, shared across all requests
        - Disconnected when the container closes on shutdown
        """
        if Config.DATABASE_URL:
            prisma = Prisma(datasource={"url": Config.DATABASE_URL})
        else:
            prisma = Prisma()
        await prisma.connect()
        logger.info("Prisma client connected")
        yield prisma
        await prisma.disconnect()
        logger.info("Prisma client disconnected")

    @provide(scope=Scope.REQUEST)
    def get_message_repository(self, prisma: Prisma) -> MessageRepository:
        return PrismaMessageRepository(prisma)
