"""Delete Message Command."""

import logging
from dataclasses import dataclass

from message_api.application.common.interfaces import Command, CommandHandler
from message_api.application.common.results import (
    Deleted,
    NotFound,
    Result,
    ValidationError,
)
from message_api.domain.ports.repositories import MessageRepository
from message_api.domain.services import message_rules
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DeleteMessageCommand(Command[Result]):
    organization_id: OrganizationId
    message_id: MessageId


class DeleteMessageHandler(CommandHandler[Result]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: DeleteMessageCommand) -> Result:
        message = await self._message_repository.get_by_id(
            command.organization_id, command.message_id
        )
        if message is None:
            return NotFound(message_rules.MESSAGE_NOT_FOUND)

        if not message.is_active:
            return ValidationError.single("isActive", message_rules.INACTIVE_DELETE)

        deleted = await self._message_repository.delete(
            command.organization_id, command.message_id
        )
        if deleted:
            logger.info(f"[DeleteMessage] Deleted message {command.message_id.value}")
        else:
            # Row vanished between lookup and delete
            logger.warning(
                f"[DeleteMessage] Message {command.message_id.value} was already gone"
            )
        return Deleted()
