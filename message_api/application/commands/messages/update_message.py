"""
Update Message Command.

Order of checks:
1. Identifiers, title and content (all errors collected together)
2. Message exists in the organization
3. Message is still active
4. No other message in the organization uses the new title
"""

import logging
from dataclasses import dataclass
from typing import Optional

from message_api.application.common.interfaces import Command, CommandHandler
from message_api.application.common.results import (
    Conflict,
    NotFound,
    Result,
    Updated,
    ValidationError,
)
from message_api.domain.ports.repositories import MessageRepository
from message_api.domain.services import message_rules
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpdateMessageCommand(Command[Result]):
    organization_id: OrganizationId
    message_id: MessageId
    title: Optional[str]
    content: Optional[str]
    is_active: bool = True


class UpdateMessageHandler(CommandHandler[Result]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: UpdateMessageCommand) -> Result:
        errors: dict[str, list[str]] = {}
        if not command.organization_id:
            errors["organizationId"] = [message_rules.ORGANIZATION_ID_REQUIRED]
        if not command.message_id:
            errors["id"] = [message_rules.MESSAGE_ID_REQUIRED]
        errors.update(message_rules.field_errors(command.title, command.content))

        if errors:
            logger.info(f"[UpdateMessage] Rejected input: {sorted(errors)}")
            return ValidationError(errors)

        message = await self._message_repository.get_by_id(
            command.organization_id, command.message_id
        )
        if message is None:
            return NotFound(message_rules.MESSAGE_NOT_FOUND)

        if not message.is_active:
            logger.info(
                f"[UpdateMessage] Message {command.message_id.value} is inactive"
            )
            return ValidationError.single("isActive", message_rules.INACTIVE_UPDATE)

        same_title = await self._message_repository.get_by_title(
            command.organization_id, command.title
        )
        if same_title is not None and same_title.id != command.message_id:
            return Conflict(message_rules.TITLE_NOT_UNIQUE)

        message.apply_update(
            title=command.title,
            content=command.content,
            is_active=command.is_active,
        )
        await self._message_repository.update(message)
        logger.info(f"[UpdateMessage] Updated message {message.id.value}")
        return Updated()
