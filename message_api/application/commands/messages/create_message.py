"""
Create Message Command.

Validates organization, title and content together, rejects a title already
used in the organization, then persists a new active message.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from message_api.application.common.interfaces import Command, CommandHandler
from message_api.application.common.results import (
    Conflict,
    Created,
    Result,
    ValidationError,
)
from message_api.domain.entities.message import Message
from message_api.domain.ports.repositories import MessageRepository
from message_api.domain.services import message_rules
from message_api.domain.value_objects.organization_id import OrganizationId

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CreateMessageCommand(Command[Result]):
    organization_id: OrganizationId
    title: Optional[str]
    content: Optional[str]


class CreateMessageHandler(CommandHandler[Result]):
    _message_repository: MessageRepository

    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, command: CreateMessageCommand) -> Result:
        errors: dict[str, list[str]] = {}
        if not command.organization_id:
            errors["organizationId"] = [message_rules.ORGANIZATION_ID_REQUIRED]
        errors.update(message_rules.field_errors(command.title, command.content))

        if errors:
            logger.info(f"[CreateMessage] Rejected input: {sorted(errors)}")
            return ValidationError(errors)

        existing = await self._message_repository.get_by_title(
            command.organization_id, command.title
        )
        if existing is not None:
            logger.info(
                f"[CreateMessage] Title already used in organization "
                f"{command.organization_id.value}"
            )
            return Conflict(message_rules.TITLE_NOT_UNIQUE)

        message = Message.create(
            organization_id=command.organization_id,
            title=command.title,
            content=command.content,
        )
        created = await self._message_repository.create(message)
        logger.info(
            f"[CreateMessage] Created message {created.id.value} "
            f"in organization {created.organization_id.value}"
        )
        return Created(created)
