"""
GetMessage Query - Fetch a single message of an organization.

Inactive messages are returned like any other; only writes are gated.
"""

from dataclasses import dataclass

from message_api.application.common.interfaces import Query, QueryHandler
from message_api.application.common.results import (
    Created,
    NotFound,
    Result,
    ValidationError,
)
from message_api.domain.ports.repositories import MessageRepository
from message_api.domain.services import message_rules
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId


@dataclass(frozen=True)
class GetMessageQuery(Query[Result]):
    organization_id: OrganizationId
    message_id: MessageId


class GetMessageHandler(QueryHandler[Result]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: GetMessageQuery) -> Result:
        if not query.organization_id or not query.message_id:
            return ValidationError.single("id", message_rules.IDS_REQUIRED)

        message = await self._message_repository.get_by_id(
            query.organization_id, query.message_id
        )
        if message is None:
            return NotFound(message_rules.MESSAGE_NOT_FOUND)

        return Created(message)
