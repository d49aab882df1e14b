"""List Messages Query."""

from dataclasses import dataclass

from message_api.application.common.interfaces import Query, QueryHandler
from message_api.application.common.results import Created, Result, ValidationError
from message_api.domain.ports.repositories.message_repository import (
    MessageRepository,
)
from message_api.domain.services import message_rules
from message_api.domain.value_objects.organization_id import OrganizationId


@dataclass(frozen=True)
class ListMessagesQuery(Query[Result]):
    organization_id: OrganizationId


class ListMessagesHandler(QueryHandler[Result]):
    def __init__(self, message_repository: MessageRepository):
        self._message_repository = message_repository

    async def execute(self, query: ListMessagesQuery) -> Result:
        if not query.organization_id:
            return ValidationError.single(
                "organizationId", message_rules.ORGANIZATION_ID_REQUIRED
            )

        messages = await self._message_repository.get_all_by_organization(
            query.organization_id
        )
        return Created(messages)
