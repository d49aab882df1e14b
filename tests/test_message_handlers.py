"""
Unit tests for the message command/query handlers.

Run with: pytest tests/test_message_handlers.py -v
"""

import uuid
from unittest.mock import AsyncMock

import pytest

from message_api.application.commands.messages import (
    CreateMessageCommand,
    CreateMessageHandler,
    DeleteMessageCommand,
    DeleteMessageHandler,
    UpdateMessageCommand,
    UpdateMessageHandler,
)
from message_api.application.common.results import (
    Conflict,
    Created,
    Deleted,
    NotFound,
    Updated,
    ValidationError,
)
from message_api.application.queries.messages import (
    GetMessageHandler,
    GetMessageQuery,
    ListMessagesHandler,
    ListMessagesQuery,
)
from message_api.domain.entities.message import Message
from message_api.domain.ports.repositories import MessageRepository
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import NIL_UUID, OrganizationId

VALID_CONTENT = "This is valid content with enough length"
EMPTY_ORG = OrganizationId(NIL_UUID)


@pytest.fixture()
def repository_mock():
    """MessageRepository mock with no rows: every lookup misses."""
    mock = AsyncMock(spec=MessageRepository)
    mock.get_by_id.return_value = None
    mock.get_by_title.return_value = None
    mock.get_all_by_organization.return_value = []
    mock.create.side_effect = lambda message: message
    mock.delete.return_value = True
    return mock


def _message(organization_id, title="Existing", is_active=True):
    message = Message.create(
        organization_id=organization_id, title=title, content=VALID_CONTENT
    )
    message.is_active = is_active
    return message


def _update(organization_id, message_id, title="Valid Title", is_active=True):
    return UpdateMessageCommand(
        organization_id=organization_id,
        message_id=message_id,
        title=title,
        content=VALID_CONTENT,
        is_active=is_active,
    )


class TestCreateMessage:
    """CreateMessageHandler behaviour."""

    @pytest.mark.asyncio
    async def test_success_returns_created(self, repository_mock, organization_id):
        """A valid request with an unused title is persisted and returned."""
        handler = CreateMessageHandler(repository_mock)

        result = await handler.execute(
            CreateMessageCommand(organization_id, "Valid Title", VALID_CONTENT)
        )

        assert isinstance(result, Created)
        assert isinstance(result.value, Message)
        assert result.value.is_active is True
        assert result.value.id
        assert result.value.organization_id == organization_id
        assert result.value.updated_at is None
        repository_mock.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_duplicate_title_returns_conflict(
        self, repository_mock, organization_id
    ):
        """A title already used in the organization is rejected."""
        repository_mock.get_by_title.return_value = _message(organization_id, "Duplicate")
        handler = CreateMessageHandler(repository_mock)

        result = await handler.execute(
            CreateMessageCommand(organization_id, "Duplicate", VALID_CONTENT)
        )

        assert result == Conflict("Title must be unique per organization")
        repository_mock.get_by_title.assert_awaited_once_with(organization_id, "Duplicate")
        repository_mock.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_short_content_returns_validation_error(
        self, repository_mock, organization_id
    ):
        """Content under 10 characters is reported under "content"."""
        handler = CreateMessageHandler(repository_mock)

        result = await handler.execute(
            CreateMessageCommand(organization_id, "Valid Title", "Short")
        )

        assert isinstance(result, ValidationError)
        assert result.errors == {
            "content": ["Content must be between 10 and 1000 characters"]
        }
        repository_mock.get_by_title.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_all_violations_are_collected(self, repository_mock):
        """Organization, title and content errors come back together."""
        handler = CreateMessageHandler(repository_mock)

        result = await handler.execute(CreateMessageCommand(EMPTY_ORG, "  ", None))

        assert isinstance(result, ValidationError)
        assert set(result.errors) == {"organizationId", "title", "content"}
        assert result.errors["organizationId"] == ["OrganizationId is required"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["", "   ", "ab", "x" * 201])
    async def test_invalid_title(self, repository_mock, organization_id, title):
        """Blank, too short or too long titles are reported under "title"."""
        handler = CreateMessageHandler(repository_mock)

        result = await handler.execute(
            CreateMessageCommand(organization_id, title, VALID_CONTENT)
        )

        assert isinstance(result, ValidationError)
        assert list(result.errors) == ["title"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("title", ["abc", "x" * 200])
    async def test_title_bounds_are_inclusive(
        self, repository_mock, organization_id, title
    ):
        """Titles of exactly 3 and 200 characters are accepted."""
        handler = CreateMessageHandler(repository_mock)

        result = await handler.execute(
            CreateMessageCommand(organization_id, title, VALID_CONTENT)
        )

        assert isinstance(result, Created)

    @pytest.mark.asyncio
    async def test_conflict_ignores_content_and_active_state(
        self, repository_mock, organization_id
    ):
        """An inactive message still blocks its title."""
        repository_mock.get_by_title.return_value = _message(
            organization_id, "Archived", is_active=False
        )
        handler = CreateMessageHandler(repository_mock)

        result = await handler.execute(
            CreateMessageCommand(organization_id, "Archived", "Completely different body")
        )

        assert isinstance(result, Conflict)


class TestUpdateMessage:
    """UpdateMessageHandler behaviour."""

    @pytest.mark.asyncio
    async def test_non_existent_returns_not_found(self, repository_mock, organization_id):
        """Updating a missing message returns NotFound."""
        handler = UpdateMessageHandler(repository_mock)

        result = await handler.execute(_update(organization_id, MessageId.generate()))

        assert result == NotFound("Message not found")
        repository_mock.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inactive_message_returns_validation_error(
        self, repository_mock, organization_id
    ):
        """Inactive messages cannot be updated."""
        existing = _message(organization_id, is_active=False)
        repository_mock.get_by_id.return_value = existing
        handler = UpdateMessageHandler(repository_mock)

        result = await handler.execute(_update(organization_id, existing.id))

        assert result == ValidationError(
            {"isActive": ["Inactive messages cannot be updated"]}
        )
        repository_mock.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_title_of_other_message_returns_conflict(
        self, repository_mock, organization_id
    ):
        """Taking another message's title is a conflict."""
        existing = _message(organization_id, "Mine")
        repository_mock.get_by_id.return_value = existing
        repository_mock.get_by_title.return_value = _message(organization_id, "Theirs")
        handler = UpdateMessageHandler(repository_mock)

        result = await handler.execute(_update(organization_id, existing.id, "Theirs"))

        assert isinstance(result, Conflict)
        repository_mock.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_keeping_own_title_is_not_a_conflict(
        self, repository_mock, organization_id
    ):
        """The title lookup finding the message itself is fine."""
        existing = _message(organization_id, "Mine")
        repository_mock.get_by_id.return_value = existing
        repository_mock.get_by_title.return_value = existing
        handler = UpdateMessageHandler(repository_mock)

        result = await handler.execute(_update(organization_id, existing.id, "Mine"))

        assert result == Updated()

    @pytest.mark.asyncio
    async def test_success_applies_fields_and_sets_updated_at(
        self, repository_mock, organization_id
    ):
        """Title, content and active flag are written with a fresh updated_at."""
        existing = _message(organization_id, "Before")
        repository_mock.get_by_id.return_value = existing
        handler = UpdateMessageHandler(repository_mock)

        result = await handler.execute(
            _update(organization_id, existing.id, "After", is_active=False)
        )

        assert isinstance(result, Updated)
        saved = repository_mock.update.await_args.args[0]
        assert saved.id == existing.id
        assert saved.organization_id == organization_id
        assert saved.title == "After"
        assert saved.is_active is False
        assert saved.updated_at is not None

    @pytest.mark.asyncio
    async def test_all_violations_are_collected(self, repository_mock):
        """Empty ids plus bad fields are all reported before any lookup."""
        handler = UpdateMessageHandler(repository_mock)

        result = await handler.execute(
            UpdateMessageCommand(
                organization_id=EMPTY_ORG,
                message_id=MessageId(""),
                title="ab",
                content="short",
            )
        )

        assert isinstance(result, ValidationError)
        assert result.errors == {
            "organizationId": ["OrganizationId is required"],
            "id": ["MessageId is required"],
            "title": ["Title must be between 3 and 200 characters"],
            "content": ["Content must be between 10 and 1000 characters"],
        }
        repository_mock.get_by_id.assert_not_awaited()


class TestDeleteMessage:
    """DeleteMessageHandler behaviour."""

    @pytest.mark.asyncio
    async def test_non_existent_returns_not_found(self, repository_mock, organization_id):
        """Deleting a missing message returns NotFound."""
        handler = DeleteMessageHandler(repository_mock)

        result = await handler.execute(
            DeleteMessageCommand(organization_id, MessageId.generate())
        )

        assert result == NotFound("Message not found")
        repository_mock.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_inactive_message_returns_validation_error(
        self, repository_mock, organization_id
    ):
        """Inactive messages cannot be deleted."""
        existing = _message(organization_id, is_active=False)
        repository_mock.get_by_id.return_value = existing
        handler = DeleteMessageHandler(repository_mock)

        result = await handler.execute(DeleteMessageCommand(organization_id, existing.id))

        assert result == ValidationError(
            {"isActive": ["Inactive messages cannot be deleted"]}
        )
        repository_mock.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_active_message_is_deleted(self, repository_mock, organization_id):
        """An active message is removed through the repository."""
        existing = _message(organization_id)
        repository_mock.get_by_id.return_value = existing
        handler = DeleteMessageHandler(repository_mock)

        result = await handler.execute(DeleteMessageCommand(organization_id, existing.id))

        assert result == Deleted()
        repository_mock.delete.assert_awaited_once_with(organization_id, existing.id)


class TestQueries:
    """ListMessagesHandler and GetMessageHandler behaviour."""

    @pytest.mark.asyncio
    async def test_list_requires_organization(self, repository_mock):
        """The nil organization id is rejected."""
        result = await ListMessagesHandler(repository_mock).execute(
            ListMessagesQuery(EMPTY_ORG)
        )

        assert result == ValidationError(
            {"organizationId": ["OrganizationId is required"]}
        )
        repository_mock.get_all_by_organization.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_list_returns_repository_rows(self, repository_mock, organization_id):
        """Messages of the organization come back wrapped in Created."""
        rows = [_message(organization_id, "One"), _message(organization_id, "Two")]
        repository_mock.get_all_by_organization.return_value = rows

        result = await ListMessagesHandler(repository_mock).execute(
            ListMessagesQuery(organization_id)
        )

        assert result == Created(rows)

    @pytest.mark.asyncio
    async def test_get_requires_both_ids(self, repository_mock, organization_id):
        """A nil message id is reported under "id"."""
        result = await GetMessageHandler(repository_mock).execute(
            GetMessageQuery(organization_id, MessageId(str(uuid.UUID(int=0))))
        )

        assert result == ValidationError(
            {"id": ["OrganizationId and MessageId are required"]}
        )

    @pytest.mark.asyncio
    async def test_get_missing_returns_not_found(self, repository_mock, organization_id):
        """An unknown id returns NotFound."""
        result = await GetMessageHandler(repository_mock).execute(
            GetMessageQuery(organization_id, MessageId.generate())
        )

        assert result == NotFound("Message not found")

    @pytest.mark.asyncio
    async def test_get_returns_inactive_message(self, repository_mock, organization_id):
        """Inactive messages stay readable."""
        existing = _message(organization_id, is_active=False)
        repository_mock.get_by_id.return_value = existing

        result = await GetMessageHandler(repository_mock).execute(
            GetMessageQuery(organization_id, existing.id)
        )

        assert result == Created(existing)
