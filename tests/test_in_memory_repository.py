"""
Tests for InMemoryMessageRepository.

Run with: pytest tests/test_in_memory_repository.py -v
"""

import uuid

import pytest

from message_api.domain.entities.message import Message
from message_api.domain.value_objects.message_id import MessageId
from message_api.domain.value_objects.organization_id import OrganizationId

VALID_CONTENT = "This is valid content with enough length"


def _new(organization_id, title):
    return Message.create(
        organization_id=organization_id, title=title, content=VALID_CONTENT
    )


class TestInMemoryMessageRepository:
    @pytest.mark.asyncio
    async def test_lookups_are_scoped_to_organization(self, repository, organization_id):
        """Another organization's message is invisible by id, title and listing."""
        other_org = OrganizationId(str(uuid.uuid4()))
        theirs = await repository.create(_new(other_org, "Shared Title"))

        assert await repository.get_by_id(organization_id, theirs.id) is None
        assert await repository.get_by_title(organization_id, "Shared Title") is None
        assert await repository.get_all_by_organization(organization_id) == []
        assert await repository.delete(organization_id, theirs.id) is False

    @pytest.mark.asyncio
    async def test_listing_keeps_creation_order(self, repository, organization_id):
        for title in ["First", "Second", "Third"]:
            await repository.create(_new(organization_id, title))

        messages = await repository.get_all_by_organization(organization_id)

        assert [m.title for m in messages] == ["First", "Second", "Third"]

    @pytest.mark.asyncio
    async def test_reads_return_copies(self, repository, organization_id):
        """Mutating a fetched entity does not touch the stored row."""
        created = await repository.create(_new(organization_id, "Original"))

        fetched = await repository.get_by_id(organization_id, created.id)
        fetched.title = "Changed locally"

        stored = await repository.get_by_id(organization_id, created.id)
        assert stored.title == "Original"

    @pytest.mark.asyncio
    async def test_update_and_delete(self, repository, organization_id):
        created = await repository.create(_new(organization_id, "Before"))
        created.apply_update("After", VALID_CONTENT, is_active=True)

        await repository.update(created)
        assert (await repository.get_by_title(organization_id, "After")).id == created.id

        assert await repository.delete(organization_id, created.id) is True
        assert await repository.get_by_id(organization_id, created.id) is None
        assert await repository.delete(organization_id, MessageId.generate()) is False
