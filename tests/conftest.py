import os
import sys
import uuid

import pytest

# Add project root to path
sys.path.insert(0, os.path.abspath(os.path.dirname(__file__) + '/..'))

from fastapi.testclient import TestClient
from message_api.fastapi_app import create_fastapi_app
from message_api.infrastructure.persistence import (
    InMemoryMessageRepository,
    InMemoryMessageStore,
)
from message_api.setup.ioc.container import InMemoryStorageProvider, create_container
from message_api.domain.entities.message import Message
from message_api.domain.value_objects.organization_id import OrganizationId

VALID_CONTENT = "This is valid content with enough length"


@pytest.fixture()
def store():
    """Empty in-memory message store shared by the app and the test."""
    return InMemoryMessageStore()


@pytest.fixture()
def repository(store):
    return InMemoryMessageRepository(store)


@pytest.fixture()
def organization_id():
    return OrganizationId(str(uuid.uuid4()))


@pytest.fixture()
def app(store):
    """Create a FastAPI app backed by the test's in-memory store."""
    container = create_container(InMemoryStorageProvider(store))
    return create_fastapi_app(container)


@pytest.fixture()
def client(app):
    """A test client for the FastAPI app (runs lifespan startup/shutdown)."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def seed(store):
    """Put a message straight into the store, bypassing the handlers."""

    def _seed(
        organization_id: OrganizationId,
        title: str = "Seeded Title",
        content: str = VALID_CONTENT,
        is_active: bool = True,
    ) -> Message:
        message = Message.create(
            organization_id=organization_id, title=title, content=content
        )
        message.is_active = is_active
        store.rows[message.id.value] = message
        return message

    return _seed
