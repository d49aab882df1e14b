"""Dishka DI container."""

from message_api.setup.ioc.container import (
    AppProvider,
    InMemoryStorageProvider,
    create_container,
)

__all__ = [
    "AppProvider",
    "InMemoryStorageProvider",
    "create_container",
]
