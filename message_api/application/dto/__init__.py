"""
DTOs - Data Transfer Objects

- message.py → MessageDTO

Note: These are different from domain entities.
DTOs are for API input/output, entities are for business logic.
"""

from message_api.application.dto.message import MessageDTO

__all__ = [
    "MessageDTO",
]
