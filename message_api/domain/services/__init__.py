"""Domain services - pure business rules, no I/O."""

from message_api.domain.services import message_rules

__all__ = [
    "message_rules",
]
