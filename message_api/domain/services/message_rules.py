"""
Message field rules - pure validation shared by the create and update handlers.

Each check returns an error message (or None). Callers collect every failing
field into a ``dict[str, list[str]]`` so a client sees all problems at once.
"""

from typing import Optional

TITLE_MIN_LENGTH = 3
TITLE_MAX_LENGTH = 200
CONTENT_MIN_LENGTH = 10
CONTENT_MAX_LENGTH = 1000

ORGANIZATION_ID_REQUIRED = "OrganizationId is required"
MESSAGE_ID_REQUIRED = "MessageId is required"
IDS_REQUIRED = "OrganizationId and MessageId are required"
TITLE_LENGTH = f"Title must be between {TITLE_MIN_LENGTH} and {TITLE_MAX_LENGTH} characters"
CONTENT_LENGTH = (
    f"Content must be between {CONTENT_MIN_LENGTH} and {CONTENT_MAX_LENGTH} characters"
)
INACTIVE_UPDATE = "Inactive messages cannot be updated"
INACTIVE_DELETE = "Inactive messages cannot be deleted"
TITLE_NOT_UNIQUE = "Title must be unique per organization"
MESSAGE_NOT_FOUND = "Message not found"


def _has_length(value: Optional[str], min_length: int, max_length: int) -> bool:
    if value is None or not value.strip():
        return False
    return min_length <= len(value) <= max_length


def title_error(title: Optional[str]) -> Optional[str]:
    if _has_length(title, TITLE_MIN_LENGTH, TITLE_MAX_LENGTH):
        return None
    return TITLE_LENGTH


def content_error(content: Optional[str]) -> Optional[str]:
    if _has_length(content, CONTENT_MIN_LENGTH, CONTENT_MAX_LENGTH):
        return None
    return CONTENT_LENGTH


def field_errors(title: Optional[str], content: Optional[str]) -> dict[str, list[str]]:
    """Validate title and content independently; keys are the failing fields."""
    errors: dict[str, list[str]] = {}
    title_problem = title_error(title)
    if title_problem:
        errors.setdefault("title", []).append(title_problem)
    content_problem = content_error(content)
    if content_problem:
        errors.setdefault("content", []).append(content_problem)
    return errors
