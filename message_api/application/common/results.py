"""
Result variants returned by every message handler.

The set is closed: Created, Updated, Deleted, NotFound, Conflict and
ValidationError. Handlers return one of them instead of raising, and the
presentation layer maps each variant to an HTTP response.
"""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")


class Result:
    """Base class of all handler outcomes."""

    @property
    def name(self) -> str:
        return type(self).__name__


@dataclass(frozen=True)
class Created(Result, Generic[T]):
    """Operation produced or returned entity data."""

    value: T


@dataclass(frozen=True)
class Updated(Result):
    pass


@dataclass(frozen=True)
class Deleted(Result):
    pass


@dataclass(frozen=True)
class NotFound(Result):
    message: str


@dataclass(frozen=True)
class Conflict(Result):
    message: str


@dataclass(frozen=True)
class ValidationError(Result):
    """Field name → list of error messages."""

    errors: dict[str, list[str]] = field(default_factory=dict)

    @classmethod
    def single(cls, key: str, message: str) -> "ValidationError":
        return cls({key: [message]})
