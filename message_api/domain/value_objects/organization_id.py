"""
OrganizationId Value Object - UUID wrapper for the owning organization.
"""

from dataclasses import dataclass
from uuid import UUID

NIL_UUID = "00000000-0000-0000-0000-000000000000"


@dataclass(frozen=True)
class OrganizationId:
    value: str  # organization_id, presented as UUID string (nil UUID or "" = not provided)

    def __post_init__(self):
        if self.value and not self._is_valid_uuid(self.value):
            raise ValueError(f"Invalid organization ID (UUID): {self.value}")

    def _is_valid_uuid(self, value: str) -> bool:
        """Check if string is a valid UUID."""
        try:
            UUID(value)
            return True
        except ValueError:
            return False

    def __str__(self) -> str:
        return self.value

    def __bool__(self) -> bool:
        """Return False for the empty identifier (empty string or nil UUID)."""
        return bool(self.value) and str(UUID(self.value)) != NIL_UUID
