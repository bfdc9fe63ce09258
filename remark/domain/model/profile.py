"""User profile entity.

Profiles are owned by an external user system. Remark only reads them
to render display names next to comments and reports.
"""

from pydantic import Field

from remark.domain.model.common import DomainModel
from remark.domain.value import UserId


class UserProfile(DomainModel):
    """Read-only view of an externally owned user."""

    id: UserId
    first_name: str = Field(default="", max_length=255)
    last_name: str = Field(default="", max_length=255)

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
