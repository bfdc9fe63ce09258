"""User profile repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Collection
from typing import Dict, Optional

from remark.domain.model.profile import UserProfile
from remark.domain.value import UserId


class UserProfileRepository(ABC):
    """Repository for the externally owned user profiles.

    Remark never writes profiles in production; save exists so that
    tests and seed scripts can populate the collection.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Find a profile by user ID."""
        pass

    @abstractmethod
    async def find_by_ids(
        self, user_ids: Collection[UserId]
    ) -> Dict[UserId, UserProfile]:
        """Find profiles for several users (batch query).

        Returns:
            Mapping of user ID to profile; unknown users are absent
        """
        pass

    @abstractmethod
    async def save(self, profile: UserProfile) -> UserProfile:
        """Insert or replace a profile."""
        pass
