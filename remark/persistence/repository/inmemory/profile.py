"""In-memory user profile repository for testing."""

from collections.abc import Collection
from typing import Optional

from remark.domain.model.profile import UserProfile
from remark.domain.repository.profile import UserProfileRepository
from remark.domain.value import UserId


class InMemoryUserProfileRepository(UserProfileRepository):
    """In-memory implementation of UserProfileRepository for testing."""

    def __init__(self) -> None:
        self._profiles: dict[UserId, UserProfile] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        return self._profiles.get(user_id)

    async def find_by_ids(
        self, user_ids: Collection[UserId]
    ) -> dict[UserId, UserProfile]:
        return {uid: self._profiles[uid] for uid in user_ids if uid in self._profiles}

    async def save(self, profile: UserProfile) -> UserProfile:
        self._profiles[profile.id] = profile
        return profile
