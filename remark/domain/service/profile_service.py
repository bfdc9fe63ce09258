"""User profile domain service."""

from collections.abc import Collection
from typing import Dict

from remark.domain.repository import UserProfileRepository
from remark.domain.value import UserId

from .base import Service


class ProfileService(Service):
    """Read access to the externally owned user profiles."""

    def __init__(self, profile_repository: UserProfileRepository) -> None:
        self.profile_repository = profile_repository

    async def get_full_names(self, user_ids: Collection[UserId]) -> Dict[UserId, str]:
        """Resolve "first last" display names in one batch.

        Users without a profile, or with blank names, map to "".
        """
        profiles = await self.profile_repository.find_by_ids(set(user_ids))
        return {
            uid: profiles[uid].full_name if uid in profiles else "" for uid in user_ids
        }
