"""PostgreSQL implementation of UserProfile repository."""

from collections.abc import Collection
from typing import Dict, Optional

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from remark.domain.model import UserProfile
from remark.domain.repository import UserProfileRepository
from remark.domain.value import UserId
from remark.persistence.mappers import profile_to_dict, row_to_profile
from remark.persistence.tables import user_profiles_table


class PostgresUserProfileRepository(UserProfileRepository):
    """PostgreSQL implementation of UserProfileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[UserProfile]:
        """Find a profile by user ID."""
        stmt = select(user_profiles_table).where(user_profiles_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_profile(row._asdict()) if row else None

    async def find_by_ids(
        self, user_ids: Collection[UserId]
    ) -> Dict[UserId, UserProfile]:
        """Find profiles for several users (batch query)."""
        if not user_ids:
            return {}
        stmt = select(user_profiles_table).where(
            user_profiles_table.c.id.in_(list(user_ids))
        )
        result = await self.session.execute(stmt)
        profiles = [row_to_profile(row._asdict()) for row in result.fetchall()]
        return {p.id: p for p in profiles}

    async def save(self, profile: UserProfile) -> UserProfile:
        """Insert or replace a profile."""
        values = profile_to_dict(profile)
        stmt = (
            insert(user_profiles_table)
            .values(**values)
            .on_conflict_do_update(
                index_elements=[user_profiles_table.c.id],
                set_={
                    "first_name": values["first_name"],
                    "last_name": values["last_name"],
                },
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return profile
