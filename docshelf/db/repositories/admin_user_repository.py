"""
Admin User Repository

Lookups used by the admin login flow.
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from docshelf.db.repositories.base import BaseRepository
from docshelf.models.admin_user import AdminUser


class AdminUserRepository(BaseRepository[AdminUser]):
    """Repository for AdminUser database operations."""

    def __init__(self, session: AsyncSession) -> None:
        super().__init__(AdminUser, session)

    async def get_by_email(self, email: str) -> AdminUser | None:
        """
        Get an admin by email, case-insensitively.

        SQL Generated:
            SELECT * FROM admin_users WHERE lower(email) = lower('Editor@Example.com')
        """
        result = await self.session.execute(
            select(AdminUser).where(func.lower(AdminUser.email) == email.lower())
        )
        return result.scalar_one_or_none()
