from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.user_repository import IUserRepository
from src.app.services.unit_of_work import StoreFailure
from src.domain.entities import User


class UserRepository(IUserRepository):
    """User repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        stmt = select(User).where(User.email == email)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_handle(self, handle: str) -> Optional[User]:
        """Get user by normalized handle"""
        stmt = select(User).where(User.handle == handle)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def get_by_reset_token(
        self, token: str, not_expired_as_of: Optional[datetime] = None
    ) -> Optional[User]:
        """Get user holding an outstanding reset token"""
        if not token:
            return None
        stmt = select(User).where(User.reset_password_token == token)
        if not_expired_as_of is not None:
            stmt = stmt.where(User.reset_password_expires >= not_expired_as_of)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def save(self, user: User) -> User:
        """Insert or update a user"""
        self.session.add(user)
        try:
            await self.session.flush()
        except SQLAlchemyError as exc:
            raise StoreFailure("Failed to save user") from exc
        await self.session.refresh(user)
        return user
