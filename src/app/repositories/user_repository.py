from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import User


class IUserRepository(ABC):
    """User repository interface - application layer"""

    @abstractmethod
    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email address"""
        pass

    @abstractmethod
    async def get_by_handle(self, handle: str) -> Optional[User]:
        """Get user by normalized handle"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID"""
        pass

    @abstractmethod
    async def get_by_reset_token(
        self, token: str, not_expired_as_of: Optional[datetime] = None
    ) -> Optional[User]:
        """Get user holding an outstanding reset token, optionally only if still valid"""
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Insert or update a user, raising StoreFailure on constraint violation"""
        pass
