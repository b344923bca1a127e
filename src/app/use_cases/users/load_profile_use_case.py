from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ErrorCode
from .dtos import UserProfile
from .profile_mapping import to_user_profile


class LoadProfileUseCase:
    """Load the authenticated user's own profile"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, user_id: UUID) -> Result[UserProfile]:
        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User does not exist"))

            return Return.ok(to_user_profile(user))
