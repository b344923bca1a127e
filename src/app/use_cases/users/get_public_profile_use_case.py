from libs.result import Error, Result, Return
from src.app.services.handles import normalize_handle
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ErrorCode
from .dtos import PublicProfile
from .profile_mapping import to_public_profile


class GetPublicProfileUseCase:
    """Look up a profile by handle for public display"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, handle: str) -> Result[PublicProfile]:
        async with self.uow:
            user = await self.uow.users.get_by_handle(normalize_handle(handle))
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User does not exist"))

            return Return.ok(to_public_profile(user))
