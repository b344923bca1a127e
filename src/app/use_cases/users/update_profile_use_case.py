import json
import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.handles import check_handle
from src.app.services.unit_of_work import StoreFailure, UnitOfWork
from src.domain.entities import ErrorCode
from .dtos import UpdateProfileCommand, UserProfile
from .profile_mapping import to_user_profile

logger = logging.getLogger(__name__)


class UpdateProfileUseCase:
    """
    Update handle, description and links of the authenticated user.

    Business Rules:
    - Handle is normalized the same way as on registration
    - Keeping one's own handle is allowed; taking another user's is not
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, user_id: UUID, command: UpdateProfileCommand
    ) -> Result[UserProfile]:
        handle_check = check_handle(command.handle)
        if handle_check.is_err():
            return Return.err(handle_check.error)
        handle = handle_check.value

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error(ErrorCode.USER_NOT_FOUND, "User does not exist"))

            handle_owner = await self.uow.users.get_by_handle(handle)
            if handle_owner and handle_owner.id != user.id:
                return Return.err(
                    Error(ErrorCode.DUPLICATE_HANDLE, "Handle is not available")
                )

            user.handle = handle
            user.description = command.description
            user.links = json.dumps(command.links)

            try:
                user = await self.uow.users.save(user)
                await self.uow.commit()
            except StoreFailure:
                logger.exception("Failed to update profile")
                return Return.err(
                    Error(ErrorCode.STORE_FAILURE, "Could not update the profile")
                )

            return Return.ok(to_user_profile(user))
