from libs.result import Error, Result, Return
from src.app.services.handles import check_handle
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ErrorCode
from .dtos import HandleAvailability


class SearchHandleUseCase:
    """Check whether a handle is free to register"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, handle: str) -> Result[HandleAvailability]:
        handle_check = check_handle(handle)
        if handle_check.is_err():
            return Return.err(handle_check.error)
        normalized = handle_check.value

        async with self.uow:
            if await self.uow.users.get_by_handle(normalized):
                return Return.err(
                    Error(ErrorCode.DUPLICATE_HANDLE, f"{normalized} is already registered")
                )

            return Return.ok(
                HandleAvailability(
                    handle=normalized,
                    available=True,
                    message=f"{normalized} is available",
                )
            )
