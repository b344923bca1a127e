import logging

from libs.result import Error, Result, Return
from src.app.services.handles import check_handle
from src.app.services.password_hasher import BcryptPasswordHasher
from src.app.services.unit_of_work import StoreFailure, UnitOfWork
from src.domain.entities import ErrorCode, User
from .dtos import RegisterCommand, RegisteredUser, RegisterResponse
from .password_policy import validate_password

logger = logging.getLogger(__name__)


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[RegisterResponse] (structured response)

    Business Logic:
    1. Validate password length
    2. Reject if email already exists (DUPLICATE_EMAIL)
    3. Normalize handle; reject if empty or reserved (INVALID_HANDLE)
       or already taken (DUPLICATE_HANDLE)
    4. Hash password with bcrypt; the plaintext is never stored
    5. Persist user and commit
    """

    def __init__(self, uow: UnitOfWork, hasher: BcryptPasswordHasher):
        self.uow = uow
        self.hasher = hasher

    async def execute(self, command: RegisterCommand) -> Result[RegisterResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with email, handle, name, password

        Returns:
            Result[RegisterResponse] with the created user,
            or Error(DUPLICATE_EMAIL | DUPLICATE_HANDLE | INVALID_HANDLE |
            INVALID_PASSWORD | STORE_FAILURE)

        Raises:
            HashingFailure: bcrypt could not hash the password
        """
        password_validation = validate_password(command.password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(command.email)
            if existing_user:
                return Return.err(
                    Error(ErrorCode.DUPLICATE_EMAIL, "A user with that email is already registered")
                )

            handle_check = check_handle(command.handle)
            if handle_check.is_err():
                return Return.err(handle_check.error)
            handle = handle_check.value

            handle_owner = await self.uow.users.get_by_handle(handle)
            if handle_owner:
                return Return.err(
                    Error(ErrorCode.DUPLICATE_HANDLE, "Handle is not available")
                )

            user = User(
                email=command.email,
                handle=handle,
                name=command.name,
                password_hash=self.hasher.hash(command.password),
            )

            try:
                user = await self.uow.users.save(user)
                await self.uow.commit()
            except StoreFailure:
                logger.exception("Failed to persist new user")
                return Return.err(
                    Error(ErrorCode.STORE_FAILURE, "Could not create the account")
                )

            logger.info(f"User registered: {user.id}")

            return Return.ok(
                RegisterResponse(
                    user=RegisteredUser(
                        id=str(user.id),
                        email=user.email,
                        handle=user.handle,
                        name=user.name,
                    ),
                    message="Account created",
                )
            )
