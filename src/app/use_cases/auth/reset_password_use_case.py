"""
Reset Password Use Case

Completes the password reset handshake with the token from the email.
"""

import logging
from datetime import datetime
from typing import Callable

from libs.result import Error, Result, Return
from src.app.services.password_hasher import BcryptPasswordHasher
from src.app.services.unit_of_work import StoreFailure, UnitOfWork
from src.domain import reset_handshake
from src.domain.base import utc_now
from src.domain.entities import ErrorCode
from .dtos import ResetPasswordResponse
from .password_policy import validate_password

logger = logging.getLogger(__name__)


class ResetPasswordUseCase:
    """
    Use case for consuming a password reset token.

    Business Rules:
    - Token must exactly match the stored token and not be expired
    - Any mismatch or expiry returns INVALID_OR_EXPIRED_TOKEN and writes nothing
    - New password is hashed with bcrypt
    - Password update and token clearing are saved in one commit,
      so the token cannot be used twice
    """

    def __init__(
        self,
        uow: UnitOfWork,
        hasher: BcryptPasswordHasher,
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.hasher = hasher
        self.clock = clock

    async def execute(self, token: str, new_password: str) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Args:
            token: Password reset token (plain text from email)
            new_password: New password to set

        Returns:
            Result with ResetPasswordResponse, or Error(INVALID_PASSWORD |
            INVALID_OR_EXPIRED_TOKEN | STORE_FAILURE)

        Raises:
            HashingFailure: bcrypt could not hash the new password
        """
        password_validation = validate_password(new_password)
        if password_validation.is_err():
            return Return.err(password_validation.error)

        invalid_token = Error(
            ErrorCode.INVALID_OR_EXPIRED_TOKEN, "Invalid or expired token"
        )

        async with self.uow:
            now = self.clock()
            user = await self.uow.users.get_by_reset_token(
                token, not_expired_as_of=now
            )
            if user is None or not reset_handshake.accepts(user, token, now):
                return Return.err(invalid_token)

            reset_handshake.complete(user, self.hasher.hash(new_password))

            try:
                await self.uow.users.save(user)
                await self.uow.commit()
            except StoreFailure:
                logger.exception("Failed to store new password")
                return Return.err(
                    Error(ErrorCode.STORE_FAILURE, "Could not reset the password")
                )

            logger.info(f"Password reset completed for user {user.id}")

            return Return.ok(
                ResetPasswordResponse(
                    status="success",
                    message="Password updated",
                )
            )
