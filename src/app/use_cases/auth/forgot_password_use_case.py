"""
Forgot Password Use Case

Starts the password reset handshake: issues a reset token, stores it on
the user record and mails a reset link.
"""

import logging
from datetime import datetime
from typing import Callable

from libs.result import Error, Result, Return
from src.app.services.mail_sender import IMailSender
from src.app.services.reset_tokens import generate_reset_token, generate_token_expiration
from src.app.services.unit_of_work import StoreFailure, UnitOfWork
from src.domain import reset_handshake
from src.domain.base import utc_now
from src.domain.entities import ErrorCode
from .dtos import ForgotPasswordResponse
from .reset_email import build_reset_email, build_reset_url

logger = logging.getLogger(__name__)


class ForgotPasswordUseCase:
    """
    Use case for requesting a password reset.

    Business Rules:
    - Unknown email returns USER_NOT_FOUND with no write and no email
    - Token is 32 random bytes, hex-encoded, valid for 1 hour
    - A new request overwrites any outstanding token
    - Token is committed before the email is sent; if delivery fails the
      token stays stored and MAIL_DELIVERY_FAILED is returned, so the
      user can simply ask again
    """

    def __init__(
        self,
        uow: UnitOfWork,
        mail_sender: IMailSender,
        frontend_url: str,
        app_name: str = "Linkea",
        clock: Callable[[], datetime] = utc_now,
    ):
        self.uow = uow
        self.mail_sender = mail_sender
        self.frontend_url = frontend_url
        self.app_name = app_name
        self.clock = clock

    async def execute(self, email: str) -> Result[ForgotPasswordResponse]:
        """
        Execute forgot password use case.

        Args:
            email: User's email address

        Returns:
            Result with ForgotPasswordResponse, or Error(USER_NOT_FOUND |
            STORE_FAILURE | MAIL_DELIVERY_FAILED)
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)
            if user is None:
                return Return.err(
                    Error(ErrorCode.USER_NOT_FOUND, "No user exists with that email")
                )

            reset_token = generate_reset_token()
            reset_handshake.begin(
                user, reset_token, generate_token_expiration(self.clock())
            )

            try:
                user = await self.uow.users.save(user)
                await self.uow.commit()
            except StoreFailure:
                logger.exception("Failed to store password reset token")
                return Return.err(
                    Error(ErrorCode.STORE_FAILURE, "Could not process the request")
                )

            logger.info(f"Password reset requested for user {user.id}")

            message = build_reset_email(
                to=user.email,
                name=user.name,
                reset_url=build_reset_url(self.frontend_url, reset_token),
                app_name=self.app_name,
            )

        sent = await self.mail_sender.send(message)
        if sent.is_err():
            logger.error(f"Password reset email not delivered: {sent.error}")
            return Return.err(sent.error)

        return Return.ok(
            ForgotPasswordResponse(
                status="sent",
                message="An email with instructions to reset your password has been sent",
            )
        )
