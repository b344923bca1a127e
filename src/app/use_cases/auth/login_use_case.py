"""
Login Use Case

Authenticates a user by email and password and issues a session credential.
"""

from libs.result import Error, Result, Return
from src.app.services.credential_issuer import CredentialIssuer
from src.app.services.password_hasher import BcryptPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import ErrorCode
from .dtos import LoginResponse


class LoginUseCase:
    """
    Use case for user login and credential issuance.

    Business Rules:
    - Constant-time password comparison to prevent timing attacks
    - A bcrypt check runs even when the email is unknown
    - USER_NOT_FOUND and INVALID_CREDENTIAL are reported separately;
      the API layer may collapse them (HIDE_ACCOUNT_EXISTENCE)
    - Credential subject is the user id
    """

    def __init__(
        self, uow: UnitOfWork, hasher: BcryptPasswordHasher, issuer: CredentialIssuer
    ):
        self.uow = uow
        self.hasher = hasher
        self.issuer = issuer

    async def execute(self, email: str, password: str) -> Result[LoginResponse]:
        """
        Execute login use case.

        Args:
            email: User email
            password: Plain text password

        Returns:
            Result with LoginResponse containing the access token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(email)

            if user is None:
                self.hasher.verify_dummy(password)
                return Return.err(
                    Error(ErrorCode.USER_NOT_FOUND, "User does not exist")
                )

            if not self.hasher.verify(password, user.password_hash):
                return Return.err(
                    Error(ErrorCode.INVALID_CREDENTIAL, "Incorrect password")
                )

            access_token = self.issuer.issue_credential(user.id)

            return Return.ok(LoginResponse(access_token=access_token))
