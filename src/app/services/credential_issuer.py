from datetime import UTC, datetime, timedelta
from uuid import UUID

from jose import JWTError, jwt

from libs.result import Error, Result, Return
from src.domain.entities import ErrorCode


class CredentialIssuer:
    """
    Mints and verifies stateless session credentials (signed JWTs).

    The signing key is handed in once at startup and never changes for
    the life of the process, so the issuer is safe to share across
    concurrent requests.
    """

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_delta: timedelta = timedelta(days=180),
    ):
        self._secret = secret
        self.algorithm = algorithm
        self.expires_delta = expires_delta

    def issue_credential(self, user_id: UUID) -> str:
        """
        Generate a session credential for a user

        Args:
            user_id: User UUID, stored as the ``sub`` claim

        Returns:
            JWT token string
        """
        now = datetime.now(UTC)
        payload = {
            "sub": str(user_id),
            "iat": now,
            "exp": now + self.expires_delta,
        }
        return jwt.encode(payload, self._secret, algorithm=self.algorithm)

    def verify_credential(self, token: str) -> Result[str]:
        """
        Verify a session credential

        Args:
            token: JWT token string

        Returns:
            Result with the subject user id, or Error(INVALID_CREDENTIAL)
        """
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self.algorithm])
        except JWTError:
            return Return.err(
                Error(ErrorCode.INVALID_CREDENTIAL, "Invalid or expired token")
            )

        subject = payload.get("sub")
        if not subject:
            return Return.err(
                Error(ErrorCode.INVALID_CREDENTIAL, "Invalid or expired token")
            )
        return Return.ok(subject)
