from libs.result import Error, Result, Return
from src.app.services.password_hasher import password_too_long
from src.domain.entities import ErrorCode

MIN_PASSWORD_LENGTH = 8


def validate_password(password: str) -> Result[None]:
    """
    Validate a new password before it is hashed.

    Returns:
        Result with None if valid, or Error(INVALID_PASSWORD)
    """
    if len(password) < MIN_PASSWORD_LENGTH:
        return Return.err(
            Error(
                ErrorCode.INVALID_PASSWORD,
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters long",
            )
        )

    if password_too_long(password):
        return Return.err(
            Error(ErrorCode.INVALID_PASSWORD, "Password must be at most 72 bytes long")
        )

    return Return.ok(None)
