from fastapi import status
from libs.result import Error

from src.domain.entities import ErrorCode

# Codes the caller can act on; anything else is reported as a server error
CLIENT_ERROR_STATUS = {
    ErrorCode.DUPLICATE_EMAIL: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_HANDLE: status.HTTP_409_CONFLICT,
    ErrorCode.INVALID_HANDLE: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_PASSWORD: status.HTTP_400_BAD_REQUEST,
    ErrorCode.USER_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.INVALID_CREDENTIAL: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.INVALID_OR_EXPIRED_TOKEN: status.HTTP_400_BAD_REQUEST,
}


class ClientError(Exception):
    def __init__(self, base_error: Error, status_code: int = status.HTTP_400_BAD_REQUEST):
        self.base_error = base_error
        self.status_code = status_code
        super().__init__(base_error.message)


class ServerError(Exception):
    def __init__(self, base_error: Error):
        self.base_error = base_error
        super().__init__(base_error.message)


def to_http_error(error: Error) -> Exception:
    """Pick ClientError with the mapped status, or ServerError for unmapped codes."""
    status_code = CLIENT_ERROR_STATUS.get(error.code)
    if status_code is None:
        return ServerError(error)
    return ClientError(error, status_code=status_code)
