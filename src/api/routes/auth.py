from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from config import ApplicationConfig
from libs.result import Error
from src.api.error import ClientError, to_http_error
from src.app.services.credential_issuer import CredentialIssuer
from src.app.services.mail_sender import IMailSender
from src.app.services.password_hasher import BcryptPasswordHasher
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    RegisterCommand,
    RegisterResponse,
    RegisterUseCase,
    LoginUseCase,
    LoginResponse,
    ForgotPasswordUseCase,
    ForgotPasswordResponse,
    ResetPasswordUseCase,
    ResetPasswordResponse,
)
from src.depends import (
    get_credential_issuer,
    get_mail_sender,
    get_password_hasher,
    get_unit_of_work,
)
from src.domain.entities import ErrorCode

router = APIRouter(prefix="/auth", tags=["Authentication"])

GENERIC_LOGIN_FAILURE = Error(ErrorCode.INVALID_CREDENTIAL, "Invalid email or password")
GENERIC_RESET_SENT = ForgotPasswordResponse(
    status="sent",
    message="If the email exists, a password reset link has been sent",
)


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    email: EmailStr = Field(..., description="User email address")
    handle: str = Field(..., min_length=1, max_length=64, description="Requested handle")
    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    password: str = Field(..., min_length=8, description="User password (min 8 chars)")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=RegisterResponse
)
async def register(
    request: RegisterRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
):
    """
    Register a new account

    Raises:
        - 409 Conflict: Email or handle already taken
        - 400 Bad Request: Handle empty after normalization, password too long
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Store or hashing failure
    """
    command = RegisterCommand(
        email=request.email,
        handle=request.handle,
        name=request.name,
        password=request.password,
    )

    use_case = RegisterUseCase(uow, hasher)
    result = await use_case.execute(command)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=LoginResponse)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
    issuer: CredentialIssuer = Depends(get_credential_issuer),
):
    """
    Authenticate and receive a bearer credential

    Raises:
        - 404 Not Found: Unknown email (401 when HIDE_ACCOUNT_EXISTENCE is set)
        - 401 Unauthorized: Wrong password
    """
    use_case = LoginUseCase(uow, hasher, issuer)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if ApplicationConfig.HIDE_ACCOUNT_EXISTENCE and error.code in (
            ErrorCode.USER_NOT_FOUND,
            ErrorCode.INVALID_CREDENTIAL,
        ):
            raise ClientError(GENERIC_LOGIN_FAILURE, status_code=status.HTTP_401_UNAUTHORIZED)
        raise to_http_error(error)

    return result.value


class ForgotPasswordRequest(BaseModel):
    """Forgot password HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=ForgotPasswordResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mail_sender: IMailSender = Depends(get_mail_sender),
):
    """
    Start a password reset

    Stores a 1-hour reset token on the account and emails a link to
    <FRONTEND_URL>/auth/reset-password/<token>.

    Raises:
        - 404 Not Found: Unknown email
        - 500 Internal Server Error: Store failure or email not delivered

    With HIDE_ACCOUNT_EXISTENCE set, unknown emails and failed deliveries
    both answer 200 with the generic body; the delivery failure is only
    logged. Unknown emails still return without an SMTP round trip, so
    response time can differ.
    """
    use_case = ForgotPasswordUseCase(
        uow,
        mail_sender,
        frontend_url=ApplicationConfig.FRONTEND_URL,
        app_name=ApplicationConfig.APP_NAME,
    )
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if ApplicationConfig.HIDE_ACCOUNT_EXISTENCE and error.code in (
            ErrorCode.USER_NOT_FOUND,
            ErrorCode.MAIL_DELIVERY_FAILED,
        ):
            return GENERIC_RESET_SENT
        raise to_http_error(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload; the token comes from the URL"""

    password: str = Field(..., min_length=8, description="New password (min 8 chars)")


@router.post(
    "/reset-password/{token}",
    status_code=status.HTTP_200_OK,
    response_model=ResetPasswordResponse,
)
async def reset_password(
    token: str,
    request: ResetPasswordRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    hasher: BcryptPasswordHasher = Depends(get_password_hasher),
):
    """
    Finish a password reset with the token from the email

    Raises:
        - 400 Bad Request: Invalid or expired token, password too long
        - 500 Internal Server Error: Store or hashing failure
    """
    use_case = ResetPasswordUseCase(uow, hasher)
    result = await use_case.execute(token, request.password)

    if result.is_err():
        raise to_http_error(result.error)

    return result.value
