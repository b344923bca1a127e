from datetime import timedelta
from uuid import UUID

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.smtp_mail_sender import SmtpMailSender
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.credential_issuer import CredentialIssuer
from src.app.services.mail_sender import IMailSender
from src.app.services.password_hasher import BcryptPasswordHasher

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer()

# Process-wide, configured once at startup
password_hasher = BcryptPasswordHasher(rounds=ApplicationConfig.PASSWORD_HASH_ROUNDS)
credential_issuer = CredentialIssuer(
    secret=ApplicationConfig.JWT_SECRET,
    algorithm=ApplicationConfig.JWT_ALGORITHM,
    expires_delta=timedelta(days=ApplicationConfig.JWT_EXPIRE_DAYS),
)
mail_sender = SmtpMailSender(
    host=ApplicationConfig.SMTP_HOST,
    port=ApplicationConfig.SMTP_PORT,
    sender=ApplicationConfig.EMAIL_FROM,
    username=ApplicationConfig.SMTP_USER,
    password=ApplicationConfig.SMTP_PASSWORD,
    use_tls=ApplicationConfig.SMTP_USE_TLS,
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_password_hasher() -> BcryptPasswordHasher:
    return password_hasher


def get_credential_issuer() -> CredentialIssuer:
    return credential_issuer


def get_mail_sender() -> IMailSender:
    return mail_sender


async def get_current_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    issuer: CredentialIssuer = Depends(get_credential_issuer),
) -> UUID:
    """
    Dependency to extract and verify the session credential from the
    Authorization header.

    Args:
        credentials: Bearer token from Authorization header
        issuer: Credential issuer holding the signing key

    Returns:
        Id of the authenticated user (the credential subject)

    Raises:
        HTTPException: 401 if token is invalid or expired
    """
    result = issuer.verify_credential(credentials.credentials)
    if result.is_err():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )

    try:
        return UUID(result.value)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
        )
