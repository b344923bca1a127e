"""
Use Cases

Organized into domain folders:
- auth/: registration, login and the password reset handshake
- users/: profile management
"""

from .auth import (
    RegisterUseCase,
    RegisterCommand,
    LoginUseCase,
    ForgotPasswordUseCase,
    ResetPasswordUseCase,
)
from .users import (
    LoadProfileUseCase,
    UpdateProfileUseCase,
    GetPublicProfileUseCase,
    SearchHandleUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "LoginUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # Users
    "LoadProfileUseCase",
    "UpdateProfileUseCase",
    "GetPublicProfileUseCase",
    "SearchHandleUseCase",
]
