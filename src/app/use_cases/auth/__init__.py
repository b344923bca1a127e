"""
Authentication Use Cases

All authentication-related business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .forgot_password_use_case import ForgotPasswordUseCase
from .reset_password_use_case import ResetPasswordUseCase
from .dtos import (
    RegisterCommand,
    RegisterResponse,
    RegisteredUser,
    LoginResponse,
    ForgotPasswordResponse,
    ResetPasswordResponse,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "ForgotPasswordUseCase",
    "ResetPasswordUseCase",
    # DTOs - Commands
    "RegisterCommand",
    # DTOs - Responses
    "RegisterResponse",
    "LoginResponse",
    "ForgotPasswordResponse",
    "ResetPasswordResponse",
    # DTOs - Nested Models
    "RegisteredUser",
]
