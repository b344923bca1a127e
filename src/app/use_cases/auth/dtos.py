"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - represents validated registration intent

    Created by API layer after request validation passes.
    ``handle`` is the raw requested handle; the use case normalizes it.
    """

    email: str
    handle: str
    name: str
    password: str


# ============================================================================
# Response DTOs
# ============================================================================


class RegisteredUser(BaseModel):
    """User information in register response"""

    id: str
    email: str
    handle: str
    name: str


class RegisterResponse(BaseModel):
    """Response for register use case"""

    user: RegisteredUser
    message: str


class LoginResponse(BaseModel):
    """Response for login use case"""

    access_token: str
    token_type: str = "bearer"


class ForgotPasswordResponse(BaseModel):
    """Response for forgot password use case"""

    status: str
    message: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    status: str
    message: str
