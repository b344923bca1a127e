"""
Account Service Domain Entities

All domain entities organized by model.
"""

from .enums import ErrorCode, ResetState
from .user import User

__all__ = [
    # Enums
    "ErrorCode",
    "ResetState",
    # Entities
    "User",
]
