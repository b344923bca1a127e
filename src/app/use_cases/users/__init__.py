"""
User Use Cases

Profile management and handle lookups.
"""

from .load_profile_use_case import LoadProfileUseCase
from .update_profile_use_case import UpdateProfileUseCase
from .get_public_profile_use_case import GetPublicProfileUseCase
from .search_handle_use_case import SearchHandleUseCase
from .dtos import (
    UpdateProfileCommand,
    PublicProfile,
    UserProfile,
    HandleAvailability,
)

__all__ = [
    "LoadProfileUseCase",
    "UpdateProfileUseCase",
    "GetPublicProfileUseCase",
    "SearchHandleUseCase",
    "UpdateProfileCommand",
    "PublicProfile",
    "UserProfile",
    "HandleAvailability",
]
