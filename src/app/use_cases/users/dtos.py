"""
User Use Case DTOs

Profile commands and responses.
"""

from typing import List

from pydantic import BaseModel


class UpdateProfileCommand(BaseModel):
    """Profile fields the owner may change; ``handle`` is the raw requested handle"""

    handle: str
    description: str = ""
    links: List[dict] = []


class PublicProfile(BaseModel):
    """Profile as shown to anyone; no id, email or password"""

    handle: str
    name: str
    description: str
    image: str
    links: List[dict]


class UserProfile(PublicProfile):
    """Profile as shown to its owner"""

    id: str
    email: str


class HandleAvailability(BaseModel):
    """Response for handle search"""

    handle: str
    available: bool
    message: str
