import json

from src.domain.entities import User
from .dtos import PublicProfile, UserProfile


def _decode_links(raw: str) -> list:
    links = json.loads(raw or "[]")
    return links if isinstance(links, list) else []


def to_public_profile(user: User) -> PublicProfile:
    return PublicProfile(
        handle=user.handle,
        name=user.name,
        description=user.description,
        image=user.image,
        links=_decode_links(user.links),
    )


def to_user_profile(user: User) -> UserProfile:
    return UserProfile(
        id=str(user.id),
        email=user.email,
        **to_public_profile(user).model_dump(),
    )
