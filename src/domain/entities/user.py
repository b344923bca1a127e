"""
User Entity

The credential record of an account holder plus their public profile.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utc_now


class User(SQLModel, table=True):
    """
    User entity - account credentials and public profile.

    Business Rules:
    - Email must be unique across all users
    - Handle must be unique and is always stored normalized
    - Password stored as bcrypt hash, never as plaintext
    - reset_password_token is "" unless a reset request is outstanding;
      reset_password_token and reset_password_expires are set and
      cleared together
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(unique=True, index=True, max_length=255)
    handle: str = Field(unique=True, index=True, max_length=64)
    name: str = Field(max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    # Public profile
    description: str = Field(default="")
    image: str = Field(default="")
    links: str = Field(default="[]")  # JSON-encoded list

    # Password reset handshake
    reset_password_token: str = Field(default="", index=True, max_length=64)
    reset_password_expires: Optional[datetime] = Field(
        default=None, sa_column=Column(DateTime)
    )

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_user_reset_expires", "reset_password_expires"),)
