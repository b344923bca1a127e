"""
Password reset token generation and expiry arithmetic.

Tokens come from the OS CSPRNG via ``secrets``; nothing here is seeded
from time or counters. Callers pass ``now`` explicitly so the clock can
be frozen in tests.
"""

import secrets
from datetime import datetime, timedelta

RESET_TOKEN_BYTES = 32
RESET_TOKEN_TTL = timedelta(hours=1)


def generate_reset_token() -> str:
    """Return 32 random bytes hex-encoded (64 characters)."""
    return secrets.token_hex(RESET_TOKEN_BYTES)


def generate_token_expiration(now: datetime) -> datetime:
    return now + RESET_TOKEN_TTL


def is_token_expired(expiration: datetime, now: datetime) -> bool:
    """A token expiring exactly at ``now`` is still valid for that instant."""
    return now > expiration
