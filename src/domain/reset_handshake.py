"""
Password reset handshake state machine.

A user record is in one of two states:

- ``no_request``: reset_password_token is empty
- ``pending_reset``: a token and its expiry are stored on the record

``begin`` moves any state to ``pending_reset`` and overwrites an older
token, so only the most recently issued token can ever be accepted.
``complete`` moves ``pending_reset`` back to ``no_request``. An expired
token is never swept; it just stops being accepted.

Store writes are last-writer-wins: a forgot-password racing a
reset-password for the same user may overwrite one another.
"""

import secrets
from datetime import datetime

from src.app.services.reset_tokens import is_token_expired
from src.domain.entities import ResetState, User


def reset_state(user: User) -> ResetState:
    if user.reset_password_token:
        return ResetState.pending_reset
    return ResetState.no_request


def begin(user: User, token: str, expires_at: datetime) -> None:
    user.reset_password_token = token
    user.reset_password_expires = expires_at


def accepts(user: User, token: str, now: datetime) -> bool:
    """True if ``token`` matches the outstanding request and has not expired."""
    if not token or reset_state(user) is not ResetState.pending_reset:
        return False
    if user.reset_password_expires is None:
        return False
    if not secrets.compare_digest(
        user.reset_password_token.encode(), token.encode()
    ):
        return False
    return not is_token_expired(user.reset_password_expires, now)


def complete(user: User, password_hash: str) -> None:
    """Set the new password and clear the request in one mutation."""
    user.password_hash = password_hash
    user.reset_password_token = ""
    user.reset_password_expires = None
