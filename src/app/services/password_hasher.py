"""
Secret Hasher

bcrypt hashing with a fresh salt per call. ``bcrypt.checkpw`` compares
the full digest in constant time, so verification cost does not depend
on where a mismatch occurs.
"""

import logging
import bcrypt

logger = logging.getLogger(__name__)

# bcrypt refuses inputs longer than this
MAX_PASSWORD_BYTES = 72


class HashingFailure(Exception):
    """bcrypt could not produce a hash; the request must not continue."""


def password_too_long(plaintext: str) -> bool:
    return len(plaintext.encode("utf-8")) > MAX_PASSWORD_BYTES


class BcryptPasswordHasher:
    def __init__(self, rounds: int = 12):
        self.rounds = rounds
        # stands in for the stored hash when the account does not exist
        self._dummy_hash = self.hash("dummy_password")

    def hash(self, plaintext: str) -> str:
        try:
            hashed = bcrypt.hashpw(plaintext.encode("utf-8"), bcrypt.gensalt(self.rounds))
        except (ValueError, TypeError) as exc:
            raise HashingFailure("Password hashing failed") from exc
        return hashed.decode("utf-8")

    def verify(self, plaintext: str, hashed: str) -> bool:
        if password_too_long(plaintext):
            return False
        try:
            return bcrypt.checkpw(plaintext.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            logger.warning("Stored password hash is malformed")
            return False

    def verify_dummy(self, plaintext: str) -> None:
        """Burn one verification at the configured cost when there is no stored hash."""
        self.verify(plaintext, self._dummy_hash)
