"""
Account Service Domain Enums

All enumeration types used across domain entities and use cases.
"""

from enum import Enum


class ResetState(str, Enum):
    """Password reset handshake state of a user record"""

    no_request = "no_request"
    pending_reset = "pending_reset"


class ErrorCode(str, Enum):
    """Closed set of failure kinds returned by use cases"""

    DUPLICATE_EMAIL = "DUPLICATE_EMAIL"
    DUPLICATE_HANDLE = "DUPLICATE_HANDLE"
    INVALID_HANDLE = "INVALID_HANDLE"
    INVALID_PASSWORD = "INVALID_PASSWORD"
    USER_NOT_FOUND = "USER_NOT_FOUND"
    INVALID_CREDENTIAL = "INVALID_CREDENTIAL"
    INVALID_OR_EXPIRED_TOKEN = "INVALID_OR_EXPIRED_TOKEN"
    HASHING_FAILURE = "HASHING_FAILURE"
    STORE_FAILURE = "STORE_FAILURE"
    MAIL_DELIVERY_FAILED = "MAIL_DELIVERY_FAILED"
