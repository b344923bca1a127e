import re

from slugify import slugify

from libs.result import Error, Result, Return
from src.domain.entities import ErrorCode

_NON_SLUG_CHARS = re.compile(r"[^a-z0-9]")

# First path segments already served by the API; a handle equal to one of
# these could never be reached through GET /{handle}
RESERVED_HANDLES = frozenset({"auth", "user", "search", "docs", "redoc", "openapijson"})


def normalize_handle(raw: str) -> str:
    """
    Reduce a requested handle to its stored form.

    Characters are transliterated to ASCII, the result is lower-cased, and
    every character outside ``[a-z0-9]`` (spaces and separators included)
    is dropped: ``"Álice Smith"`` -> ``"alicesmith"``, ``"Алиса"`` -> ``"alisa"``.
    """
    return _NON_SLUG_CHARS.sub("", slugify(raw, separator=""))


def check_handle(raw: str) -> Result[str]:
    """
    Normalize a handle a user wants to claim.

    Returns:
        Result with the normalized handle, or Error(INVALID_HANDLE) if it is
        empty after normalization or collides with a route name
    """
    handle = normalize_handle(raw)
    if not handle:
        return Return.err(
            Error(ErrorCode.INVALID_HANDLE, "Handle must contain letters or digits")
        )
    if handle in RESERVED_HANDLES:
        return Return.err(Error(ErrorCode.INVALID_HANDLE, f"{handle} is reserved"))
    return Return.ok(handle)
