"""
Unit tests for ResetPasswordUseCase and the full reset handshake
"""
from datetime import datetime, timedelta
from uuid import uuid4

import pytest

from src.app.services.unit_of_work import StoreFailure
from src.app.use_cases.auth import ForgotPasswordUseCase, ResetPasswordUseCase
from src.domain.entities import User

NOW = datetime(2025, 3, 1, 12, 0, 0)
TOKEN = "ab" * 32


@pytest.fixture
def user(hasher):
    return User(
        id=uuid4(),
        email="a@x.com",
        handle="alice",
        name="Alice",
        password_hash=hasher.hash("OldPass123!"),
    )


@pytest.fixture
def store(mock_uow, user):
    """Route lookups to a single in-memory user, matching on the stored token"""

    async def get_by_reset_token(token, not_expired_as_of=None):
        if token and token == user.reset_password_token:
            return user
        return None

    mock_uow.users.get_by_email.return_value = user
    mock_uow.users.get_by_reset_token.side_effect = get_by_reset_token
    return mock_uow


def reset_use_case(uow, hasher, now=NOW):
    return ResetPasswordUseCase(uow, hasher, clock=lambda: now)


def forgot_use_case(uow, mail_sender, now=NOW):
    return ForgotPasswordUseCase(
        uow, mail_sender, frontend_url="https://app.example.com", clock=lambda: now
    )


@pytest.mark.asyncio
async def test_successful_reset(store, hasher, user):
    user.reset_password_token = TOKEN
    user.reset_password_expires = NOW + timedelta(minutes=30)

    result = await reset_use_case(store, hasher).execute(TOKEN, "NewSecurePass123!")

    assert result.is_ok()
    assert result.value.status == "success"
    assert hasher.verify("NewSecurePass123!", user.password_hash)
    assert user.reset_password_token == ""
    assert user.reset_password_expires is None
    store.users.save.assert_called_once_with(user)
    store.commit.assert_called_once()


@pytest.mark.asyncio
async def test_reset_passes_clock_to_store_lookup(store, hasher, user):
    user.reset_password_token = TOKEN
    user.reset_password_expires = NOW + timedelta(minutes=30)

    await reset_use_case(store, hasher).execute(TOKEN, "NewSecurePass123!")

    store.users.get_by_reset_token.assert_called_once_with(TOKEN, not_expired_as_of=NOW)


@pytest.mark.asyncio
async def test_reset_with_expired_token(store, hasher, user):
    user.reset_password_token = TOKEN
    user.reset_password_expires = NOW - timedelta(milliseconds=1)
    old_hash = user.password_hash

    result = await reset_use_case(store, hasher).execute(TOKEN, "NewSecurePass123!")

    assert result.is_err()
    assert result.error.code == "INVALID_OR_EXPIRED_TOKEN"
    assert user.password_hash == old_hash
    assert user.reset_password_token == TOKEN
    store.users.save.assert_not_called()
    store.commit.assert_not_called()


@pytest.mark.asyncio
async def test_reset_at_exact_expiry_is_accepted(store, hasher, user):
    user.reset_password_token = TOKEN
    user.reset_password_expires = NOW

    result = await reset_use_case(store, hasher).execute(TOKEN, "NewSecurePass123!")

    assert result.is_ok()


@pytest.mark.asyncio
async def test_reset_with_empty_token_never_matches(store, hasher, user):
    result = await reset_use_case(store, hasher).execute("", "NewSecurePass123!")

    assert result.is_err()
    assert result.error.code == "INVALID_OR_EXPIRED_TOKEN"
    store.users.save.assert_not_called()


@pytest.mark.asyncio
async def test_reset_invalid_password_checked_first(store, hasher, user):
    user.reset_password_token = TOKEN
    user.reset_password_expires = NOW + timedelta(minutes=30)

    result = await reset_use_case(store, hasher).execute(TOKEN, "short")

    assert result.is_err()
    assert result.error.code == "INVALID_PASSWORD"
    assert user.reset_password_token == TOKEN
    store.users.get_by_reset_token.assert_not_called()


@pytest.mark.asyncio
async def test_reset_store_failure(store, hasher, user):
    user.reset_password_token = TOKEN
    user.reset_password_expires = NOW + timedelta(minutes=30)
    store.commit.side_effect = StoreFailure("disk I/O error")

    result = await reset_use_case(store, hasher).execute(TOKEN, "NewSecurePass123!")

    assert result.is_err()
    assert result.error.code == "STORE_FAILURE"


@pytest.mark.asyncio
async def test_handshake_wrong_token_then_success_then_replay(
    store, hasher, user, mock_mail_sender
):
    """forgot -> wrong token fails, state kept -> right token works -> replay fails"""
    await forgot_use_case(store, mock_mail_sender).execute("a@x.com")
    t1 = user.reset_password_token
    e1 = user.reset_password_expires

    wrong = await reset_use_case(store, hasher, now=NOW + timedelta(minutes=5)).execute(
        "0" * 64, "NewSecurePass123!"
    )
    assert wrong.is_err()
    assert wrong.error.code == "INVALID_OR_EXPIRED_TOKEN"
    assert user.reset_password_token == t1
    assert user.reset_password_expires == e1

    ok = await reset_use_case(store, hasher, now=NOW + timedelta(minutes=10)).execute(
        t1, "NewSecurePass123!"
    )
    assert ok.is_ok()
    assert user.reset_password_token == ""
    assert user.reset_password_expires is None

    replay = await reset_use_case(store, hasher, now=NOW + timedelta(minutes=11)).execute(
        t1, "AnotherPass123!"
    )
    assert replay.is_err()
    assert replay.error.code == "INVALID_OR_EXPIRED_TOKEN"
    assert hasher.verify("NewSecurePass123!", user.password_hash)


@pytest.mark.asyncio
async def test_handshake_second_request_invalidates_first_token(
    store, hasher, user, mock_mail_sender
):
    await forgot_use_case(store, mock_mail_sender).execute("a@x.com")
    t1 = user.reset_password_token
    await forgot_use_case(store, mock_mail_sender, now=NOW + timedelta(minutes=1)).execute(
        "a@x.com"
    )
    t2 = user.reset_password_token
    assert t1 != t2

    # T1's own hour has not elapsed, but it is no longer stored
    stale = await reset_use_case(store, hasher, now=NOW + timedelta(minutes=2)).execute(
        t1, "NewSecurePass123!"
    )
    assert stale.is_err()
    assert stale.error.code == "INVALID_OR_EXPIRED_TOKEN"

    fresh = await reset_use_case(store, hasher, now=NOW + timedelta(minutes=3)).execute(
        t2, "NewSecurePass123!"
    )
    assert fresh.is_ok()
