"""
Integration tests for starting a password reset
"""
import re
from datetime import timedelta

import pytest
from httpx import AsyncClient
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.domain.base import utc_now
from src.domain.entities import User

RESET_LINK = re.compile(r"/auth/reset-password/([0-9a-f]{64})")


async def load_user(db_session: AsyncSession, email: str) -> User:
    result = await db_session.exec(select(User).where(User.email == email))
    user = result.one()
    await db_session.refresh(user)
    return user


@pytest.mark.asyncio
async def test_forgot_password_sends_reset_link(
    client: AsyncClient, db_session: AsyncSession, mail_sender, test_data
):
    await client.post("/auth/register", json=test_data.user("alice"))

    before = utc_now()
    response = await client.post("/auth/forgot-password", json={"email": "a@x.com"})

    assert response.status_code == 200
    assert response.json()["status"] == "sent"

    user = await load_user(db_session, "a@x.com")
    assert len(user.reset_password_token) == 64
    remaining = user.reset_password_expires - before
    assert timedelta(minutes=59) < remaining <= timedelta(hours=1, seconds=5)

    assert len(mail_sender.outbox) == 1
    message = mail_sender.outbox[0]
    assert message.to == "a@x.com"
    expected_link = (
        f"{ApplicationConfig.FRONTEND_URL}/auth/reset-password/{user.reset_password_token}"
    )
    assert expected_link in message.html_body
    assert RESET_LINK.search(message.html_body).group(1) == user.reset_password_token


@pytest.mark.asyncio
async def test_forgot_password_unknown_email(
    client: AsyncClient, db_session: AsyncSession, mail_sender
):
    response = await client.post("/auth/forgot-password", json={"email": "nobody@x.com"})

    assert response.status_code == 404
    assert response.json()["error"]["code"] == "USER_NOT_FOUND"
    assert mail_sender.outbox == []

    result = await db_session.exec(select(User))
    assert result.all() == []


@pytest.mark.asyncio
async def test_forgot_password_unknown_email_hidden(
    client: AsyncClient, mail_sender, test_data, monkeypatch
):
    monkeypatch.setattr(ApplicationConfig, "HIDE_ACCOUNT_EXISTENCE", True)
    await client.post("/auth/register", json=test_data.user("alice"))

    known = await client.post("/auth/forgot-password", json={"email": "a@x.com"})
    unknown = await client.post("/auth/forgot-password", json={"email": "nobody@x.com"})

    assert known.status_code == unknown.status_code == 200
    assert unknown.json()["status"] == "sent"
    assert len(mail_sender.outbox) == 1


@pytest.mark.asyncio
async def test_forgot_password_mail_failure(
    client: AsyncClient, db_session: AsyncSession, mail_sender, test_data
):
    await client.post("/auth/register", json=test_data.user("alice"))
    mail_sender.fail_with = Error("MAIL_DELIVERY_FAILED", "Email could not be delivered")

    response = await client.post("/auth/forgot-password", json={"email": "a@x.com"})

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "MAIL_DELIVERY_FAILED"

    # Token stays stored; asking again replaces it
    first_token = (await load_user(db_session, "a@x.com")).reset_password_token
    assert first_token != ""

    mail_sender.fail_with = None
    retry = await client.post("/auth/forgot-password", json={"email": "a@x.com"})
    assert retry.status_code == 200
    assert (await load_user(db_session, "a@x.com")).reset_password_token != first_token


@pytest.mark.asyncio
async def test_forgot_password_mail_failure_hidden(
    client: AsyncClient, mail_sender, test_data, monkeypatch
):
    """A failed delivery looks the same as an unknown email"""
    monkeypatch.setattr(ApplicationConfig, "HIDE_ACCOUNT_EXISTENCE", True)
    await client.post("/auth/register", json=test_data.user("alice"))
    mail_sender.fail_with = Error("MAIL_DELIVERY_FAILED", "Email could not be delivered")

    known = await client.post("/auth/forgot-password", json={"email": "a@x.com"})
    unknown = await client.post("/auth/forgot-password", json={"email": "nobody@x.com"})

    assert known.status_code == unknown.status_code == 200
    assert known.json() == unknown.json()
    assert known.json()["status"] == "sent"
