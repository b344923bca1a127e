from unittest.mock import AsyncMock, MagicMock

import pytest

from libs.result import Return
from src.app.services.password_hasher import BcryptPasswordHasher



@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with the user repository"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.users = MagicMock()
    uow.users.get_by_email = AsyncMock(return_value=None)
    uow.users.get_by_handle = AsyncMock(return_value=None)
    uow.users.get_by_id = AsyncMock(return_value=None)
    uow.users.get_by_reset_token = AsyncMock(return_value=None)
    uow.users.save = AsyncMock(side_effect=lambda user: user)
    return uow


@pytest.fixture
def mock_mail_sender():
    sender = MagicMock()
    sender.send = AsyncMock(return_value=Return.ok(None))
    return sender


@pytest.fixture
def hasher():
    # Minimum bcrypt cost keeps the suite fast
    return BcryptPasswordHasher(rounds=4)
