import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from libs.result import Return
from tests.fixtures.json_loader import TestDataLoader
from src.depends import get_mail_sender, get_password_hasher, get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.mail_sender import IMailSender, MailMessage
from src.app.services.password_hasher import BcryptPasswordHasher


class RecordingMailSender(IMailSender):
    """Collects messages instead of delivering them"""

    def __init__(self):
        self.outbox: list[MailMessage] = []
        self.fail_with = None

    async def send(self, message: MailMessage):
        if self.fail_with is not None:
            return Return.err(self.fail_with)
        self.outbox.append(message)
        return Return.ok(None)


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
def mail_sender():
    return RecordingMailSender()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, mail_sender):
    from httpx import ASGITransport
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    fast_hasher = BcryptPasswordHasher(rounds=4)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_mail_sender] = lambda: mail_sender
    app.dependency_overrides[get_password_hasher] = lambda: fast_hasher

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
