"""
Pytest configuration and shared fixtures.

Settings are read from the environment at import time, so test values are
set before any app module is imported.
"""

import os
import tempfile

os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(tempfile.gettempdir(), "messagely-test.db")
os.environ["TWILIO_ACCOUNT_SID"] = ""
os.environ["TWILIO_AUTH_TOKEN"] = ""
os.environ["TWILIO_PHONE_NUMBER"] = ""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.config import get_settings
from app.database import Base
from app.models import User
from app.repositories.messages import MessageRepository

get_settings.cache_clear()


def seed_users():
    return [
        User(username="alice", first_name="Alice", last_name="Anderson", phone="+15550001"),
        User(username="bob", first_name="Bob", last_name="Brown", phone="+15551234"),
    ]


class FakeSmsSender:
    """Records every send; raises ``error`` when given one."""

    def __init__(self, configured: bool = True, error: Exception = None):
        self.configured = configured
        self.error = error
        self.sent = []

    def is_configured(self) -> bool:
        return self.configured

    async def send_sms(self, to: str, body: str):
        self.sent.append({"to": to, "body": body})
        if self.error is not None:
            raise self.error
        return f"SM{len(self.sent):032d}"


class ListRecorder:
    def __init__(self):
        self.outcomes = []

    def record(self, outcome):
        self.outcomes.append(outcome)


@pytest.fixture
async def db():
    """Session on a fresh in-memory database seeded with alice and bob."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        session.add_all(seed_users())
        await session.commit()
        yield session

    await engine.dispose()


@pytest.fixture
def sms_sender():
    return FakeSmsSender()


@pytest.fixture
def recorder():
    return ListRecorder()


@pytest.fixture
def repo(db, sms_sender, recorder):
    return MessageRepository(db, sms_sender, recorder)
