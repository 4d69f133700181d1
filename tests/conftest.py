"""
Test configuration and fixtures.

Every test gets its own SQLite database file, the app's `get_db` dependency
is pointed at it, and outgoing email is captured instead of delivered.
"""
import os
import re
from typing import List

# Set test environment variables before importing the app
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_venuebook.db")
os.environ.setdefault("MAIL_BACKEND", "console")
os.environ.setdefault("SECRET_KEY", "test-secret-key-with-enough-length-for-hs256")
os.environ.setdefault("DEBUG", "false")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import func, select

from venuebook.core.database import build_engine, build_sessionmaker, get_db, init_db
from venuebook.main import app
from venuebook.services.mailer import MailMessage, mailer

API = "/api/v1"
PASSWORD = "secret123"


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Engine bound to a fresh database file."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_sessionmaker(engine)


@pytest.fixture(autouse=True)
def outbox(monkeypatch) -> List[MailMessage]:
    """Collect every message the mailer would send."""
    sent: List[MailMessage] = []

    async def capture(message: MailMessage):
        sent.append(message)

    monkeypatch.setattr(mailer, "send", capture)
    return sent


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client talking to the app in-process."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


def extract_otp(message: MailMessage) -> int:
    """Pull the six digit code out of an OTP email."""
    match = re.search(r"\b(\d{6})\b", message.text_content)
    assert match, "no OTP code in email"
    return int(match.group(1))


@pytest.fixture
def create_account(client, outbox):
    """Factory registering an account and returning bearer auth headers."""

    async def _create(email: str, role: str = "user", verify: bool = True, name: str = "Tester"):
        res = await client.post(
            f"{API}/register",
            json={"name": name, "email": email, "password": PASSWORD, "role": role},
        )
        assert res.status_code == 201, res.text

        if verify:
            res = await client.post(
                f"{API}/verifikasi-otp",
                json={"email": email, "otp_code": extract_otp(outbox[-1])},
            )
            assert res.status_code == 200, res.text

        res = await client.post(f"{API}/login", json={"email": email, "password": PASSWORD})
        assert res.status_code == 200, res.text
        return {"Authorization": f"Bearer {res.json()['data']['token']}"}

    return _create


@pytest_asyncio.fixture
async def owner_headers(create_account):
    return await create_account("owner@example.com", role="owner")


@pytest_asyncio.fixture
async def player_headers(create_account):
    return await create_account("player@example.com", role="user")


@pytest.fixture
def count_rows(session_factory):
    """Count the rows of a model's table."""

    async def _count(model) -> int:
        async with session_factory() as session:
            result = await session.execute(select(func.count()).select_from(model))
            return result.scalar_one()

    return _count


@pytest_asyncio.fixture
async def venue(client, owner_headers):
    """A venue owned by the default owner."""
    res = await client.post(
        f"{API}/venues",
        json={"name": "Arena", "phone": "08123456789", "address": "Jl. Merdeka 1"},
        headers=owner_headers,
    )
    assert res.status_code == 201, res.text
    return res.json()["data"]


@pytest_asyncio.fixture
async def field(client, owner_headers, venue):
    """A futsal field inside the default venue."""
    res = await client.post(
        f"{API}/venues/{venue['id']}/fields",
        json={"name": "Court A", "type": "futsal"},
        headers=owner_headers,
    )
    assert res.status_code == 201, res.text
    return res.json()["data"]
