"""
Shared fixtures: a file-backed SQLite store and an ASGI test client.
"""

import httpx
import pytest
import pytest_asyncio

from config.settings import Settings
from database.session import Database
from main import create_app


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'credentials.db'}",
        bcrypt_rounds=4,
        debug=False,
    )


@pytest_asyncio.fixture
async def database(settings):
    db = Database(settings)
    await db.create_tables()
    yield db
    await db.dispose()


@pytest_asyncio.fixture
async def session(database):
    async with database.session_factory() as s:
        yield s


@pytest_asyncio.fixture
async def client(settings, database):
    app = create_app(settings, database=database)
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://test") as c:
        yield c
