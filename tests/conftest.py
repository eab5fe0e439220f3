"""
Noteful API — fixtures compartidas de pytest.

Cada test recibe una base Mongo en memoria (mongomock-motor) recién sembrada
con users/folders/tags/notes y la descarta al terminar, pase o falle.

Fixture Hierarchy (todas por test):
    db ─┬─ user ── token
        └─ client (httpx.AsyncClient contra la app ASGI, con `get_db` sobreescrito)
"""
import os

# Antes de importar la app: `settings` se construye al importar app.core.config
os.environ["JWT_SECRET"] = "test-secret-not-real"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["MONGO_DB"] = "noteful_test"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient

from app.api.deps import get_db
from app.core import rate_limit
from app.core.config import settings
from app.infrastructure.db.bootstrap import ensure_indexes
from app.infrastructure.db.seed_data import drop_seeded, seed_database
from app.main import app
from app.services.auth_service import issue_token


@pytest_asyncio.fixture
async def db():
    """Base aislada y sembrada; se borra siempre al final del test."""
    database = AsyncMongoMockClient()[settings.mongo_db]
    try:
        await ensure_indexes(database)
        await seed_database(database)
        yield database
    finally:
        await drop_seeded(database)


@pytest_asyncio.fixture
async def user(db):
    """Primer usuario semilla (bobuser)."""
    return await db["user"].find_one({"username": "bobuser"})


@pytest_asyncio.fixture
async def other_user(db):
    return await db["user"].find_one({"username": "janeuser"})


@pytest.fixture
def token(user):
    return issue_token(user, settings)["authToken"]


@pytest.fixture
def auth_headers(token):
    return {"Authorization": f"Bearer {token}"}


@pytest_asyncio.fixture
async def client(db):
    """HTTPX AsyncClient contra la app FastAPI usando la base de prueba."""
    app.dependency_overrides[get_db] = lambda: db
    rate_limit.reset()
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as c:
            yield c
    finally:
        app.dependency_overrides.clear()
        rate_limit.reset()
