import os
import uuid
from types import SimpleNamespace

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from tortoise import Tortoise

TEST_DB_URL = "sqlite://:memory:"
os.environ["DATABASE_URL"] = TEST_DB_URL

from bookshop.core import db as db_module
from bookshop.core.container import build_services
from bookshop.core.errors import StoreConflict
from bookshop.main import app

db_module.DB_URL = TEST_DB_URL
db_module.TORTOISE_ORM["connections"]["default"] = TEST_DB_URL


async def _init_test_db() -> None:
    """
    Initialize a clean in-memory SQLite database for every test.
    Ensures tables are recreated from scratch.
    """
    if Tortoise._inited:
        await Tortoise.close_connections()
    await Tortoise.init(config=db_module.TORTOISE_ORM)
    await Tortoise.generate_schemas()


@pytest_asyncio.fixture
async def db():
    """Fresh database for tests that use the real stores without HTTP."""
    await _init_test_db()
    yield
    await Tortoise.close_connections()


@pytest_asyncio.fixture
async def client(db):
    """
    Provide an HTTPX AsyncClient bound to the FastAPI app with a fresh DB.
    """
    app.state.services = build_services()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as async_client:
        yield async_client


@pytest_asyncio.fixture
async def signed_in(client):
    """
    Factory fixture: registers a user, signs in and returns (headers, email).
    """

    async def _signed_in(name: str = "Ana Silva", password: str = "secret1") -> tuple[dict[str, str], str]:
        email = f"user_{uuid.uuid4().hex[:6]}@mail.com"
        resp = await client.post("/sign-up", json={"name": name, "email": email, "password": password})
        assert resp.status_code == 201, resp.text
        resp = await client.post("/sign-in", json={"email": email, "password": password})
        assert resp.status_code == 200, resp.text
        return {"Authorization": f"Bearer {resp.json()['token']}"}, email

    return _signed_in


# ===== In-memory store doubles =====

class MemoryCredentialStore:
    def __init__(self):
        self.rows: list[SimpleNamespace] = []

    async def find_by_email(self, email):
        return next((u for u in self.rows if u.email == email), None)

    async def create(self, name, email, password_hash):
        if any(u.email == email for u in self.rows):
            raise StoreConflict("users.email")
        user = SimpleNamespace(id=uuid.uuid4(), name=name, email=email, password=password_hash)
        self.rows.append(user)
        return user


class MemorySessionStore:
    def __init__(self):
        self.rows: list[SimpleNamespace] = []

    async def find_by_token(self, token):
        return next((s for s in self.rows if s.token == token), None)

    async def find_by_user_id(self, user_id):
        return next((s for s in self.rows if s.user_id == user_id), None)

    async def create(self, token, user_id):
        if any(s.user_id == user_id or s.token == token for s in self.rows):
            raise StoreConflict("sessions")
        session = SimpleNamespace(id=uuid.uuid4(), token=token, user_id=user_id)
        self.rows.append(session)
        return session


class MemoryOrderStore:
    def __init__(self):
        self.rows: list[SimpleNamespace] = []

    async def create(self, user_id, date, items):
        order = SimpleNamespace(id=uuid.uuid4(), user_id=user_id, date=date, items=items)
        self.rows.append(order)
        return order

    async def list_by_user_id(self, user_id):
        return [o for o in self.rows if o.user_id == user_id]


@pytest.fixture
def user_store():
    return MemoryCredentialStore()


@pytest.fixture
def session_store():
    return MemorySessionStore()


@pytest.fixture
def order_store():
    return MemoryOrderStore()
