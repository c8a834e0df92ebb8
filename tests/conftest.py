"""
Shared fixtures for the Leaflings API test suite.

Provides:
- A fresh in-memory SQLite database per test, with every table created
- The FastAPI application wired to that database through ``get_db_session``
- An httpx AsyncClient speaking ASGI to the application
- A fake PayPal API behind httpx.MockTransport
- Registered admin/user accounts with bearer headers
- Factories for catalog plants and a tiny PNG upload

Usage:
    async def test_example(client, admin):
        response = await client.get("/api/admin", headers=admin.headers)
        assert response.status_code == 200
"""

import io
import os
import tempfile
from dataclasses import dataclass
from typing import Any, AsyncIterator, Dict, List, Tuple

# Settings are cached on first use, so the environment is prepared before any app import
os.environ.update({
    "ENVIRONMENT": "test",
    "DEBUG": "false",
    "LOG_LEVEL": "WARNING",
    "LOG_FORMAT": "text",
    "DATABASE_URL": "sqlite+aiosqlite://",
    "DB_CREATE_TABLES": "false",
    "JWT_SECRET_KEY": "leaflings-test-secret-key-with-enough-length",
    "BCRYPT_ROUNDS": "4",
    "LOGIN_RATE_LIMIT": "1000/minute",
    "IMAGES_DIR": tempfile.mkdtemp(prefix="leaflings-images-"),
    "PAYPAL_CLIENT_ID": "test-client",
    "PAYPAL_CLIENT_SECRET": "test-secret",
    "PAYPAL_BASE_URL": "https://paypal.test",
    "PAYPAL_RETRY_ATTEMPTS": "1",
})

import httpx  # noqa: E402
import pytest  # noqa: E402
from PIL import Image  # noqa: E402
from sqlalchemy import update  # noqa: E402
from sqlalchemy.ext.asyncio import create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.main import create_application  # noqa: E402
from app.modules.user_management.infrastructure.database.models import UserModel  # noqa: E402
from app.shared.core.rate_limiter import limiter  # noqa: E402
from app.shared.infrastructure.database.connection import (  # noqa: E402
    Base,
    import_all_models,
    register_sqlite_pragmas,
)
from app.shared.infrastructure.database.session import DatabaseSessionManager, get_db_session  # noqa: E402
from app.shared.infrastructure.external_apis.paypal_client import PayPalClient, get_paypal_client  # noqa: E402

PAYPAL_TEST_URL = "https://paypal.test"
DEFAULT_PASSWORD = "secret123"


@dataclass
class Account:
    """A registered person and the bearer header to act as them."""
    id: int
    email: str
    token: str

    @property
    def headers(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.token}"}


# ========================== Database Fixtures ==============================


@pytest.fixture()
async def engine():
    """In-memory SQLite engine with all tables; one per test."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    register_sqlite_pragmas(test_engine)
    import_all_models()
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield test_engine
    await test_engine.dispose()


@pytest.fixture()
def session_manager(engine) -> DatabaseSessionManager:
    """Session manager bound to the test engine; ``get_session()`` commits on exit."""
    manager = DatabaseSessionManager()
    manager.initialize(engine)
    return manager


async def set_role_paid(session_manager: DatabaseSessionManager, user_id: int, role_paid: bool = True) -> None:
    async with session_manager.get_session() as session:
        await session.execute(update(UserModel).where(UserModel.id == user_id).values(role_paid=role_paid))


# ========================== Application Fixtures ===========================


class FakePayPal:
    """
    In-process stand-in for the PayPal REST API, served through ``httpx.MockTransport``.

    Routes map ``(method, path)`` to queued outcomes: ``(status, body)`` tuples or
    exceptions to raise. The last outcome of a route repeats.
    """

    def __init__(self):
        self.routes: Dict[Tuple[str, str], List[Any]] = {}
        self.requests: List[httpx.Request] = []
        self.on("POST", "/v1/oauth2/token", (200, {"access_token": "A21-token", "expires_in": 32400}))

    def on(self, method: str, path: str, *outcomes: Any) -> None:
        self.routes[(method, path)] = list(outcomes)

    def requests_to(self, path: str) -> List[httpx.Request]:
        return [request for request in self.requests if request.url.path == path]

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        outcomes = self.routes.get((request.method, request.url.path))
        if not outcomes:
            return httpx.Response(404, json={"name": "RESOURCE_NOT_FOUND"})
        outcome = outcomes.pop(0) if len(outcomes) > 1 else outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        status_code, body = outcome
        return httpx.Response(status_code, json=body)

    def client(self, retry_attempts: int = 1) -> PayPalClient:
        return PayPalClient(
            client_id="test-client",
            client_secret="test-secret",
            base_url=PAYPAL_TEST_URL,
            currency="EUR",
            retry_attempts=retry_attempts,
            http_client=httpx.AsyncClient(transport=httpx.MockTransport(self)),
        )


@pytest.fixture()
def fake_paypal() -> FakePayPal:
    return FakePayPal()


@pytest.fixture()
async def paypal_client(fake_paypal) -> AsyncIterator[PayPalClient]:
    client = fake_paypal.client()
    yield client
    await client.close()


@pytest.fixture()
def app(session_manager, paypal_client):
    application = create_application()
    application.dependency_overrides[get_db_session] = session_manager.session_dependency
    application.dependency_overrides[get_paypal_client] = lambda: paypal_client
    limiter.reset()
    return application


@pytest.fixture()
async def client(app) -> AsyncIterator[httpx.AsyncClient]:
    transport = httpx.ASGITransport(app=app)
    async with httpx.AsyncClient(transport=transport, base_url="http://testserver") as test_client:
        yield test_client


# ========================== Account Helpers ================================


async def login(client: httpx.AsyncClient, email: str, password: str = DEFAULT_PASSWORD) -> str:
    response = await client.post("/api/auth/login", json={"email": email, "password": password})
    assert response.status_code == 200, response.text
    return response.json()["token"]


async def register_admin(client: httpx.AsyncClient, email: str = "admin@leaflings.pt", **fields: Any) -> Account:
    payload = {
        "username": "Head Gardener",
        "email": email,
        "password": DEFAULT_PASSWORD,
        "contact": "912345678",
        **fields,
    }
    response = await client.post("/api/admin", json=payload)
    assert response.status_code == 201, response.text
    admin_id = response.json()["id"]
    return Account(id=admin_id, email=email, token=await login(client, email, payload["password"]))


def user_form(email: str = "rita@leaflings.pt", **fields: Any) -> Dict[str, str]:
    form = {
        "username": "Rita",
        "email": email,
        "password": DEFAULT_PASSWORD,
        "contact": "961234567",
        "location": "Porto",
        "careExperience": "Beginner",
        "waterAvailability": "Low",
        "luminosityAvailability": "Low",
    }
    form.update(fields)
    return form


async def register_user(client: httpx.AsyncClient, email: str = "rita@leaflings.pt", **fields: Any) -> Account:
    response = await client.post("/api/user", data=user_form(email, **fields))
    assert response.status_code == 201, response.text
    user_id = response.json()["id"]
    return Account(id=user_id, email=email, token=await login(client, email))


@pytest.fixture()
async def admin(client) -> Account:
    return await register_admin(client)


@pytest.fixture()
async def user(client) -> Account:
    return await register_user(client)


# ========================== Catalog Helpers ================================


def plant_form(name: str = "Basil", **fields: Any) -> Dict[str, str]:
    form = {
        "name": name,
        "type": "Vegetable",
        "expSuggested": "Beginner",
        "waterNeeds": "Medium",
        "luminosityNeeded": "High",
        "description": "Fragrant kitchen herb",
    }
    form.update({key: str(value) for key, value in fields.items()})
    return form


@pytest.fixture()
def create_plant(client, admin):
    """Factory creating catalog plants as the default admin."""

    async def _create(name: str = "Basil", files=None, **fields: Any) -> Dict[str, Any]:
        response = await client.post("/api/plant", data=plant_form(name, **fields), files=files,
                                     headers=admin.headers)
        assert response.status_code == 201, response.text
        return response.json()

    return _create


@pytest.fixture()
def png_bytes() -> bytes:
    buffer = io.BytesIO()
    Image.new("RGB", (4, 4), color=(34, 139, 34)).save(buffer, format="PNG")
    return buffer.getvalue()
