import os

# Settings are read at import time, so the environment comes first
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test_secret_key_for_testing_only"
os.environ["SUPABASE_URL"] = "https://test.supabase.co"
os.environ["SUPABASE_SERVICE_ROLE_KEY"] = "test-service-role-key"
os.environ["MAX_UPLOAD_SIZE_MB"] = "1"

import httpx
import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from hypehouse.core.security import create_access_token
from hypehouse.database import Base, get_db
from hypehouse.main import app
from hypehouse.models.user import ROLE_ADMIN, ROLE_USER
from hypehouse.services.auth_service import AuthService
from hypehouse.services.http_client import HTTPClientManager

API = "/api/v1"

ADMIN_EMAIL = "admin@hypehouserecords.com"
ADMIN_PASSWORD = "admin-password"
USER_EMAIL = "fan@hypehouserecords.com"
USER_PASSWORD = "fan-password"


@pytest.fixture
async def engine():
    """Fresh in-memory database per test."""
    test_engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # SQLite leaves foreign keys (and ON DELETE SET NULL) off unless asked
    @event.listens_for(test_engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


@pytest.fixture
async def db_session(session_factory):
    """Session for arranging and inspecting data directly."""
    async with session_factory() as session:
        yield session


@pytest.fixture
async def client(session_factory):
    """HTTP client bound to the app, with get_db pointed at the test database."""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
async def admin_user(db_session):
    return await AuthService.create_user(db_session, ADMIN_EMAIL, ADMIN_PASSWORD, roles=[ROLE_ADMIN])


@pytest.fixture
async def regular_user(db_session):
    return await AuthService.create_user(db_session, USER_EMAIL, USER_PASSWORD, roles=[ROLE_USER])


@pytest.fixture
def admin_headers(admin_user):
    return {"Authorization": f"Bearer {create_access_token(subject=str(admin_user.id))}"}


@pytest.fixture
def user_headers(regular_user):
    return {"Authorization": f"Bearer {create_access_token(subject=str(regular_user.id))}"}


@pytest.fixture
async def storage_requests():
    """
    Route storage uploads to an in-process handler.

    Yields a dict: set `handler` to a callable(request) -> httpx.Response,
    and inspect `seen` for the requests that were made.
    """
    state = {"handler": lambda request: httpx.Response(200, json={"Key": "media/x"}), "seen": []}

    def dispatch(request: httpx.Request) -> httpx.Response:
        state["seen"].append(request)
        return state["handler"](request)

    mock_client = httpx.AsyncClient(transport=httpx.MockTransport(dispatch))
    HTTPClientManager.set_client(mock_client)
    yield state
    HTTPClientManager.set_client(None)
    await mock_client.aclose()
