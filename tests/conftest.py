"""Test configuration and fixtures."""

import os
from typing import AsyncGenerator
from unittest.mock import MagicMock

# Settings are read at import time, so they must be in place first
os.environ["CRMDESK_DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CRMDESK_JWT_SECRET_KEY"] = "test_secret_key_123456789"
os.environ["CRMDESK_MINIO_PUBLIC_URL"] = "http://minio.test"
os.environ["CRMDESK_MINIO_BUCKET_NAME"] = "avatars"

import pytest
import pytest_asyncio
from faker import Faker
from httpx import ASGITransport, AsyncClient
from minio import Minio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from crmdesk.core.database import Base, User
from crmdesk.core.dependencies import get_db_session, get_minio_client
from crmdesk.core.security import create_jwt_token
from crmdesk.core.services import UserService
from crmdesk.main import app
from crmdesk.schemas.user import UserCreate

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEST_PASSWORD = "testpassword"

fake = Faker()


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without HTTP")
    config.addinivalue_line("markers", "integration: tests going through the API")


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    session_maker = async_sessionmaker(bind=test_engine, expire_on_commit=False)

    async with session_maker() as session:
        yield session


@pytest.fixture
def mock_minio_client():
    """Create a mock MinIO client."""
    mock_client = MagicMock(spec=Minio)
    mock_client.bucket_exists.return_value = True
    mock_client.make_bucket.return_value = None
    mock_client.put_object.return_value = MagicMock()
    mock_client.remove_object.return_value = None
    return mock_client


@pytest.fixture
def override_dependencies(test_engine, mock_minio_client):
    """Point the app at the test database and the mock object store."""
    session_maker = async_sessionmaker(bind=test_engine, expire_on_commit=False)

    async def _get_test_db():
        async with session_maker() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = _get_test_db
    app.dependency_overrides[get_minio_client] = lambda: mock_minio_client
    yield
    app.dependency_overrides = {}


@pytest_asyncio.fixture
async def async_client(override_dependencies) -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test"
    ) as test_client:
        yield test_client


async def _create_user(session: AsyncSession, username: str, email: str) -> User:
    user = await UserService(session).register_user(
        UserCreate(username=username, email=email, password=TEST_PASSWORD)
    )
    await session.commit()
    return user


@pytest_asyncio.fixture
async def test_user(test_session: AsyncSession) -> User:
    """Create a test user."""
    return await _create_user(test_session, "testuser", "test@example.com")


@pytest_asyncio.fixture
async def other_user(test_session: AsyncSession) -> User:
    return await _create_user(test_session, fake.user_name(), fake.email())


@pytest.fixture
def auth_headers_user(test_user):
    """Create authentication headers for test user."""
    token = create_jwt_token(subject=test_user.username)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def auth_headers_other(other_user):
    token = create_jwt_token(subject=other_user.username)
    return {"Authorization": f"Bearer {token}"}
