"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import AsyncGenerator, Generator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
import strawberry
from sqlalchemy.ext.asyncio import AsyncEngine

from staffdesk.assets import PhotoResolver
from staffdesk.auth.adapters.base import Identity
from staffdesk.auth.adapters.jwt import JWTAuthAdapter
from staffdesk.auth.context import ANONYMOUS, AuthContext
from staffdesk.auth.passwords import PasswordHasher
from staffdesk.database.connection import create_engine, create_schema, create_session_factory
from staffdesk.services import Services
from staffdesk.storage.base import StorageProvider
from staffdesk.stores.employees import EmployeeStore
from staffdesk.stores.users import UserStore

TEST_SECRET = "test-secret-key-for-testing-only"


@pytest_asyncio.fixture
async def engine() -> AsyncGenerator[AsyncEngine, None]:
    """In-memory SQLite engine with the schema created."""
    engine = create_engine("sqlite+aiosqlite://")
    await create_schema(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine: AsyncEngine):
    return create_session_factory(engine)


@pytest.fixture
def user_store(session_factory) -> UserStore:
    return UserStore(session_factory)


@pytest.fixture
def employee_store(session_factory) -> EmployeeStore:
    return EmployeeStore(session_factory)


@pytest.fixture
def jwt_adapter() -> JWTAuthAdapter:
    return JWTAuthAdapter(secret_key=TEST_SECRET)


@pytest.fixture
def storage_provider() -> AsyncMock:
    provider = AsyncMock(spec=StorageProvider)
    provider.name = "mock"
    provider.upload.return_value = "https://cdn.example.com/employee_photos/photo.png"
    return provider


@pytest.fixture
def services(
    user_store: UserStore,
    employee_store: EmployeeStore,
    jwt_adapter: JWTAuthAdapter,
    storage_provider: AsyncMock,
) -> Services:
    return Services(
        users=user_store,
        employees=employee_store,
        photos=PhotoResolver(storage_provider, folder="employee_photos", max_retries=1),
        tokens=jwt_adapter,
        passwords=PasswordHasher(rounds=10),
    )


@pytest.fixture
def identity() -> Identity:
    return Identity(id="3f1c2c1e-8f5b-4a55-9a4e-2b8f7f0f6a11", username="alice", email="a@x.com")


@pytest.fixture
def auth_context(identity: Identity) -> AuthContext:
    return AuthContext(identity=identity, token="test-token")


def make_info(services: Services, auth: AuthContext = ANONYMOUS) -> Any:
    """Create a mock GraphQL info object carrying the resolver context."""
    info = MagicMock(spec=strawberry.Info)
    info.context = {"services": services, "auth": auth}
    return info


@pytest.fixture
def info_factory():
    return make_info


@pytest.fixture
def anonymous_info(services: Services) -> Any:
    return make_info(services)


@pytest.fixture
def authed_info(services: Services, auth_context: AuthContext) -> Any:
    return make_info(services, auth_context)


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)
