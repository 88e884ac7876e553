import inspect

import anyio
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

import app.models  # noqa: F401
from app.core.security import PasswordHasher, get_password_hasher
from app.core.settings import Settings
from app.main import create_app
from app.user.models import User, UserRole
from app.user.service import UserService

# Keep hashing cheap in tests; the scheme is the same as in production.
_test_hasher = PasswordHasher(rounds=1000)


def pytest_configure(config: pytest.Config) -> None:
    # Tests use @pytest.mark.asyncio, but we intentionally rely on anyio.
    config.addinivalue_line(
        "markers",
        "asyncio: run async tests using anyio (project-local hook)",
    )


@pytest.hookimpl(tryfirst=True)
def pytest_pyfunc_call(pyfuncitem: pytest.Function) -> bool | None:
    """Run @pytest.mark.asyncio tests with anyio.

    This avoids adding an external pytest-asyncio dependency.
    """
    if pyfuncitem.get_closest_marker("asyncio") is None:
        return None

    test_func = pyfuncitem.obj
    if not inspect.iscoroutinefunction(test_func):
        return None

    funcargs = {
        name: pyfuncitem.funcargs[name] for name in pyfuncitem._fixtureinfo.argnames
    }

    async def _run_async_test() -> None:
        await test_func(**funcargs)

    anyio.run(_run_async_test)
    return True


@pytest.fixture(name="engine")
def engine_fixture():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(engine: Engine):
    with Session(engine) as session:
        yield session


@pytest.fixture(name="hasher")
def hasher_fixture() -> PasswordHasher:
    return _test_hasher


@pytest.fixture(name="service")
def service_fixture(session: Session, hasher: PasswordHasher) -> UserService:
    return UserService(session, hasher)


@pytest.fixture(name="test_settings")
def test_settings_fixture() -> Settings:
    return Settings(
        env_name="test",
        database_url="sqlite://",
        db_auto_create=False,
        cors_origins="http://localhost:3000",
    )


@pytest.fixture(name="client")
def client_fixture(engine: Engine, test_settings: Settings):
    """Create a test client bound to the in-memory database."""
    app = create_app(settings=test_settings, engine=engine)
    app.dependency_overrides[get_password_hasher] = lambda: _test_hasher

    client = TestClient(app)
    yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="test_user")
def test_user_fixture(session: Session, hasher: PasswordHasher):
    """Create a test user in the database."""
    user = User(
        first_name="Test",
        last_name="User",
        email="test@example.com",
        password_hash=hasher.hash("secret1"),
        is_active=True,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


@pytest.fixture(name="inactive_user")
def inactive_user_fixture(session: Session, hasher: PasswordHasher):
    """Create an inactive admin user."""
    user = User(
        first_name="Inactive",
        last_name="Admin",
        email="inactive@example.com",
        password_hash=hasher.hash("secret1"),
        role=UserRole.admin,
        is_active=False,
    )
    session.add(user)
    session.commit()
    session.refresh(user)
    return user


def make_user_payload(**overrides) -> dict:
    """Valid create payload in wire (camelCase) form."""
    payload = {
        "firstName": "Ann",
        "lastName": "Lee",
        "email": "ann@x.com",
        "password": "secret1",
    }
    payload.update(overrides)
    return payload


@pytest.fixture(name="user_payload")
def user_payload_fixture():
    return make_user_payload
