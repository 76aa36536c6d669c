"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch the
real one. Tables are created before each test and dropped after,
so every test starts from an empty database.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from church_ledger.main import app
from church_ledger.config import get_settings
from church_ledger.models.base import Base, build_engine, get_db
from church_ledger.services.bootstrap_service import seed_admin
from church_ledger.services.credential_service import CredentialService


TEST_DATABASE_URL = "sqlite:///./test.db"

# Built like the app engine so SQLite enforces foreign keys
engine = build_engine(TEST_DATABASE_URL)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def credentials():
    return CredentialService(min_length=6)


@pytest.fixture
def admin(db_session, credentials):
    """The default administrator, seeded the way bootstrap does it."""
    user = seed_admin(db_session, credentials, get_settings())
    db_session.commit()
    return user


@pytest.fixture
def admin_headers(admin):
    return {"X-User-Id": str(admin.id), "X-Username": admin.username}


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    get_db is overridden so the app uses the test session.
    The client is not entered as a context manager, so the
    lifespan bootstrap against the configured database never runs.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
