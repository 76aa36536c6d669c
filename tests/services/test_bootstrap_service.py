"""
Tests for schema bootstrap and admin seeding.
"""

import pytest
from sqlalchemy import create_engine, inspect, select, func

from church_ledger.config import get_settings
from church_ledger.errors import StoreFailure
from church_ledger.models.user import User
from church_ledger.services.auth_service import AuthService
from church_ledger.services.bootstrap_service import ensure_schema


@pytest.fixture
def engine(db_session):
    """The engine behind the test session."""
    return db_session.get_bind()


class TestEnsureSchema:

    def test_creates_tables(self, engine, credentials):
        ensure_schema(engine, credentials, get_settings())
        tables = set(inspect(engine).get_table_names())
        assert {"users", "entries", "exits"} <= tables

    def test_seeds_admin_on_empty_store(self, engine, db_session, credentials):
        admin = ensure_schema(engine, credentials, get_settings())

        assert admin is not None
        assert admin.username == "admin"
        assert admin.id == 1

        user = AuthService(db_session, credentials).login("admin", "admin123")
        assert user.id == admin.id

    def test_second_run_is_a_no_op(self, engine, db_session, credentials):
        settings = get_settings()
        ensure_schema(engine, credentials, settings)
        assert ensure_schema(engine, credentials, settings) is None

        count = db_session.execute(select(func.count(User.id))).scalar()
        assert count == 1

    def test_existing_users_block_seeding(self, engine, db_session, credentials):
        db_session.add(User(username="pastor", password=credentials.hash("pastor1")))
        db_session.commit()

        assert ensure_schema(engine, credentials, get_settings()) is None
        names = db_session.execute(select(User.username)).scalars().all()
        assert names == ["pastor"]

    def test_unreachable_store_is_fatal(self, credentials):
        broken = create_engine("sqlite:////nonexistent-dir/ledger.db")
        with pytest.raises(StoreFailure):
            ensure_schema(broken, credentials, get_settings())
