"""
Tests for login and password reset.
"""

import pytest

from church_ledger.errors import AuthFailure, NotFoundFailure, ValidationFailure
from church_ledger.services.auth_service import AuthService
from church_ledger.services.user_service import UserService
from church_ledger.schemas.user import UserCreate


class TestLogin:

    def test_seeded_admin_can_log_in(self, db_session, credentials, admin):
        service = AuthService(db_session, credentials)
        user = service.login("admin", "admin123")
        assert user.id == admin.id
        assert user.username == "admin"

    def test_wrong_password_rejected(self, db_session, credentials, admin):
        service = AuthService(db_session, credentials)
        with pytest.raises(AuthFailure, match="Invalid username or password"):
            service.login("admin", "wrong-password")

    def test_unknown_user_looks_like_wrong_password(
        self, db_session, credentials, admin
    ):
        service = AuthService(db_session, credentials)
        with pytest.raises(AuthFailure) as unknown:
            service.login("nobody", "admin123")
        with pytest.raises(AuthFailure) as wrong:
            service.login("admin", "nope-nope")
        assert str(unknown.value) == str(wrong.value)

    def test_username_match_is_exact(self, db_session, credentials, admin):
        service = AuthService(db_session, credentials)
        with pytest.raises(AuthFailure):
            service.login("ADMIN", "admin123")


class TestResetPassword:

    def test_reset_then_login_with_new_password(
        self, db_session, credentials, admin
    ):
        service = AuthService(db_session, credentials)
        service.reset_password("admin", "new-secret")
        db_session.commit()

        assert service.login("admin", "new-secret").id == admin.id
        with pytest.raises(AuthFailure):
            service.login("admin", "admin123")

    def test_short_password_rejected(self, db_session, credentials, admin):
        service = AuthService(db_session, credentials)
        with pytest.raises(ValidationFailure):
            service.reset_password("admin", "12345")

    def test_short_password_checked_before_lookup(self, db_session, credentials):
        service = AuthService(db_session, credentials)
        with pytest.raises(ValidationFailure):
            service.reset_password("nobody", "123")

    def test_unknown_user_not_found(self, db_session, credentials):
        service = AuthService(db_session, credentials)
        with pytest.raises(NotFoundFailure, match="not found"):
            service.reset_password("nobody", "long-enough")

    def test_reset_only_touches_that_user(self, db_session, credentials, admin):
        UserService(db_session, credentials).create_user(
            UserCreate(username="treasurer", password="treasure1")
        )
        db_session.commit()

        service = AuthService(db_session, credentials)
        service.reset_password("treasurer", "treasure2")
        db_session.commit()

        assert service.login("admin", "admin123").id == admin.id
