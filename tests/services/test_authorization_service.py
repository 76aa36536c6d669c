"""
Tests for the admin gate.

The rule is deliberately loose: a matching id OR a matching
username (any case) is enough.
"""

import pytest

from church_ledger.errors import AuthorizationFailure
from church_ledger.services.authorization_service import (
    AuthorizationGate,
    CallerIdentity,
)


@pytest.fixture
def gate():
    return AuthorizationGate(admin_user_id=1, admin_username="admin")


class TestIsAdmin:

    def test_reserved_id_is_admin(self, gate):
        assert gate.is_admin(CallerIdentity(user_id=1)) is True

    def test_admin_username_is_admin(self, gate):
        assert gate.is_admin(CallerIdentity(username="admin")) is True

    def test_username_match_ignores_case(self, gate):
        assert gate.is_admin(CallerIdentity(username="AdMiN")) is True

    def test_id_wins_even_with_other_username(self, gate):
        assert gate.is_admin(CallerIdentity(user_id=1, username="bob")) is True

    def test_username_wins_even_with_other_id(self, gate):
        assert gate.is_admin(CallerIdentity(user_id=7, username="ADMIN")) is True

    def test_other_user_is_not_admin(self, gate):
        assert gate.is_admin(CallerIdentity(user_id=2, username="bob")) is False

    def test_empty_identity_is_not_admin(self, gate):
        assert gate.is_admin(CallerIdentity()) is False

    def test_missing_identity_is_not_admin(self, gate):
        assert gate.is_admin(None) is False

    def test_username_is_not_trimmed(self, gate):
        assert gate.is_admin(CallerIdentity(username=" admin")) is False


class TestRequireAdmin:

    def test_admin_passes(self, gate):
        gate.require_admin(CallerIdentity(user_id=1))

    def test_non_admin_rejected(self, gate):
        with pytest.raises(AuthorizationFailure):
            gate.require_admin(CallerIdentity(user_id=3, username="treasurer"))

    def test_custom_policy(self):
        gate = AuthorizationGate(admin_user_id=42, admin_username="pastor")
        assert gate.is_admin(CallerIdentity(user_id=42)) is True
        assert gate.is_admin(CallerIdentity(user_id=1, username="admin")) is False
