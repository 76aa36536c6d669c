"""
Tests for password hashing and the length policy.
"""

import pytest

from church_ledger.errors import ValidationFailure
from church_ledger.services.credential_service import CredentialService


class TestHashing:

    def test_hash_is_not_plaintext(self, credentials):
        digest = credentials.hash("secret123")
        assert digest != "secret123"
        assert digest.startswith("$argon2")

    def test_same_password_gives_different_digests(self, credentials):
        assert credentials.hash("secret123") != credentials.hash("secret123")

    def test_verify_accepts_correct_password(self, credentials):
        digest = credentials.hash("secret123")
        assert credentials.verify("secret123", digest) is True

    def test_verify_rejects_wrong_password(self, credentials):
        digest = credentials.hash("secret123")
        assert credentials.verify("secret124", digest) is False

    def test_verify_returns_false_for_corrupt_digest(self, credentials):
        assert credentials.verify("secret123", "not-a-digest") is False


class TestPolicy:

    def test_six_characters_accepted(self, credentials):
        credentials.check_policy("abcdef")

    def test_five_characters_rejected(self, credentials):
        with pytest.raises(ValidationFailure, match="at least 6"):
            credentials.check_policy("abcde")

    def test_empty_rejected(self, credentials):
        with pytest.raises(ValidationFailure):
            credentials.check_policy("")

    def test_custom_minimum(self):
        service = CredentialService(min_length=10)
        with pytest.raises(ValidationFailure, match="at least 10"):
            service.check_policy("abcdefgh")
