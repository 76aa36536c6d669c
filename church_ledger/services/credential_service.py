"""
Credential service — password hashing and the length policy.

This is the only place that knows which hashing algorithm is
used. Digests are argon2 strings that embed their own random
salt and parameters, so two hashes of the same password differ
and verification never needs a separate salt column.
"""

from argon2 import PasswordHasher
from argon2.exceptions import InvalidHashError, VerificationError

from church_ledger.errors import ValidationFailure


DEFAULT_MIN_LENGTH = 6


class CredentialService:

    def __init__(self, min_length: int = DEFAULT_MIN_LENGTH):
        self.min_length = min_length
        self._hasher = PasswordHasher()

    def check_policy(self, plaintext: str) -> None:
        """
        Reject passwords too short to be stored.

        Called before hashing, so a rejected password costs
        nothing and never reaches the database.
        """
        if plaintext is None or len(plaintext) < self.min_length:
            raise ValidationFailure(
                f"Password must be at least {self.min_length} characters"
            )

    def hash(self, plaintext: str) -> str:
        """Return a salted digest. Never compare two digests directly."""
        return self._hasher.hash(plaintext)

    def verify(self, plaintext: str, digest: str) -> bool:
        """
        Check a password against a stored digest.

        A wrong password and a corrupt digest both return False.
        """
        try:
            return self._hasher.verify(digest, plaintext)
        except (VerificationError, InvalidHashError):
            return False
