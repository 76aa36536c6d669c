"""
Authentication service — login and password reset.

Login answers the same way for an unknown user and for a wrong
password so the response cannot be used to discover usernames.
"""

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from church_ledger.errors import AuthFailure, NotFoundFailure
from church_ledger.models.user import User
from church_ledger.services.credential_service import CredentialService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid username or password"


class AuthService:

    def __init__(self, db: Session, credentials: CredentialService):
        self.db = db
        self.credentials = credentials

    def _find_by_username(self, username: str) -> User | None:
        return self.db.execute(
            select(User).where(User.username == username)
        ).scalar_one_or_none()

    def login(self, username: str, password: str) -> User:
        """Return the user on a match, raise AuthFailure otherwise."""
        user = self._find_by_username(username)
        if user is None:
            raise AuthFailure(INVALID_CREDENTIALS)

        if not self.credentials.verify(password, user.password):
            raise AuthFailure(INVALID_CREDENTIALS)

        return user

    def reset_password(self, username: str, new_password: str) -> User:
        """
        Overwrite a user's password.

        The policy is checked before the lookup, so a short
        password is refused even for an unknown username.
        """
        self.credentials.check_policy(new_password)

        user = self._find_by_username(username)
        if user is None:
            raise NotFoundFailure(f"User '{username}' not found")

        user.password = self.credentials.hash(new_password)
        self.db.flush()
        logger.info("Password reset for user %r", username)
        return user
