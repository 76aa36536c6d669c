"""
User directory — list, create and update accounts.

There is no delete: historical entries and exits keep pointing at
the users who recorded them. Authorization is checked by the API
layer before these methods are called.
"""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from church_ledger.errors import (
    ConflictFailure,
    NotFoundFailure,
    ValidationFailure,
)
from church_ledger.models.user import User
from church_ledger.schemas.user import UserCreate, UserUpdate
from church_ledger.services.credential_service import CredentialService

logger = logging.getLogger(__name__)


class UserService:

    def __init__(self, db: Session, credentials: CredentialService):
        self.db = db
        self.credentials = credentials

    def _clean_username(self, username: str) -> str:
        username = (username or "").strip()
        if not username:
            raise ValidationFailure("Username is required")
        return username

    def _username_taken(self, username: str, exclude_id: int | None = None) -> bool:
        query = select(User.id).where(User.username == username)
        if exclude_id is not None:
            query = query.where(User.id != exclude_id)
        return self.db.execute(query).first() is not None

    def _flush(self, username: str) -> None:
        # A concurrent insert can still win the race past the
        # pre-check; the unique constraint settles it.
        try:
            self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            raise ConflictFailure(
                f"User '{username}' already exists"
            ) from e

    def list_users(self) -> list[User]:
        """All users, oldest first."""
        users = self.db.execute(
            select(User).order_by(User.id.asc())
        ).scalars().all()
        return list(users)

    def get_user(self, user_id: int) -> User:
        user = self.db.get(User, user_id)
        if not user:
            raise NotFoundFailure(f"User {user_id} not found")
        return user

    def create_user(self, request: UserCreate) -> User:
        """
        Create a user with a hashed password.

        Raises ValidationFailure for an empty username or a short
        password, ConflictFailure when the username is taken.
        """
        username = self._clean_username(request.username)
        self.credentials.check_policy(request.password)

        if self._username_taken(username):
            raise ConflictFailure(f"User '{username}' already exists")

        user = User(
            username=username,
            password=self.credentials.hash(request.password),
        )
        self.db.add(user)
        self._flush(username)
        logger.info("Created user %r (id=%s)", username, user.id)
        return user

    def update_user(self, user_id: int, request: UserUpdate) -> User:
        """
        Rename a user and optionally change their password.

        Without a new password the stored digest is left as is.
        """
        username = self._clean_username(request.username)
        if request.password is not None:
            self.credentials.check_policy(request.password)

        user = self.get_user(user_id)

        if self._username_taken(username, exclude_id=user_id):
            raise ConflictFailure(f"User '{username}' already exists")

        user.username = username
        if request.password is not None:
            user.password = self.credentials.hash(request.password)

        self._flush(username)
        return user
