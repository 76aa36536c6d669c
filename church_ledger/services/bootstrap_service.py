"""
Schema bootstrap — runs once before the app serves requests.

Creates any missing tables and seeds the default administrator
when the users table is empty. Both steps are safe to repeat:
create_all skips existing tables and the seed only happens on
an empty table.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from church_ledger.config import Settings
from church_ledger.errors import StoreFailure
from church_ledger.models.base import Base
from church_ledger.models.user import User
from church_ledger.services.credential_service import CredentialService

logger = logging.getLogger(__name__)


def seed_admin(
    db: Session, credentials: CredentialService, settings: Settings
) -> User | None:
    """Insert the default administrator if no user exists yet."""
    user_count = db.execute(select(func.count(User.id))).scalar()
    if user_count:
        return None

    admin = User(
        username=settings.ADMIN_USERNAME,
        password=credentials.hash(settings.ADMIN_DEFAULT_PASSWORD),
    )
    db.add(admin)
    db.flush()
    logger.info(
        "Created default administrator %r (id=%s)", admin.username, admin.id
    )
    return admin


def ensure_schema(
    engine, credentials: CredentialService, settings: Settings
) -> User | None:
    """
    Create tables if absent and seed the administrator.

    Returns the seeded user, or None when users already existed.
    Any database error is logged and raised as StoreFailure; the
    caller must not start serving requests after that.
    """
    try:
        Base.metadata.create_all(bind=engine)
        logger.info(
            "Tables checked: %s", ", ".join(sorted(Base.metadata.tables))
        )

        # The seeded user is returned after the session closes
        with Session(engine, expire_on_commit=False) as db:
            admin = seed_admin(db, credentials, settings)
            db.commit()
        return admin
    except SQLAlchemyError as e:
        logger.critical("Database initialisation failed: %s", e)
        raise StoreFailure("Database initialisation failed") from e
