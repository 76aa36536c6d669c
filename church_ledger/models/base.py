"""
Database engine, session management, and base model.

Every model inherits from Base. Every request gets a session
from get_db().
"""

from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker, DeclarativeBase

from church_ledger.config import get_settings

settings = get_settings()


def build_engine(database_url: str):
    """
    Create an engine for the given URL.

    SQLite connections are shared with the request threads
    FastAPI runs sync endpoints on, so same-thread checking
    is turned off for them. SQLite also ignores foreign keys
    unless each connection turns them on, and ON DELETE SET NULL
    on entry and exit owners depends on it.
    """
    is_sqlite = database_url.startswith("sqlite")
    connect_args = {}
    if is_sqlite:
        connect_args["check_same_thread"] = False
    new_engine = create_engine(
        database_url,
        pool_pre_ping=True,
        connect_args=connect_args,
    )

    if is_sqlite:
        @event.listens_for(new_engine, "connect")
        def enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return new_engine


# --- Engine ---
# pool_pre_ping=True tests connections before using them,
# which handles a database that restarted or a stale connection.
engine = build_engine(settings.DATABASE_URL)

# --- Session Factory ---
# autocommit=False: route handlers decide when to commit.
# autoflush=False: SQL is only sent on an explicit flush or commit.
SessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


class Base(DeclarativeBase):
    pass


# --- Dependency for FastAPI ---
def get_db():
    """
    Provide a database session for a single request.

    The session is closed when the request finishes, even
    if the endpoint raised, so connections go back to the pool.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
