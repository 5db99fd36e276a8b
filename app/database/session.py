import logging
from contextlib import contextmanager

from sqlalchemy import create_engine, event
from sqlalchemy.engine import Engine
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, sessionmaker

from app.config.settings import settings
from app.constants import ErrorMessages
from app.exceptions import DuplicateResourceError, ResourceNotFoundError

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(target: Engine):
    """
    SQLite ignores FOREIGN KEY clauses unless the pragma is set per connection.
    """
    if target.dialect.name != "sqlite":
        return

    @event.listens_for(target, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


connect_args = {"check_same_thread": False} if settings.DATABASE_URL.startswith("sqlite") else {}

engine = create_engine(settings.DATABASE_URL, echo=settings.SQL_ECHO, connect_args=connect_args)
enable_sqlite_foreign_keys(engine)

SessionLocal = sessionmaker(
    autocommit=False,
    autoflush=False,
    bind=engine
)

def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def _is_foreign_key_violation(exc: IntegrityError) -> bool:
    # SQLite: "FOREIGN KEY constraint failed", MySQL 1451/1452: "a foreign key constraint fails"
    return "foreign key" in str(exc.orig).lower()


@contextmanager
def transaction(db: Session):
    """
    Unit of work around one mutating service call.

    Commits when the block finishes, rolls back on any exception. A unique
    index violation at flush/commit time means another writer won the
    check-then-act race, so it surfaces as DuplicateResourceError. A
    foreign key violation means a referenced row was deleted in the
    meantime and surfaces as ResourceNotFoundError.

    Args:
        db: Database session

    Yields:
        Session: The same session
    """
    try:
        yield db
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        logger.warning("Integrity violation, transaction rolled back: %s", exc.orig)
        if _is_foreign_key_violation(exc):
            raise ResourceNotFoundError(ErrorMessages.REFERENCE_MISSING) from exc
        raise DuplicateResourceError(ErrorMessages.CONSTRAINT_VIOLATION) from exc
    except Exception:
        db.rollback()
        raise
