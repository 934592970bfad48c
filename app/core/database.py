"""Database engine and session management."""

from collections.abc import Generator

from sqlalchemy import Table, create_engine, literal, select, text
from sqlalchemy.orm import Session, sessionmaker

from app.core.config import settings

# SQLite connections are shared with FastAPI's threadpool.
_connect_args = (
    {"check_same_thread": False}
    if settings.DATABASE_URL.startswith("sqlite")
    else {}
)

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.DEBUG,
    connect_args=_connect_args,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def get_db() -> Generator[Session, None, None]:
    """Dependency that yields a DB session and closes it when done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def check_db_connected(db: Session) -> bool:
    """Run a trivial query to verify the database is reachable."""
    try:
        db.execute(text("SELECT 1"))
        return True
    except Exception:
        return False


def check_table_reachable(db: Session, table: Table) -> bool:
    """Return True if a one-row read from `table` succeeds."""
    try:
        db.execute(select(literal(1)).select_from(table).limit(1))
        return True
    except Exception:
        # A failed statement leaves a PostgreSQL transaction aborted.
        db.rollback()
        return False
