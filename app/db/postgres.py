import logging

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker
from contextlib import contextmanager
from app.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()


def _engine_options(url: str) -> dict:
    if url.startswith("sqlite"):
        # SQLite (tests, local dev): connections are shared with the TestClient thread
        return {"connect_args": {"check_same_thread": False}}
    # pool_size=5: maintain 5 connections ready
    # max_overflow=10: allow 10 extra connections under load
    return {"pool_size": 5, "max_overflow": 10, "pool_pre_ping": True}


# Create engine with connection pool
engine = create_engine(
    settings.sqlalchemy_url,
    echo=settings.debug,  # Log SQL queries in debug mode
    **_engine_options(settings.sqlalchemy_url)
)

# Session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, expire_on_commit=False, bind=engine)


@contextmanager
def get_db_session():
    """
    Context manager for database sessions.
    Usage:
        with get_db_session() as db:
            db.execute(text("SELECT * FROM candidates"))
    """
    session = SessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def check_database_connection() -> bool:
    """
    Check if the database is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        with get_db_session() as db:
            result = db.execute(text("SELECT 1 as test"))
            row = result.fetchone()
            return row[0] == 1
    except Exception as e:
        logger.error("Database connection failed: %s", e)
        return False


def execute_raw_sql(sql: str, params: dict = None) -> list:
    """
    Execute raw SQL and return results as list of dicts.
    Used for the aggregate queries (status counts, service occupancy).
    """
    with get_db_session() as db:
        result = db.execute(text(sql), params or {})
        # Convert rows to dicts
        columns = result.keys()
        return [dict(zip(columns, row)) for row in result.fetchall()]
