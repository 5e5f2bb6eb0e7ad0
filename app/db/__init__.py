"""
Database module - SQLAlchemy engine, sessions and schema bootstrap.
"""
from app.db.postgres import get_db_session, check_database_connection, execute_raw_sql

__all__ = [
    "get_db_session",
    "check_database_connection",
    "execute_raw_sql",
]
