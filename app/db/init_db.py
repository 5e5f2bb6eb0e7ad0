"""
Schema creation and admin bootstrap.

Called from the app lifespan; also used by scripts/create_admin.py.
"""

import logging
from typing import Optional

from sqlalchemy import select

from app.core.auth import hash_password
from app.db.postgres import engine, get_db_session
from app.models import AdminUser, Base

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready: %s", ", ".join(Base.metadata.tables.keys()))


def ensure_admin(email: Optional[str], password: Optional[str], reset_password: bool = False) -> Optional[int]:
    """
    Create the admin account if it is missing.

    With reset_password=True an existing account gets the new password and
    is re-activated. Returns the admin id, or None when email/password are unset.
    """
    if not email or not password:
        return None

    email = email.strip().lower()
    with get_db_session() as db:
        admin = db.execute(select(AdminUser).where(AdminUser.email == email)).scalar_one_or_none()
        if admin is None:
            admin = AdminUser(email=email, password_hash=hash_password(password), is_active=True)
            db.add(admin)
            db.flush()
            logger.info("Created admin account %s", email)
        elif reset_password:
            admin.password_hash = hash_password(password)
            admin.is_active = True
            logger.info("Reset password for admin account %s", email)
        return admin.id
