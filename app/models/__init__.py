"""
Models module - SQLAlchemy ORM tables.

- AdminUser: staff accounts allowed into the dashboard
- Candidate: leads submitted through the landing page form
"""
from app.models.base import Base
from app.models.admin import AdminUser
from app.models.candidate import Candidate

__all__ = ["Base", "AdminUser", "Candidate"]
