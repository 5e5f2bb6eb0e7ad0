"""
PFE Assistance Leads
Landing page intake and admin dashboard for a student project assistance service.

Architecture:
- PostgreSQL: candidates (leads) and admin accounts
- FastAPI: public lead/catalog API, JWT-protected admin API, static pages
"""

__version__ = "1.0.0"
