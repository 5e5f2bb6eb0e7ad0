"""
PFE Assistance Leads - Main Application

FastAPI backend with:
- PostgreSQL (any SQLAlchemy URL) for the candidates table
- JWT authentication for the admin dashboard
- Static landing page and dashboard served from /frontend

Run: uvicorn app.main:app --reload
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from app.api.routes import api_router
from app.core.config import get_settings
from app.core.logging_config import setup_logging
from app.db.init_db import init_db, ensure_admin
from app.schemas.schemas import ErrorResponse

logger = logging.getLogger(__name__)

settings = get_settings()

# Get the project root directory
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
FRONTEND_DIR = os.path.join(PROJECT_ROOT, "frontend", "public")

PAGES = {
    "landing": "index.html",
    "login": "admin.html",
    "dashboard": "dashboard.html",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create tables and the bootstrap admin on startup."""
    setup_logging()
    logger.info("Application starting up")
    init_db()
    if ensure_admin(settings.admin_email, settings.admin_password) is None:
        logger.warning("ADMIN_EMAIL/ADMIN_PASSWORD not set, no admin account bootstrapped")

    yield

    logger.info("Application shutting down")


# Create FastAPI app
app = FastAPI(
    title="PFE Assistance Leads",
    description="""
    Landing page intake and admin dashboard for a student project assistance service.

    ## Features
    - **Leads**: Public form submission with duplicate email/phone detection
    - **Services**: Offerings, budgets and remaining places
    - **Authentication**: JWT-based admin login
    - **Candidates**: List, search, filter, view, edit, change status and delete leads
    """,
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origin_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include API routes
app.include_router(api_router, prefix="/api")

# Serve static files (for any additional assets)
if os.path.exists(FRONTEND_DIR):
    app.mount("/static", StaticFiles(directory=FRONTEND_DIR), name="static")


@app.exception_handler(SQLAlchemyError)
async def database_error_handler(request: Request, exc: SQLAlchemyError):
    """Unexpected database failures become 503 instead of a bare 500."""
    logger.exception("Database error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=503,
        content=ErrorResponse(detail="Database unavailable").model_dump()
    )


def _page(name: str):
    path = os.path.join(FRONTEND_DIR, PAGES[name])
    if os.path.exists(path):
        return FileResponse(path)
    return None


@app.get("/", tags=["Frontend"])
async def serve_landing():
    """Serve the landing page."""
    page = _page("landing")
    if page is not None:
        return page
    return {"status": "healthy", "app": "PFE Assistance Leads", "message": "Frontend not found. API is running."}


@app.get("/admin", tags=["Frontend"])
async def serve_admin_login():
    return _page("login") or JSONResponse(status_code=404, content={"detail": "Not Found"})


@app.get("/admin/dashboard", tags=["Frontend"])
async def serve_admin_dashboard():
    return _page("dashboard") or JSONResponse(status_code=404, content={"detail": "Not Found"})


@app.get("/health", tags=["Health"])
async def health_check():
    """Detailed health check."""
    from app.db.postgres import check_database_connection

    return {
        "status": "healthy",
        "database": "connected" if check_database_connection() else "disconnected"
    }
