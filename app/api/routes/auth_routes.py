"""
Authentication Routes

POST /auth/login - Login and get JWT token
GET /auth/me - Get current admin info
POST /auth/logout - Acknowledge logout (token is dropped client-side)
"""

import logging

from fastapi import APIRouter, HTTPException, Depends
from sqlalchemy import select

from app.db.postgres import get_db_session
from app.core.auth import verify_password, create_access_token, get_current_admin
from app.models import AdminUser
from app.schemas.schemas import LoginRequest, TokenResponse, AdminResponse, MessageResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


@router.post("/login", response_model=TokenResponse)
async def login(request: LoginRequest):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    """
    email = request.email.lower()
    with get_db_session() as db:
        admin = db.execute(select(AdminUser).where(AdminUser.email == email)).scalar_one_or_none()

    if not admin or not verify_password(request.password, admin.password_hash):
        logger.warning("Failed admin login for %s", email)
        raise HTTPException(status_code=401, detail="Invalid email or password")

    if not admin.is_active:
        raise HTTPException(status_code=403, detail="Account deactivated")

    token = create_access_token(data={"sub": str(admin.id)})
    logger.info("Admin %s logged in", email)

    return TokenResponse(access_token=token, admin_id=admin.id, email=admin.email)


@router.get("/me", response_model=AdminResponse)
async def get_me(admin: dict = Depends(get_current_admin)):
    """Get current authenticated admin's info."""
    with get_db_session() as db:
        row = db.get(AdminUser, admin["admin_id"])

    return AdminResponse.model_validate(row)


@router.post("/logout", response_model=MessageResponse)
async def logout(admin: dict = Depends(get_current_admin)):
    """Tokens are stateless; the dashboard forgets its token on logout."""
    logger.info("Admin %s logged out", admin["email"])
    return MessageResponse(message="Logged out")
