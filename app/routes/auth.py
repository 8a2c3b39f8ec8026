import logging
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app.config import Settings
from app.db.schemas.auth import LoginRequest, LoginResponse
from app.dependencies import get_db, get_settings, UNAUTHORIZED
from app.security import AuthError, authenticate_admin

logger = logging.getLogger(__name__)

# Login only. Admin accounts are created with `python -m app.init_db create-admin`.
router = APIRouter(tags=["Auth"])

@router.post("/admin/login", response_model=LoginResponse)
def login(
    credentials: LoginRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings)
):
    """Exchange admin credentials for a tenant-scoped token"""
    try:
        result = authenticate_admin(db, credentials.email, credentials.password, settings)
    except AuthError:
        logger.info("Admin login rejected")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED)
    logger.info(f"Admin logged in for shop {result.shop_id}")
    return result
