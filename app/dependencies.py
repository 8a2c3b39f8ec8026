import logging
from typing import Generator, Optional

from fastapi import Depends, Header, HTTPException, Request, status
from sqlalchemy.orm import Session

from app.config import Settings
from app.db.schemas.auth import TokenData
from app.security import AuthError, decode_access_token

logger = logging.getLogger(__name__)

UNAUTHORIZED = "Unauthorized"


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    Dependency function that yields database sessions
    """
    db = request.app.state.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_current_admin(
    authorization: Optional[str] = Header(None),
    settings: Settings = Depends(get_settings),
) -> TokenData:
    """
    Verify the admin token from the Authorization header (raw or "Bearer <token>").
    Any failure is a 401 with the same body.
    """
    if not authorization:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED)

    token = authorization.strip()
    if token.lower().startswith("bearer "):
        token = token[7:].strip()

    try:
        return decode_access_token(token, settings)
    except AuthError as e:
        logger.warning(f"Rejected admin token: {e}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=UNAUTHORIZED)
