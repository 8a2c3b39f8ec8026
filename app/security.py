"""
Admin authentication: password hashing and signed tenant tokens.

Admins are provisioned out-of-band (see app.init_db). There is no signup or
password change path over HTTP.
"""

import logging
from datetime import datetime, timedelta, timezone
from functools import lru_cache
from typing import Optional

import bcrypt
import jwt
from sqlalchemy.orm import Session

from app.config import Settings
from app.db.crud import admin as admin_crud
from app.db.schemas.auth import LoginResponse, TokenData

logger = logging.getLogger(__name__)


class AuthError(Exception):
    """Raised for any failed login or token check. The message is never shown to clients."""


def hash_password(password: str) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # stored value is not a bcrypt hash
        return False


@lru_cache(maxsize=1)
def _dummy_hash() -> str:
    return hash_password("not-a-real-password")


def create_access_token(
    shop_id: str,
    role: str,
    settings: Settings,
    issued_at: Optional[datetime] = None,
) -> str:
    issued_at = issued_at or datetime.now(timezone.utc)
    payload = {
        "shop_id": shop_id,
        "role": role,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.token_expire_days),
    }
    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def decode_access_token(token: str, settings: Settings) -> TokenData:
    try:
        payload = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp", "shop_id"]},
        )
    except jwt.PyJWTError as e:
        raise AuthError(str(e)) from e
    return TokenData(shop_id=str(payload["shop_id"]), role=str(payload.get("role", "admin")))


def authenticate_admin(db: Session, email: str, password: str, settings: Settings) -> LoginResponse:
    """
    Check admin credentials and issue a token.
    Unknown email and wrong password fail the same way, after the same bcrypt work.
    """
    admin = admin_crud.get_admin_by_email(db, email)
    if admin is None:
        verify_password(password, _dummy_hash())
        raise AuthError("no such admin")
    if not verify_password(password, admin.password):
        raise AuthError("wrong password")

    token = create_access_token(admin.shop_id, admin.role, settings)
    return LoginResponse(token=token, shop_id=admin.shop_id)
