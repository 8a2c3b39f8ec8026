"""
Application configuration loaded from environment variables
"""

import os
import logging
from typing import List

from pydantic import BaseModel

logger = logging.getLogger(__name__)

DEV_JWT_SECRET = "dev-secret-change-me"
MODEL_VIEWER_SCRIPT_URL = "https://ajax.googleapis.com/ajax/libs/model-viewer/3.5.0/model-viewer.min.js"


class Settings(BaseModel):
    """Settings object built once at startup and shared through app.state"""

    env: str = "production"
    port: int = 4000
    log_level: str = "INFO"

    database_url: str = "sqlite:///./shop_catalog.db"

    # Auth
    jwt_secret: str = DEV_JWT_SECRET
    jwt_algorithm: str = "HS256"
    token_expire_days: int = 7

    # Files
    public_dir: str = "./public"
    upload_dir: str = "./public/uploads"
    max_upload_images: int = 6

    # Delivery
    api_prefix: str = "/api"
    public_base_url: str = ""
    whatsapp_country_code: str = "91"
    qr_target_url: str = "http://localhost:4000/"
    ar_viewer_script_url: str = MODEL_VIEWER_SCRIPT_URL
    cors_origins: List[str] = ["*"]

    @property
    def is_production(self) -> bool:
        return self.env == "production"

    @classmethod
    def from_env(cls) -> "Settings":
        env = os.getenv("ENV", "production")
        port = int(os.getenv("PORT", "4000"))

        database_url = os.getenv("DATABASE_URL", "sqlite:///./shop_catalog.db")
        if database_url.startswith("postgres://"):
            database_url = database_url.replace("postgres://", "postgresql://", 1)

        jwt_secret = os.getenv("JWT_SECRET")
        if not jwt_secret:
            if env == "production":
                raise ValueError("Missing required production setting: JWT_SECRET")
            logger.warning("JWT_SECRET not set, using the development secret")
            jwt_secret = DEV_JWT_SECRET

        public_dir = os.getenv("PUBLIC_DIR", "./public")
        public_base_url = os.getenv("PUBLIC_BASE_URL", "").rstrip("/")
        origins = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

        return cls(
            env=env,
            port=port,
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
            database_url=database_url,
            jwt_secret=jwt_secret,
            jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
            token_expire_days=int(os.getenv("TOKEN_EXPIRE_DAYS", "7")),
            public_dir=public_dir,
            upload_dir=os.getenv("UPLOAD_DIR", os.path.join(public_dir, "uploads")),
            max_upload_images=int(os.getenv("MAX_UPLOAD_IMAGES", "6")),
            api_prefix=os.getenv("API_PREFIX", "/api"),
            public_base_url=public_base_url,
            whatsapp_country_code=os.getenv("WHATSAPP_COUNTRY_CODE", "91"),
            qr_target_url=os.getenv("QR_TARGET_URL", public_base_url or f"http://localhost:{port}/"),
            ar_viewer_script_url=os.getenv("AR_VIEWER_SCRIPT_URL", MODEL_VIEWER_SCRIPT_URL),
            cors_origins=origins or ["*"],
        )
