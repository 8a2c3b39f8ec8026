import os
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from sqlalchemy import text

from app.config import Settings
from app.database import Base, create_db_engine, create_session_factory
from app.routes import analytics, ar, auth, buy, event, product, qr, shop

# Import all models to ensure they are registered with SQLAlchemy
from app.db.models import Shop, Admin, Product, Event

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings):
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )
    # Configure logging to show API requests
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)
    logging.getLogger("fastapi").setLevel(logging.INFO)


def validation_message(exc: RequestValidationError) -> str:
    """Turn the first validation error into a field-specific message, e.g. 'category required'"""
    errors = exc.errors()
    if not errors:
        return "invalid request"
    error = errors[0]
    if error.get("type") == "json_invalid":
        return "invalid JSON body"
    loc = [str(part) for part in error.get("loc", ()) if part not in ("body", "query", "path", "header")]
    field = loc[-1] if loc else "body"
    if error.get("type") in ("missing", "string_too_short"):
        return f"{field} required"
    return f"{field}: {error.get('msg', 'invalid value')}"


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    message = validation_message(exc)
    logger.info(f"Request validation error: {message} for {request.method} {request.url.path}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"detail": message})


async def generic_exception_handler(request: Request, exc: Exception):
    logger.exception(f"Unhandled exception: {exc} for {request.method} {request.url.path}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": str(exc)},
    )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or Settings.from_env()

    engine = create_db_engine(settings.database_url)
    SessionLocal = create_session_factory(engine)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Only create tables automatically in dev, not production
        if not settings.is_production:
            logger.info("Development mode: creating tables if they don't exist")
            Base.metadata.create_all(bind=engine)

            from app.init_db import seed
            db = SessionLocal()
            try:
                seed(db)
            finally:
                db.close()
        logger.info(f"Shop catalog backend ready (env={settings.env})")
        try:
            yield
        finally:
            engine.dispose()

    app = FastAPI(
        title="Shop Catalog Backend",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.engine = engine
    app.state.SessionLocal = SessionLocal

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials="*" not in settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, generic_exception_handler)

    for module in (auth, shop, product, event, analytics, buy, qr):
        app.include_router(module.router, prefix=settings.api_prefix)
    app.include_router(ar.router)

    @app.get("/health")
    def health():
        """Health check endpoint for Docker health checks"""
        try:
            with engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return {"status": "healthy", "database": "connected"}
        except Exception as e:
            return {"status": "unhealthy", "database": "disconnected", "error": str(e)}

    # Static files last so API routes take precedence
    os.makedirs(settings.upload_dir, exist_ok=True)
    os.makedirs(settings.public_dir, exist_ok=True)
    app.mount("/uploads", StaticFiles(directory=settings.upload_dir), name="uploads")
    app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")

    return app


settings = Settings.from_env()
configure_logging(settings)
app = create_app(settings)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=settings.port)
