"""
Point d'entree FastAPI / FastAPI entry point.
Fuel Tracker - carnet de carburant personnel / personal vehicle fuel log.
"""

import json
import logging
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded
from starlette.middleware.base import BaseHTTPMiddleware

from fuel_tracker.api import api_router
from fuel_tracker.config import settings
from fuel_tracker.database import init_db, serialized_session
from fuel_tracker.rate_limit import limiter
from fuel_tracker.utils.seed import seed_default_options

logger = logging.getLogger("fuel_tracker")


class JSONFormatter(logging.Formatter):
    """Logs JSON structures / Structured JSON logs."""

    def format(self, record):
        log_entry = {
            "timestamp": self.formatTime(record),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info and record.exc_info[0]:
            log_entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(log_entry, ensure_ascii=False)


def configure_logging() -> None:
    """JSON en production, texte en debug / JSON in production, plain text in debug."""
    handler = logging.StreamHandler()
    if settings.DEBUG:
        handler.setFormatter(logging.Formatter("%(asctime)s [%(levelname)s] %(name)s: %(message)s"))
    else:
        handler.setFormatter(JSONFormatter())
    logging.root.handlers = [handler]
    logging.root.setLevel(logging.INFO)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialisation et fermeture / Startup and shutdown."""
    if not settings.DEBUG and settings.SECRET_KEY == "change-me-in-production":
        raise RuntimeError("CRITICAL: SECRET_KEY must be changed in production!")

    await init_db()
    async with serialized_session() as session:
        await seed_default_options(session)
    logger.info("%s %s ready", settings.APP_NAME, settings.APP_VERSION)
    yield


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Ajoute les headers de securite / Add security headers."""

    async def dispatch(self, request: Request, call_next):
        response: Response = await call_next(request)
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"
        return response


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Ajoute un X-Request-ID unique a chaque requete / Add unique X-Request-ID to each request."""

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID", str(uuid.uuid4()))
        request.state.request_id = request_id
        response: Response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


def create_app() -> FastAPI:
    configure_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Carnet de carburant personnel / Personal vehicle fuel log",
        lifespan=lifespan,
        docs_url="/docs" if settings.DEBUG else None,
        redoc_url="/redoc" if settings.DEBUG else None,
        openapi_url="/openapi.json" if settings.DEBUG else None,
    )

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Authorization", "Content-Type", "X-Requested-With"],
    )
    app.add_middleware(SecurityHeadersMiddleware)
    app.add_middleware(RequestIDMiddleware)

    app.include_router(api_router)

    @app.get("/api/")
    async def api_health():
        """Health check."""
        return {"app": settings.APP_NAME, "version": settings.APP_VERSION, "status": "running"}

    @app.get("/")
    async def root():
        return {"app": settings.APP_NAME, "version": settings.APP_VERSION, "status": "running"}

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("fuel_tracker.main:app", host="127.0.0.1", port=8000, reload=settings.DEBUG)
