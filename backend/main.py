"""Profile form FastAPI application entrypoint."""

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from backend.config import get_settings
from backend.routers import profile
from backend.services.profile_store import get_profile_store
from backend.supabase_client import close_supabase_client

_LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_LOG_DATEFMT = "%H:%M:%S"


class _JsonFormatter(logging.Formatter):
    """Render each record as a single JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "asctime": self.formatTime(record, self.datefmt),
            "name": record.name,
            "levelname": record.levelname,
            "message": record.getMessage(),
        }
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def _configure_logging() -> None:
    """Configure root logger based on ENV (dev=DEBUG, prod=INFO) and LOG_FORMAT."""
    settings = get_settings()
    level = logging.DEBUG if settings.env != "prod" else logging.INFO

    handler = logging.StreamHandler()
    if settings.log_format == "json":
        handler.setFormatter(_JsonFormatter(datefmt=_LOG_DATEFMT))
    else:
        handler.setFormatter(logging.Formatter(_LOG_FORMAT, datefmt=_LOG_DATEFMT))

    logging.basicConfig(level=level, handlers=[handler], force=True)


_configure_logging()

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application startup/shutdown lifecycle.

    Refuses to start when the store is not configured, then opens the
    shared store handle once for the lifetime of the process.
    """
    settings = get_settings()

    missing = settings.missing_store_settings()
    if missing:
        logger.error("Missing required store settings: %s", ", ".join(missing))
        raise RuntimeError(f"Missing required store settings: {', '.join(missing)}")

    store = get_profile_store()
    logger.info("Profile store ready (table=%s)", store.table)

    try:
        yield
    finally:
        close_supabase_client()
        get_profile_store.cache_clear()
        logger.info("Profile store closed")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Profile Form",
        description="Single-user profile form backed by Supabase",
        version="0.1.0",
        lifespan=lifespan,
    )

    app.include_router(profile.router)
    app.mount(
        "/assets",
        StaticFiles(directory=str(settings.assets_path)),
        name="assets",
    )

    return app


app = create_app()


@app.get("/api/health")
async def health_check() -> dict[str, str]:
    """Return application health status."""
    return {"status": "ok"}


def serve() -> None:
    """Run the application with uvicorn on the configured host and port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.server.host, port=settings.server.port)
