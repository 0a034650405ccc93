from __future__ import annotations

# Standard library
import logging as _logging
from contextlib import asynccontextmanager
from typing import Any

# Third-party
import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# Local application imports
from api.errors import register_error_handlers
from api.health import router as health_router
from api.users import router as users_router
from api.wines import router as wines_router
from infrastructure.config import CORS_HEADERS, CORS_METHODS, get_settings
from infrastructure.persistence.factory import get_user_repository, get_wine_repository

_settings = get_settings()

# --- Basic logging configuration (minimal) ---
_logging.basicConfig(
    level=getattr(_logging, _settings.log_level, _logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
)

for _ln in ("startup", "api", "application"):
    _lg = _logging.getLogger(_ln)
    if _lg.level == 0:  # not set explicitly
        _lg.setLevel(getattr(_logging, _settings.log_level, _logging.INFO))


@asynccontextmanager
async def lifespan(_: FastAPI) -> Any:
    """Application lifecycle: wire repositories on startup, log shutdown."""
    logger = _logging.getLogger("startup")
    settings = get_settings()

    logger.info(
        "lifespan.startup",
        extra={
            "env": settings.app_env,
            "port": settings.port,
            "version": settings.app_version,
        },
    )

    wines = get_wine_repository()
    users = get_user_repository()
    logger.info(
        "lifespan.repositories_ready",
        extra={"wines": type(wines).__name__, "users": type(users).__name__},
    )

    logger.info("lifespan.ready", extra={"status": "serving"})
    yield
    logger.info("lifespan.shutdown", extra={"status": "cleanup"})


def create_app() -> FastAPI:
    """Build the BFF application."""
    settings = get_settings()

    application = FastAPI(
        title="Celleret Backend BFF",
        version=settings.app_version,
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.allowed_origins(),
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    register_error_handlers(application)

    application.include_router(health_router)
    application.include_router(users_router)
    application.include_router(wines_router)

    @application.get("/version")
    async def version() -> dict[str, str]:
        return {"version": get_settings().app_version}

    return application


app = create_app()


def main() -> None:
    """Run the BFF with uvicorn."""
    settings = get_settings()
    logger = _logging.getLogger("startup")
    logger.info(
        "server.start",
        extra={"host": settings.host, "port": settings.port, "env": settings.app_env},
    )
    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
