from __future__ import annotations

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI

from ads import router as ads_router
from auth import dependencies as auth_dependencies
from auth import router as auth_router
from core.db import Database
from core.errors import install_error_handlers
from core.logging_config import configure_logging
from core.settings import Settings

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Open the DB pool once per process.
    db: Database = app.state.db
    await db.connect()
    if app.state.settings.db_init_schema:
        await db.apply_schema()
        logger.info("Database schema applied.")
    try:
        yield
    finally:
        await db.close()


def create_app(settings: Settings | None = None, *, db: Database | None = None) -> FastAPI:
    settings = settings or Settings.from_env()
    configure_logging(settings.log_level)

    if db is None:
        db = Database(
            settings.require_database_url(),
            min_size=settings.db_pool_min,
            max_size=settings.db_pool_max,
            command_timeout=settings.db_command_timeout,
        )

    app = FastAPI(title="Marketplace API", lifespan=lifespan)
    app.state.settings = settings
    app.state.db = db
    install_error_handlers(app)

    app.include_router(auth_router.router, tags=["auth"])

    # Every route under /api requires a valid token.
    app.include_router(
        auth_router.protected_router,
        prefix="/api",
        tags=["auth"],
        dependencies=[Depends(auth_dependencies.get_current_user)],
    )
    app.include_router(
        ads_router.router,
        prefix="/api",
        tags=["ads"],
        dependencies=[Depends(auth_dependencies.get_current_user)],
    )

    @app.get("/health")
    def health() -> dict:
        return {"status": "ok"}

    return app


def run() -> None:
    settings = Settings.from_env()
    app = create_app(settings)
    logger.info("Server is running on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
