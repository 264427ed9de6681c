"""
Credential service — application entry point.
"""

from __future__ import annotations

import logging
import sys
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.health import router as health_router
from api.middleware import register_exception_handlers, register_middleware
from auth.password import PasswordHasher
from auth.routes import router as auth_router
from config.settings import Settings, config
from database.session import Database

logging.basicConfig(
    level=logging.DEBUG if config.debug else logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s — %(message)s",
    stream=sys.stdout,
)
for _noisy in ("sqlalchemy.engine", "asyncio", "httpx", "httpcore"):
    logging.getLogger(_noisy).setLevel(logging.WARNING)
logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    database: Optional[Database] = None,
) -> FastAPI:
    settings = settings or config
    owns_database = database is None

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if app.state.database is None:
            app.state.database = Database(settings)
        db: Database = app.state.database

        if await db.ping():
            logger.info("Connected to database")
            if settings.create_tables:
                await db.create_tables()
        else:
            logger.error("Database connection failed; requests will return 500 until it recovers")

        logger.info("Application ready to accept requests.")
        try:
            yield
        finally:
            if owns_database:
                await db.dispose()
                logger.info("Database pool closed")

    app = FastAPI(
        title="Credential Service",
        version="1.0.0",
        description="User signup and login backed by a relational store.",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.database = database
    app.state.password_hasher = PasswordHasher(rounds=settings.bcrypt_rounds)

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middleware(app)
    register_exception_handlers(app, debug=settings.debug)

    # Routes
    app.include_router(health_router)
    app.include_router(auth_router)

    return app


app = create_app()

if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level="debug" if config.debug else "info",
    )
