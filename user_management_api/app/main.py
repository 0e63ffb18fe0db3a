"""
Main entrypoint for the User Management API.

This module assembles the FastAPI application, sets up logging, picks
the user repository and includes versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``, e.g.::

    uvicorn user_management_api.app.main:app --reload

The application title and version are provided via ``Settings`` from
``core.config``.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .core.config import settings
from .core.db import init_db
from .core.logging_config import setup_logging
from .repositories.user_repository import InMemoryUserRepository, SQLiteUserRepository, UserRepository
from .services.user_service import UserService


def build_repository() -> UserRepository:
    """Return the repository selected by ``settings.user_storage``."""
    if settings.user_storage == "memory":
        return InMemoryUserRepository()
    if settings.user_storage == "sqlite":
        return SQLiteUserRepository()
    raise ValueError(f"Unknown USER_STORAGE {settings.user_storage!r}; expected 'sqlite' or 'memory'")


def create_app(repository: Optional[UserRepository] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    repository : Optional[UserRepository]
        Storage for users.  When omitted, one is built from settings
        and, for SQLite, migrations are applied on startup.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Logging first so that everything below can log.
    setup_logging(settings.log_level, settings.log_file or None)
    logger = logging.getLogger(__name__)

    if repository is None:
        repository = build_repository()

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        if isinstance(repository, SQLiteUserRepository):
            init_db(repository.db_path)
        logger.info("Using %s for user storage", type(repository).__name__)
        yield

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug, lifespan=lifespan)
    app.state.user_service = UserService(repository)

    # Additional versions can be mounted with their own prefix.
    app.include_router(v1_router, prefix="/api/v1")

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
