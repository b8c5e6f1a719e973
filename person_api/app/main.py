"""
Main entrypoint for the Person API.

This module assembles the FastAPI application, sets up logging and
includes the versioned routers.  The ``create_app`` function builds
and configures the app, which is then instantiated at module import
time as ``app``, e.g.::

    uvicorn person_api.app.main:app --reload

Routes are served under ``/api/v1`` and ``/api/v2``; version 1 is also
reachable without a version segment under ``/api``.
"""

from typing import Optional

from fastapi import FastAPI

from .api.v1.router import router as v1_router
from .api.v2.router import router as v2_router
from .core.config import Settings, settings as default_settings
from .core.errors import install_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import CaseInsensitiveQueryMiddleware
from .core.store import init_store


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the environment driven
        module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that startup below can
    # safely log messages.
    setup_logging(settings.log_level, settings.log_file)

    app = FastAPI(title=settings.project_name, version=settings.api_version, debug=settings.debug)
    app.state.settings = settings

    install_exception_handlers(app)
    app.add_middleware(CaseInsensitiveQueryMiddleware)

    app.include_router(v1_router, prefix="/api/v1")
    app.include_router(v2_router, prefix="/api/v2")
    # Unversioned requests get the default version.
    app.include_router(v1_router, prefix="/api")

    @app.on_event("startup")
    async def startup_event() -> None:
        init_store(seed=settings.seed_sample_data)

    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
