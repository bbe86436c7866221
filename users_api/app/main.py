"""
Application factory for the Users API.

``create_app`` wires one FastAPI application around one ``UserStore``:
settings and the store live on ``app.state``, the middleware chain and
the error envelope are installed, and the routers are mounted.  Tests
call it with their own store; the module level ``app`` is the instance
uvicorn serves (``uvicorn users_api.app.main:app --port 3000``).

Middleware order, outermost first: access log, CORS, error boundary.
The error boundary therefore sits closest to the handlers, and the 500
responses it produces still receive CORS headers and an access line.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .api.router import router as api_router
from .core.config import Settings, settings
from .core.errors import register_exception_handlers
from .core.logging_config import setup_logging
from .core.middleware import error_boundary, log_requests
from .services.user_store import UserStore


def create_app(store: Optional[UserStore] = None, app_settings: Optional[Settings] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    store : Optional[UserStore]
        Store the application should serve.  A freshly seeded store is
        created when omitted.
    app_settings : Optional[Settings]
        Settings to use instead of the module level ``settings``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    app_settings = app_settings or settings
    setup_logging(app_settings.log_level, app_settings.log_file or None)

    app = FastAPI(title=app_settings.project_name, version=app_settings.api_version)
    app.state.settings = app_settings
    app.state.store = store if store is not None else UserStore(id_strategy=app_settings.id_strategy)

    # add_middleware/middleware("http") prepend, so register innermost first.
    app.middleware("http")(error_boundary)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=app_settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)
    app.include_router(api_router)

    return app


# Served by run.py and by ``uvicorn users_api.app.main:app``.
app = create_app()
