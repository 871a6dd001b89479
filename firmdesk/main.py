"""FastAPI application entry point.

Wiring only: lifespan, exception handlers, middleware, routers.
No business logic here. See firmdesk.core.lifespan and
firmdesk.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and clear
the get_settings cache) before importing. A missing SECRET_KEY or DATABASE_URL
fails here, before the process serves any request.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from slowapi import _rate_limit_exceeded_handler
from slowapi.errors import RateLimitExceeded

from firmdesk.api.v1 import api_router
from firmdesk.core.config import get_settings
from firmdesk.core.exception_handlers import register_exception_handlers
from firmdesk.core.lifespan import create_lifespan
from firmdesk.core.limiter import limiter
from firmdesk.middleware import RequestIDMiddleware, RequestSizeLimitMiddleware

# Headroom for multipart boundaries and form fields around the file itself.
MULTIPART_OVERHEAD = 64 * 1024


def create_app() -> FastAPI:
    """Build and return the FastAPI application."""
    settings = get_settings()
    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    limiter.enabled = settings.rate_limit_enabled
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

    register_exception_handlers(app)

    # First added = innermost. Order (outer to inner): size limit, request ID, CORS.
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)
    app.add_middleware(
        RequestSizeLimitMiddleware,
        max_bytes=settings.max_upload_size + MULTIPART_OVERHEAD,
    )

    app.include_router(api_router, prefix="/api")
    return app


app = create_app()
