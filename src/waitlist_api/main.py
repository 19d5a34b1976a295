"""Application entrypoint."""

from fastapi import FastAPI
from starlette.exceptions import HTTPException as StarletteHTTPException

from waitlist_api.api.routers import health, waitlist
from waitlist_api.config import get_settings
from waitlist_api.logging import configure_logging
from waitlist_api.middleware import RequestLoggingMiddleware


def create_application() -> FastAPI:
    """Build and configure a FastAPI instance."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title=settings.app_name, version="0.1.0")
    app.add_middleware(RequestLoggingMiddleware)
    app.add_exception_handler(StarletteHTTPException, waitlist.method_not_allowed_handler)
    app.include_router(health.router)
    app.include_router(waitlist.router)
    return app


app = create_application()
