"""Inkwell Blog Backend - cached blog content API built on FastAPI."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import ORJSONResponse
from uvicorn.middleware.proxy_headers import ProxyHeadersMiddleware

from inkwell.configs import settings
from inkwell.errors import (
    CacheExceptionError,
    ContentError,
    DatabaseError,
    IndexNowError,
    cache_exception_handler,
    content_exception_handler,
    database_exception_handler,
    indexnow_exception_handler,
    validation_exception_handler,
)
from inkwell.middleware import (
    LoggingMiddleware,
    SecurityHeadersMiddleware,
    configure_cors,
    lifespan,
)
from inkwell.routes import (
    admin_posts_router,
    cache_router,
    categories_router,
    friend_links_router,
    pages_router,
    posts_router,
    tags_router,
)
from inkwell.schemas import HealthCheckResponse
from inkwell.schemas.cache import CacheHealthResponse
from inkwell.utils.helpers import today_str

app = FastAPI(
    title=settings.APP_NAME,
    description="Blog content API with a sliding-expiration content cache",
    version="1.0.0",
    lifespan=lifespan,
    swagger_ui_parameters={
        "docExpansion": "none",
        "operationsSorter": "method",
    },
)

configure_cors(app)

app.add_middleware(LoggingMiddleware)
app.add_middleware(SecurityHeadersMiddleware)
app.add_middleware(GZipMiddleware, minimum_size=1000)
app.add_middleware(ProxyHeadersMiddleware, trusted_hosts="*")

routes = [
    pages_router,
    posts_router,
    admin_posts_router,
    tags_router,
    categories_router,
    friend_links_router,
    cache_router,
]

_ = [app.include_router(router) for router in routes]

errors = [
    (CacheExceptionError, cache_exception_handler),
    (ContentError, content_exception_handler),
    (DatabaseError, database_exception_handler),
    (IndexNowError, indexnow_exception_handler),
    (RequestValidationError, validation_exception_handler),
]

_ = [app.add_exception_handler(exc_type, handler) for exc_type, handler in errors]


@app.get(
    "/health",
    tags=["🩺 Health"],
    summary="Health check endpoint",
    response_model=HealthCheckResponse,
    response_class=ORJSONResponse,
    responses={
        200: {
            "content": {
                "application/json": {
                    "example": {
                        "version": "1.0.0",
                        "status": "ok",
                        "timestamp": "2026-01-01 00:00:00",
                        "cache": {"backend": "in-memory", "status": "healthy"},
                    },
                },
            },
        },
    },
    operation_id="health_check",
)
async def health_check(request: Request) -> ORJSONResponse:
    """
    Report API and content cache health.

    Parameters
    ----------
    request : Request
        Current request context.

    Returns
    -------
    ORJSONResponse
        Version, overall status and cache details.
    """
    cache_health = await request.app.state.content_cache.health_check()
    status = "ok" if cache_health.get("status") == "healthy" else "degraded"

    response = HealthCheckResponse(
        version=app.version,
        status=status,
        timestamp=today_str(),
        cache=CacheHealthResponse(**cache_health),
    )
    return ORJSONResponse(response.model_dump())


if __name__ == "__main__":
    from uvicorn import run

    run(
        "inkwell.main:app",
        host="127.0.0.1",
        port=8000,
        log_level="info",
        reload=settings.DEBUG,
        loop="uvloop",
    )
