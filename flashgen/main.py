# flashgen/main.py
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from flashgen.core import AppError
from flashgen.core.config import settings
from flashgen.core.exception_handlers import (
    app_error_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from flashgen.core.logging_config import configure_logging
from flashgen.middleware.request_logging import RequestLoggingMiddleware
from flashgen.routers.flashcards import router as flashcards_router
from flashgen.routers.generations import router as generations_router
from flashgen.routers.health import router as health_router
from flashgen.routers.performance import router as performance_router

configure_logging()


def _split_csv(value: str | None) -> list[str]:
    if not value:
        return []
    return [v.strip() for v in value.split(",") if v.strip()]


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name)

    app.add_middleware(RequestLoggingMiddleware)

    # ---- CORS (env-driven) ----
    # CORS_ALLOW_ORIGINS="http://localhost:3000,https://flashcards.example.com"
    allow_origins = _split_csv(settings.CORS_ALLOW_ORIGINS) or ["http://localhost:3000"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Exception handlers
    app.add_exception_handler(AppError, app_error_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # Routers
    app.include_router(health_router)
    app.include_router(generations_router)
    app.include_router(flashcards_router)
    if settings.PERFORMANCE_TEST_ENABLED:
        app.include_router(performance_router)

    return app


app = create_app()
