"""
Afterclass API: FastAPI Application Factory
============================================

What:  Creates and configures the FastAPI application instance.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn afterclass.main:app) or the `afterclass`
       console script.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware Chain:                                  │
    │  ┌──────────┐ ┌──────────┐ ┌──────────┐ ┌────────┐  │
    │  │  Req ID  │→│ Logging  │→│   GZip   │→│  CORS  │  │
    │  └──────────┘ └──────────┘ └──────────┘ └────────┘  │
    │                                                     │
    │  Routes:                                            │
    │  /  /health  /lessons  /search  /orders  /images    │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ NotFound→404 │ PyMongoError→500   │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Ensure the image directory exists
    3. Connect to MongoDB and ping it (failure aborts startup)

    Shutdown:
    1. Close the MongoDB client
"""

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from pymongo.errors import PyMongoError

from afterclass import __version__
from afterclass.config import Settings, settings
from afterclass.database import connect, disconnect
from afterclass.exceptions import NotFoundError, ValidationError
from afterclass.logging_setup import setup_logging
from afterclass.middleware.logging import RequestLoggingMiddleware
from afterclass.middleware.request_id import RequestIDMiddleware, request_id_var
from afterclass.routes import health, lessons, orders

logger = logging.getLogger(__name__)

CORS_METHODS = ["GET", "POST", "PUT", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "X-Request-ID"]


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Startup opens the shared MongoDB client; shutdown closes it.

    A failed connection is not caught here: the exception leaves the
    lifespan, uvicorn reports "Application startup failed" and exits.
    """
    config: Settings = app.state.settings

    # ── Startup ───────────────────────────────────────────────────────────
    setup_logging(config.log_level)
    logger.info("Afterclass API %s starting up...", __version__)

    images = Path(config.images_dir)
    images.mkdir(parents=True, exist_ok=True)
    logger.info("Serving images from %s", images.resolve())

    client, db = await connect(config)
    app.state.mongo_client = client
    app.state.db = db

    logger.info("Server listening on %s:%d", config.backend_host, config.backend_port)

    yield

    # ── Shutdown ──────────────────────────────────────────────────────────
    logger.info("Afterclass API shutting down...")
    await disconnect(client)


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and JSON error bodies.

    Handler hierarchy:
        ValidationError         → 400 (bad id, bad update, bad order)
        RequestValidationError  → 400 (body is not valid JSON)
        NotFoundError           → 404
        PyMongoError            → 500 (store failure mid-request)
        Exception               → 500 (anything else)

    Store and unexpected errors are logged in full; the response only carries
    a generic message.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation_error(request: Request, exc: ValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Validation error: %s", rid, exc.message)
        content = {"error": exc.message, "code": "validation_error", "request_id": rid}
        if exc.context:
            content["details"] = jsonable_encoder(exc.context)
        return JSONResponse(status_code=400, content=content)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(request: Request, exc: RequestValidationError):
        rid = request_id_var.get("")
        logger.warning("[%s] Malformed request: %s", rid, exc.errors())
        return JSONResponse(
            status_code=400,
            content={
                "error": "Invalid request body",
                "code": "validation_error",
                "details": {"errors": jsonable_encoder(exc.errors())},
                "request_id": rid,
            },
        )

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        rid = request_id_var.get("")
        return JSONResponse(
            status_code=404,
            content={"error": exc.message, "code": "not_found", "request_id": rid},
        )

    @app.exception_handler(PyMongoError)
    async def handle_database_error(request: Request, exc: PyMongoError):
        rid = request_id_var.get("")
        logger.error("[%s] Database error: %s", rid, exc, exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "An internal error occurred. Please try again later.",
                "code": "server_error",
                "request_id": rid,
            },
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        rid = request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, exc, exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "An unexpected error occurred.",
                "code": "internal_server_error",
                "request_id": rid,
            },
            # served by ServerErrorMiddleware, outside RequestIDMiddleware
            headers={"X-Request-ID": rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(config: Optional[Settings] = None) -> FastAPI:
    """
    Create and configure the FastAPI application.

    Args:
        config: Settings to use; defaults to the module-level singleton.
                Tests pass their own to point at a temporary image directory.
    """
    config = config or settings

    app = FastAPI(
        title="Afterclass API",
        description="Browse, search and book after-school lessons.",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.settings = config

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → GZip → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(GZipMiddleware, minimum_size=500)
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    # ── Register Exception Handlers ───────────────────────────────────────
    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(health.router)
    app.include_router(lessons.router)
    app.include_router(orders.router)

    # Directory is created during startup, hence check_dir=False
    app.mount(
        "/images",
        StaticFiles(directory=config.images_dir, check_dir=False),
        name="images",
    )

    return app


app = create_app()


def run() -> None:
    """Entry point for the `afterclass` console script."""
    import uvicorn

    uvicorn.run(
        "afterclass.main:app",
        host=settings.backend_host,
        port=settings.backend_port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    run()
