"""
Afterclass API: Document Store Connection
==========================================

What:  MongoDB client lifecycle and the FastAPI dependency that hands the
       database to route handlers.
How:   One pymongo AsyncMongoClient is opened during application startup,
       verified with a `ping`, and stored on `app.state`. Handlers receive the
       database through `Depends(get_database)`, which tests override with a
       mock store.
When:  Client is created once per process; the dependency runs per request.

Connection Policy:
    Fail fast. If the startup ping fails, the error propagates out of the
    lifespan handler and uvicorn aborts startup. There is no retry loop.
"""

import logging
import re
from typing import Tuple

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from afterclass.config import Settings

logger = logging.getLogger(__name__)

LESSONS = "lessons"
ORDERS = "orders"

_CREDENTIALS_RE = re.compile(r"//[^@/]+@")


def redact_uri(uri: str) -> str:
    """Hide `user:password@` in a connection string before it is logged."""
    return _CREDENTIALS_RE.sub("//***@", uri)


def create_client(config: Settings) -> AsyncMongoClient:
    """
    Build the client without contacting the server (pymongo connects lazily).

    Dates are decoded as UTC-aware datetimes so `createdAt` keeps its offset
    when rendered as JSON.
    """
    return AsyncMongoClient(
        config.mongodb_uri,
        serverSelectionTimeoutMS=config.mongodb_timeout_ms,
        tz_aware=True,
    )


async def connect(config: Settings) -> Tuple[AsyncMongoClient, AsyncDatabase]:
    """
    Open the process-wide client and select the configured database.

    Raises:
        pymongo.errors.PyMongoError: the server could not be reached. The
        client is closed before the error is re-raised.
    """
    client = create_client(config)
    try:
        await client.admin.command("ping")
    except Exception:
        logger.error(
            "Failed to connect to MongoDB at %s", redact_uri(config.mongodb_uri)
        )
        await client.close()
        raise

    db = client[config.mongodb_db]
    logger.info(
        "Connected to MongoDB %s, database '%s'",
        redact_uri(config.mongodb_uri),
        config.mongodb_db,
    )
    return client, db


async def disconnect(client: AsyncMongoClient) -> None:
    """Close all pooled connections. Called from the lifespan shutdown step."""
    await client.close()
    logger.info("MongoDB connection closed")


def get_database(request: Request) -> AsyncDatabase:
    """
    FastAPI dependency returning the shared database handle.

    Example usage in a route:
        @router.get("/lessons")
        async def list_lessons(db: AsyncDatabase = Depends(get_database)):
            return await lesson_service.list_lessons(db)
    """
    return request.app.state.db
