"""
Afterclass API: Liveness Routes
================================

What:  GET / (plain-text liveness string) and GET /health (JSON probe).
How:   Neither route touches the database; they report that the process is
       up and serving requests. Store reachability is checked once, at
       startup, where a failure stops the process.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

from afterclass import __version__
from afterclass.schemas.api import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/", response_class=PlainTextResponse, summary="Liveness string")
async def root() -> str:
    return f"Afterclass API {__version__} is running"


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
)
async def health_check() -> HealthResponse:
    return HealthResponse(status="ok")
