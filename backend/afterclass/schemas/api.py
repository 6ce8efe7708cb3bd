"""
Afterclass API: Request/Response Schemas
=========================================

What:  Pydantic models for the fixed-shape parts of the API contract.
How:   Lessons and orders are schema-free documents and are returned as plain
       dicts; only acknowledgements, errors and the health probe have a fixed
       shape, and those are described here for OpenAPI docs and serialization.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UpdateAck(BaseModel):
    """Returned by PUT /lessons/{id} once the merge has been sent to the store."""
    ok: bool = Field(default=True, description="Always true on success")


class OrderCreated(BaseModel):
    """Returned by POST /orders."""
    insertedId: str = Field(description="Hex ObjectId assigned to the new order")


class HealthResponse(BaseModel):
    status: str = Field(default="ok", description="Liveness status")


class ErrorResponse(BaseModel):
    """
    What:  Error body for every explicitly handled failure.

    Example:
        {
            "error": "Invalid order data",
            "code": "validation_error",
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Human-readable error message")
    code: str = Field(description="Machine-readable error code")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")
