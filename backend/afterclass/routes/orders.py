"""
Afterclass API: Order Route Handlers
=====================================

What:  GET /orders (list) and POST /orders (create).
How:   The POST body is accepted as raw JSON so that every malformed payload
       is reported the same way (400 "Invalid order data") by OrderService.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends
from pymongo.asynchronous.database import AsyncDatabase

from afterclass.database import get_database
from afterclass.schemas.api import ErrorResponse, OrderCreated
from afterclass.services.order_service import order_service


router = APIRouter(tags=["Orders"])


@router.get(
    "/orders",
    summary="List all orders",
    response_model=List[Dict[str, Any]],
)
async def list_orders(db: AsyncDatabase = Depends(get_database)) -> List[Dict[str, Any]]:
    return await order_service.list_orders(db)


@router.post(
    "/orders",
    summary="Create a new order",
    response_model=OrderCreated,
    responses={400: {"description": "Invalid order data", "model": ErrorResponse}},
)
async def create_order(
    payload: Any = Body(
        default=None,
        examples=[{"name": "Alice", "phone": "123", "lessonIDs": ["65f1c0a2b3d4e5f601234567"]}],
    ),
    db: AsyncDatabase = Depends(get_database),
) -> OrderCreated:
    """
    Body:
        name: customer name (required)
        phone: contact number (required)
        lessonIDs: non-empty list of lesson ObjectId strings
    """
    return await order_service.create_order(db, payload)
