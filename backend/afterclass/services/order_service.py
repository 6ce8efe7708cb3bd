"""
Afterclass API: Order Service
==============================

What:  Listing and creation of order documents.
How:   Validates the order payload, converts lesson ids to ObjectId, stamps
       `createdAt` and performs a single insert into the `orders` collection.
Who:   Called by the order route handlers.

Order document:
    {
        "name": "Alice",
        "phone": "123",
        "lessonIDs": [ObjectId(...), ...],
        "createdAt": datetime (UTC)
    }

Lesson ids are not checked against the `lessons` collection; an order may
reference a lesson that does not exist.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List

from pymongo.asynchronous.database import AsyncDatabase

from afterclass.database import ORDERS
from afterclass.documents import parse_object_id, to_json
from afterclass.exceptions import ValidationError
from afterclass.schemas.api import OrderCreated

logger = logging.getLogger(__name__)

ORDER_ERROR = "Invalid order data"


class OrderService:
    """Business logic for the `orders` collection. Orders are never mutated."""

    async def list_orders(self, db: AsyncDatabase) -> List[Dict[str, Any]]:
        """Return every order in store-native order."""
        orders = await db[ORDERS].find({}).to_list()
        return to_json(orders)

    def build_order(self, payload: Any) -> Dict[str, Any]:
        """
        Validate an order payload and build the document to insert.

        Requirements:
            name       truthy
            phone      truthy
            lessonIDs  non-empty list of ObjectId strings

        Raises:
            ValidationError: any requirement fails (→ 400 "Invalid order data")
        """
        if not isinstance(payload, dict):
            raise ValidationError(message=ORDER_ERROR)

        name = payload.get("name")
        phone = payload.get("phone")
        lesson_ids = payload.get("lessonIDs")

        if not name or not phone or not isinstance(lesson_ids, list) or not lesson_ids:
            raise ValidationError(message=ORDER_ERROR)

        return {
            "name": name,
            "phone": phone,
            "lessonIDs": [
                parse_object_id(lesson_id, message=ORDER_ERROR, field="lessonIDs")
                for lesson_id in lesson_ids
            ],
            "createdAt": datetime.now(timezone.utc),
        }

    async def create_order(self, db: AsyncDatabase, payload: Any) -> OrderCreated:
        """
        Insert a new order and return its id.

        Store failures are not caught; they reach the 500 handler.
        """
        order = self.build_order(payload)
        result = await db[ORDERS].insert_one(order)
        logger.info(
            "Order %s created with %d lesson(s)", result.inserted_id, len(order["lessonIDs"])
        )
        return OrderCreated(insertedId=str(result.inserted_id))


order_service = OrderService()
