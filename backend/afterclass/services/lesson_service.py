"""
Afterclass API: Lesson Service
===============================

What:  Listing, lookup, search and partial update of lesson documents.
How:   Each method performs exactly one call against the `lessons` collection
       and returns JSON-ready data. Identifier parsing happens before the
       store is touched, so a malformed id never reaches MongoDB.
Who:   Called by the lesson route handlers.

Search semantics:
    A lesson matches when any of topic, location, price or space, converted
    to its string form, matches the query case-insensitively anywhere in the
    value. The query text is used as the regular expression verbatim; an empty
    query therefore matches every lesson.
"""

import logging
from typing import Any, Dict, List

from bson.errors import InvalidDocument
from pymongo.asynchronous.database import AsyncDatabase
from pymongo.errors import PyMongoError

from afterclass.database import LESSONS
from afterclass.documents import parse_object_id, to_json
from afterclass.exceptions import NotFoundError, ValidationError
from afterclass.schemas.api import UpdateAck

logger = logging.getLogger(__name__)

SEARCH_FIELDS = ("topic", "location", "price", "space")

UPDATE_ERROR = "Invalid id or update"


def build_search_filter(query: str) -> Dict[str, Any]:
    """
    Build the MongoDB filter for a lesson search.

    `$convert` renders numeric fields as strings so "10" finds a price of 10;
    missing or unconvertible values become "" instead of failing the query.
    """
    return {
        "$expr": {
            "$or": [
                {
                    "$regexMatch": {
                        "input": {
                            "$convert": {
                                "input": f"${field}",
                                "to": "string",
                                "onError": "",
                                "onNull": "",
                            }
                        },
                        "regex": query,
                        "options": "i",
                    }
                }
                for field in SEARCH_FIELDS
            ]
        }
    }


class LessonService:
    """
    Business logic for the `lessons` collection.

    Error Handling Strategy:
        Malformed ids raise ValidationError (400) and missing lessons raise
        NotFoundError (404). Store errors on reads propagate untouched to the
        500 handler. Updates are the exception: any failure, including a
        rejected write, is reported as a single 400 "Invalid id or update".
    """

    async def list_lessons(self, db: AsyncDatabase) -> List[Dict[str, Any]]:
        """Return every lesson in store-native order."""
        lessons = await db[LESSONS].find({}).to_list()
        return to_json(lessons)

    async def get_lesson(self, db: AsyncDatabase, lesson_id: str) -> Dict[str, Any]:
        """
        Retrieve a single lesson by id.

        Raises:
            ValidationError: lesson_id is not a valid ObjectId (→ 400)
            NotFoundError: no lesson has this id (→ 404)
        """
        oid = parse_object_id(lesson_id)
        lesson = await db[LESSONS].find_one({"_id": oid})
        if lesson is None:
            raise NotFoundError(
                message="Lesson not found", resource="lesson", resource_id=lesson_id
            )
        return to_json(lesson)

    async def search_lessons(self, db: AsyncDatabase, query: str = "") -> List[Dict[str, Any]]:
        """Return every lesson whose searchable fields contain `query`."""
        results = await db[LESSONS].find(build_search_filter(query or "")).to_list()
        logger.debug("Search %r matched %d lessons", query, len(results))
        return to_json(results)

    async def update_lesson(self, db: AsyncDatabase, lesson_id: str, updates: Any) -> UpdateAck:
        """
        Merge `updates` into the lesson with `$set`.

        Fields absent from `updates` are left untouched. Field names and values
        are not validated. A write that matches no document still succeeds.
        A missing body is treated as `{}`; the store decides whether an empty
        `$set` is accepted.

        Raises:
            ValidationError: bad id, non-object body, or the store rejected
            the write (→ 400)
        """
        oid = parse_object_id(lesson_id, message=UPDATE_ERROR)
        if updates is None:
            updates = {}
        if not isinstance(updates, dict):
            raise ValidationError(message=UPDATE_ERROR, field="body")

        try:
            result = await db[LESSONS].update_one({"_id": oid}, {"$set": updates})
        except (PyMongoError, InvalidDocument, OverflowError) as e:
            logger.warning("Update of lesson %s rejected: %s", lesson_id, e)
            raise ValidationError(
                message=UPDATE_ERROR, context={"error_type": type(e).__name__}
            )

        logger.info(
            "Lesson %s updated (fields=%s, matched=%s)",
            lesson_id,
            sorted(updates),
            getattr(result, "matched_count", None),
        )
        return UpdateAck(ok=True)


lesson_service = LessonService()
