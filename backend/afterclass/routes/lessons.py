"""
Afterclass API: Lesson Route Handlers
======================================

What:  GET /lessons, GET /lessons/{id}, PUT /lessons/{id} and GET /search.
How:   Extracts path, query and body values, delegates to LessonService,
       returns JSON.
"""

from typing import Any, Dict, List

from fastapi import APIRouter, Body, Depends, Query
from pymongo.asynchronous.database import AsyncDatabase

from afterclass.database import get_database
from afterclass.schemas.api import ErrorResponse, UpdateAck
from afterclass.services.lesson_service import lesson_service


router = APIRouter(tags=["Lessons"])


@router.get(
    "/lessons",
    summary="List all lessons",
    response_model=List[Dict[str, Any]],
)
async def list_lessons(db: AsyncDatabase = Depends(get_database)) -> List[Dict[str, Any]]:
    return await lesson_service.list_lessons(db)


@router.get(
    "/lessons/{lesson_id}",
    summary="Get a single lesson by ID",
    response_model=Dict[str, Any],
    responses={
        400: {"description": "Invalid id", "model": ErrorResponse},
        404: {"description": "Lesson not found", "model": ErrorResponse},
    },
)
async def get_lesson(
    lesson_id: str,
    db: AsyncDatabase = Depends(get_database),
) -> Dict[str, Any]:
    """
    Args:
        lesson_id: 24-character hex ObjectId. Anything else returns 400 before
                   the store is queried.
    """
    return await lesson_service.get_lesson(db, lesson_id)


@router.put(
    "/lessons/{lesson_id}",
    summary="Update any attribute of a lesson",
    response_model=UpdateAck,
    responses={400: {"description": "Invalid id or update", "model": ErrorResponse}},
)
async def update_lesson(
    lesson_id: str,
    updates: Any = Body(default=None),
    db: AsyncDatabase = Depends(get_database),
) -> UpdateAck:
    """
    Merge the request body into the lesson. Every field in the body overwrites
    or creates the same field on the stored document; other fields are kept.
    """
    return await lesson_service.update_lesson(db, lesson_id, updates)


@router.get(
    "/search",
    summary="Search lessons by topic, location, price or space",
    response_model=List[Dict[str, Any]],
)
async def search_lessons(
    q: str = Query(default="", description="Case-insensitive substring to look for"),
    db: AsyncDatabase = Depends(get_database),
) -> List[Dict[str, Any]]:
    return await lesson_service.search_lessons(db, q)
