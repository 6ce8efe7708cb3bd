"""CLI script to load lesson documents into the `lessons` collection.

Usage: afterclass-seed [--file PATH] [--drop]

Lessons have no creation endpoint, so a fresh database is filled with this
tool. Connection settings (MONGODB_URI, MONGODB_DB) are the server's.
"""

import argparse
import asyncio
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

from pymongo.asynchronous.database import AsyncDatabase

from afterclass.config import settings
from afterclass.database import LESSONS, connect, disconnect
from afterclass.logging_setup import setup_logging

logger = logging.getLogger(__name__)

DEFAULT_DATA = Path(__file__).resolve().parent / "data" / "lessons.json"


def load_lessons(path: Path) -> List[Dict[str, Any]]:
    """Read a JSON array of lesson objects. Raises ValueError on any other shape."""
    with open(path, encoding="utf-8") as fh:
        data = json.load(fh)
    if not isinstance(data, list) or not data:
        raise ValueError(f"{path} must contain a non-empty JSON array of lessons")
    if not all(isinstance(item, dict) for item in data):
        raise ValueError(f"{path} contains entries that are not JSON objects")
    return data


async def seed_lessons(db: AsyncDatabase, lessons: List[Dict[str, Any]], drop: bool = False) -> int:
    """Insert `lessons`, optionally dropping the collection first. Returns the insert count."""
    if drop:
        await db[LESSONS].drop()
        logger.info("Dropped collection '%s'", LESSONS)
    # insert_many adds _id to the dicts it is given
    result = await db[LESSONS].insert_many([dict(lesson) for lesson in lessons])
    return len(result.inserted_ids)


async def _run(path: Path, drop: bool) -> int:
    lessons = load_lessons(path)
    client, db = await connect(settings)
    try:
        return await seed_lessons(db, lessons, drop=drop)
    finally:
        await disconnect(client)


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(description="Seed the lessons collection")
    parser.add_argument("--file", type=Path, default=DEFAULT_DATA, help="JSON array of lessons")
    parser.add_argument("--drop", action="store_true", help="Drop existing lessons first")
    args = parser.parse_args(argv)

    setup_logging(settings.log_level)
    inserted = asyncio.run(_run(args.file, args.drop))
    logger.info("Inserted %d lesson(s) into %s.%s", inserted, settings.mongodb_db, LESSONS)


if __name__ == "__main__":
    main()
