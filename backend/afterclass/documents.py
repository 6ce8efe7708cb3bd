"""
Afterclass API: Document Helpers
=================================

What:  Identifier parsing and JSON serialization for MongoDB documents.
How:   `parse_object_id` turns a client-supplied string into a bson ObjectId
       or raises ValidationError; `to_json` renders ObjectId values as hex
       strings so documents can be returned from route handlers.
"""

from typing import Any, Optional

from bson import ObjectId
from bson.errors import InvalidId
from fastapi.encoders import jsonable_encoder

from afterclass.exceptions import ValidationError


def parse_object_id(value: Any, message: str = "Invalid id", field: Optional[str] = None) -> ObjectId:
    """
    Parse a 24-character hex string into an ObjectId.

    Only strings are accepted. `ObjectId(None)` would mint a fresh id, so
    non-string input is rejected rather than passed through.

    Raises:
        ValidationError: the value is not a well-formed identifier (→ 400)
    """
    if not isinstance(value, str):
        raise ValidationError(message=message, field=field)
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ValidationError(message=message, field=field, context={"value": value})


def to_json(document: Any) -> Any:
    """Encode a document (or list of documents) with ObjectId rendered as str."""
    return jsonable_encoder(document, custom_encoder={ObjectId: str})
