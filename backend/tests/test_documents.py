"""
Afterclass API: Document Helper Tests
======================================

What:  Identifier parsing and ObjectId-aware JSON encoding.
"""

from datetime import datetime, timezone

import pytest
from bson import ObjectId

from afterclass.documents import parse_object_id, to_json
from afterclass.exceptions import ValidationError


class TestParseObjectId:

    def test_valid_hex_string(self):
        oid = ObjectId()
        assert parse_object_id(str(oid)) == oid

    @pytest.mark.parametrize("value", ["", "123", "not-an-object-id", "z" * 24, "abcdefghijkl"])
    def test_malformed_string_rejected(self, value):
        with pytest.raises(ValidationError, match="Invalid id"):
            parse_object_id(value)

    @pytest.mark.parametrize("value", [None, 42, ["65f1c0a2b3d4e5f601234567"], {"$oid": "x"}])
    def test_non_string_rejected(self, value):
        """None in particular must not turn into a freshly generated id."""
        with pytest.raises(ValidationError):
            parse_object_id(value)

    def test_custom_message_and_field(self):
        with pytest.raises(ValidationError) as excinfo:
            parse_object_id("bad", message="Invalid order data", field="lessonIDs")
        assert excinfo.value.message == "Invalid order data"
        assert excinfo.value.context["field"] == "lessonIDs"


class TestToJson:

    def test_object_ids_become_hex_strings(self):
        lesson_id = ObjectId()
        ref = ObjectId()
        encoded = to_json({"_id": lesson_id, "lessonIDs": [ref], "topic": "Math"})
        assert encoded == {"_id": str(lesson_id), "lessonIDs": [str(ref)], "topic": "Math"}

    def test_datetime_becomes_iso_string(self):
        created = datetime(2024, 1, 15, 12, 0, tzinfo=timezone.utc)
        assert to_json({"createdAt": created}) == {"createdAt": "2024-01-15T12:00:00+00:00"}

    def test_list_of_documents(self):
        docs = [{"_id": ObjectId(), "price": 10}, {"_id": ObjectId(), "price": "12"}]
        encoded = to_json(docs)
        assert [d["price"] for d in encoded] == [10, "12"]
        assert all(isinstance(d["_id"], str) for d in encoded)
