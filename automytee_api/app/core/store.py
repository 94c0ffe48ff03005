"""
Document store wrapper around one MongoDB collection.

``DocumentStore`` is the only code that talks to a collection.  It
parses identifiers, stamps ``createdAt``/``updatedAt`` and converts
stored documents into plain dictionaries keyed by ``id``.  Driver
failures are re-raised as ``StoreUnavailable`` so that callers never
need to know about pymongo.

Every write touches exactly one document and is therefore atomic;
there is no version check, so concurrent updates of the same record
are last-writer-wins.
"""

import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from .db import get_collection
from .exceptions import InvalidId, StoreUnavailable

logger = logging.getLogger(__name__)

Document = Dict[str, Any]

NEWEST_FIRST = [("createdAt", DESCENDING), ("_id", DESCENDING)]


def utcnow() -> datetime:
    """Current UTC time truncated to the millisecond BSON can hold."""
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def parse_object_id(record_id: str) -> ObjectId:
    if not isinstance(record_id, str) or not ObjectId.is_valid(record_id):
        raise InvalidId(str(record_id))
    return ObjectId(record_id)


def _as_utc(value: Any) -> Any:
    # The driver hands back naive datetimes unless the client is tz-aware.
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def to_record(document: Document) -> Document:
    """Convert a stored document into a wire-ready record."""
    record: Document = {"id": str(document["_id"])}
    for key, value in document.items():
        if key == "_id":
            continue
        record[key] = _as_utc(value)
    return record


class DocumentStore:
    """CRUD access to a single named collection."""

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name

    @property
    def collection(self) -> Collection:
        return get_collection(self.collection_name)

    def _unavailable(self, action: str, exc: PyMongoError) -> StoreUnavailable:
        logger.error("MongoDB %s on %s failed: %s", action, self.collection_name, exc)
        return StoreUnavailable(f"Document store unavailable: {exc}")

    def find_all(self, limit: Optional[int] = None) -> List[Document]:
        """Return all documents, newest first.

        ``limit`` of ``None`` or below 1 means no cap; pymongo would read a
        negative limit as a single-batch request.
        """
        limit = max(limit or 0, 0)
        try:
            cursor = self.collection.find({}).sort(NEWEST_FIRST)
            if limit:
                cursor = cursor.limit(limit)
            return [to_record(doc) for doc in cursor]
        except PyMongoError as exc:
            raise self._unavailable("find", exc) from exc

    def find_by_id(self, record_id: str) -> Optional[Document]:
        oid = parse_object_id(record_id)
        try:
            doc = self.collection.find_one({"_id": oid})
        except PyMongoError as exc:
            raise self._unavailable("find_one", exc) from exc
        return to_record(doc) if doc is not None else None

    def insert(self, fields: Document) -> Document:
        now = utcnow()
        doc = dict(fields, createdAt=now, updatedAt=now)
        try:
            result = self.collection.insert_one(doc)
        except PyMongoError as exc:
            raise self._unavailable("insert_one", exc) from exc
        doc["_id"] = result.inserted_id
        return to_record(doc)

    def replace(self, record_id: str, fields: Document) -> Optional[Document]:
        """Overwrite the stored fields, keeping ``_id`` and ``createdAt``.

        Returns ``None`` when the document vanished in the meantime.
        """
        oid = parse_object_id(record_id)
        try:
            doc = self.collection.find_one_and_update(
                {"_id": oid},
                {"$set": dict(fields, updatedAt=utcnow())},
                return_document=ReturnDocument.AFTER,
            )
        except PyMongoError as exc:
            raise self._unavailable("find_one_and_update", exc) from exc
        return to_record(doc) if doc is not None else None

    def delete(self, record_id: str) -> bool:
        oid = parse_object_id(record_id)
        try:
            result = self.collection.delete_one({"_id": oid})
        except PyMongoError as exc:
            raise self._unavailable("delete_one", exc) from exc
        return result.deleted_count > 0
