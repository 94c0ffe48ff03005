"""
Generic CRUD service over one document collection.

``ResourceService`` implements list/get/create/update/delete once;
``ContactService`` and ``ProjectService`` only declare which
collection, field rules and read schema they use.  Every write goes
through the field rules in ``validation`` before reaching the store,
and services are the only callers of ``DocumentStore``.  The driver is
blocking, so every store call runs in the threadpool and a slow or
unreachable server never stalls the event loop.

Updates merge the supplied fields over the stored record and then
validate the merged record with the create rules.  Fields the caller
leaves out keep their stored value; fields set to ``null`` are cleared
(or reset to their default, for ``status`` and ``technologies``).
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Type

from pydantic import BaseModel
from starlette.concurrency import run_in_threadpool

from ..core.exceptions import FieldViolation, NotFound, ValidationError
from ..core.store import DocumentStore
from .validation import FieldRule, normalize, validate

logger = logging.getLogger(__name__)


class ResourceService:
    """Base class holding the CRUD logic shared by all resources."""

    resource_name: str = "Record"
    collection_name: str = ""
    rules: Tuple[FieldRule, ...] = ()
    read_schema: Type[BaseModel] = BaseModel

    @classmethod
    def store(cls) -> DocumentStore:
        return DocumentStore(cls.collection_name)

    @classmethod
    def _to_read(cls, record: Dict[str, Any]) -> BaseModel:
        return cls.read_schema.model_validate(record)

    @classmethod
    def _require_mapping(cls, payload: Any) -> Mapping[str, Any]:
        if not isinstance(payload, Mapping):
            raise ValidationError([FieldViolation("body", "type", "Request body must be a JSON object")])
        return payload

    @classmethod
    def _validated(cls, payload: Mapping[str, Any]) -> Dict[str, Any]:
        record = normalize(cls.rules, payload)
        violations = validate(cls.rules, record)
        if violations:
            logger.info(
                "Rejected %s payload: %s",
                cls.resource_name.lower(),
                ", ".join(f"{v.field}:{v.rule}" for v in violations),
            )
            raise ValidationError(violations)
        return record

    @classmethod
    async def list_records(cls, limit: Optional[int] = None) -> List[BaseModel]:
        """Return stored records, newest first.

        ``limit`` keeps only the most recent ``limit`` records; ``None``
        or ``0`` returns everything.  An empty collection yields an
        empty list.
        """
        records = await run_in_threadpool(cls.store().find_all, limit=limit)
        return [cls._to_read(r) for r in records]

    @classmethod
    async def get_by_id(cls, record_id: str) -> BaseModel:
        """Return one record.

        Raises ``InvalidId`` for a malformed identifier and ``NotFound``
        when nothing is stored under it.
        """
        record = await run_in_threadpool(cls.store().find_by_id, record_id)
        if record is None:
            raise NotFound(cls.resource_name, record_id)
        return cls._to_read(record)

    @classmethod
    async def create(cls, payload: Any) -> BaseModel:
        """Validate ``payload``, store it and return the stored record."""
        fields = cls._validated(cls._require_mapping(payload))
        record = await run_in_threadpool(cls.store().insert, fields)
        logger.info("Created %s %s", cls.resource_name.lower(), record["id"])
        return cls._to_read(record)

    @classmethod
    async def update(cls, record_id: str, payload: Any) -> BaseModel:
        """Merge ``payload`` into the stored record and save the result.

        Concurrent updates are not detected; the last write wins.
        """
        payload = cls._require_mapping(payload)
        store = cls.store()
        current = await run_in_threadpool(store.find_by_id, record_id)
        if current is None:
            raise NotFound(cls.resource_name, record_id)

        merged = {rule.name: current.get(rule.name) for rule in cls.rules}
        for rule in cls.rules:
            if rule.name in payload:
                merged[rule.name] = payload[rule.name]

        fields = cls._validated(merged)
        record = await run_in_threadpool(store.replace, record_id, fields)
        if record is None:
            # Deleted between the read and the write.
            raise NotFound(cls.resource_name, record_id)
        logger.info("Updated %s %s", cls.resource_name.lower(), record_id)
        return cls._to_read(record)

    @classmethod
    async def delete(cls, record_id: str) -> Dict[str, Any]:
        """Delete a record and return an empty success marker."""
        if not await run_in_threadpool(cls.store().delete, record_id):
            raise NotFound(cls.resource_name, record_id)
        logger.info("Deleted %s %s", cls.resource_name.lower(), record_id)
        return {}
