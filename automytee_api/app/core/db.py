"""
MongoDB integration.

This module owns the single process-wide ``MongoClient``.  The client
is created lazily by ``get_client`` on first use and shared by every
request afterwards; a lock makes sure that callers racing on a cold
start end up with the same client instead of opening one each.  The
client is only closed at application shutdown (``close_db``).

``init_db`` runs at startup: it refuses to continue without a
connection string and ensures the indexes used for newest-first
listings exist.
"""

import logging
import threading
from typing import Optional

from pymongo import DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from .config import settings

logger = logging.getLogger(__name__)

CONTACTS_COLLECTION = "contacts"
PROJECTS_COLLECTION = "projects"

_client: Optional[MongoClient] = None
_client_lock = threading.Lock()


def get_client() -> MongoClient:
    """Return the shared client, creating it on first call."""
    global _client
    if _client is not None:
        return _client
    with _client_lock:
        if _client is None:
            if not settings.mongodb_uri:
                raise RuntimeError("MONGODB_URI is not set; cannot connect to the document store")
            logger.info("Opening MongoDB client (database %s)", settings.mongodb_db)
            _client = MongoClient(
                settings.mongodb_uri,
                serverSelectionTimeoutMS=settings.mongodb_timeout_ms,
            )
    return _client


def get_database() -> Database:
    return get_client()[settings.mongodb_db]


def get_collection(name: str) -> Collection:
    return get_database()[name]


def ping() -> bool:
    """Return ``True`` when the server answers a ``ping`` command."""
    try:
        get_client().admin.command("ping")
    except PyMongoError as exc:
        logger.warning("MongoDB ping failed: %s", exc)
        return False
    return True


def init_db() -> None:
    """Validate configuration and prepare collections.

    A missing connection string is fatal.  An unreachable server is
    not: it is logged here and reported per request as
    ``StoreUnavailable`` until the server comes back.
    """
    if not settings.mongodb_uri:
        raise RuntimeError("MONGODB_URI environment variable is required")
    try:
        for name in (CONTACTS_COLLECTION, PROJECTS_COLLECTION):
            get_collection(name).create_index([("createdAt", DESCENDING), ("_id", DESCENDING)])
        logger.info("MongoDB indexes ensured")
    except PyMongoError as exc:
        logger.warning("Could not prepare MongoDB collections at startup: %s", exc)


def close_db() -> None:
    """Close the shared client, if one was opened."""
    global _client
    with _client_lock:
        if _client is not None:
            _client.close()
            _client = None
            logger.info("MongoDB client closed")
