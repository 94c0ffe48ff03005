"""
Shared pytest fixtures.

MongoDB is replaced by mongomock: the ``mongo`` fixture makes the
lazily created client in ``core.db`` a fresh in-memory client and
drops the database afterwards.
"""

import os

os.environ.setdefault("MONGODB_URI", "mongodb://localhost:27017")

import mongomock
import pytest
from fastapi.testclient import TestClient

from automytee_api.app.core import db


@pytest.fixture
def mongo(monkeypatch):
    """In-memory MongoDB client installed as the shared handle."""
    mock_client = mongomock.MongoClient()
    monkeypatch.setattr(db.settings, "mongodb_uri", "mongodb://localhost:27017")
    monkeypatch.setattr(db, "MongoClient", lambda *args, **kwargs: mock_client)
    monkeypatch.setattr(db, "_client", None)
    yield mock_client
    mock_client.drop_database(db.settings.mongodb_db)


@pytest.fixture
def client(mongo):
    """TestClient with startup and shutdown hooks run against mongomock."""
    from automytee_api.app.main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def contact_payload():
    return {
        "fullName": "Ada Lovelace",
        "companyName": "Analytical Engines Ltd",
        "email": "ada@example.com",
        "projectType": "Industrial automation",
        "message": "We would like to automate our packaging line.",
    }


@pytest.fixture
def project_payload():
    return {
        "title": "Warehouse sorting line",
        "description": "Vision-guided parcel sorting for a regional hub.",
        "category": "Logistics",
        "image": "https://cdn.example.com/sorting.jpg",
        "technologies": ["PLC", "OpenCV", "Python"],
        "link": "https://example.com/case-studies/sorting",
        "status": "completed",
    }
