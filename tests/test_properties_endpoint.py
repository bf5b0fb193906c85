import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from property_browser.database.mongo import MongoConnection, get_mongo
from property_browser.errors import DatabaseConnectionError
from property_browser.main import app


@pytest.fixture
def client():
    yield TestClient(app)
    app.dependency_overrides.clear()


def _use(mongo):
    app.dependency_overrides[get_mongo] = lambda: mongo


def test_returns_documents(client, mongo_factory, sample_documents):
    mongo = mongo_factory(sample_documents)
    _use(mongo)

    resp = client.get("/api/properties")

    assert resp.status_code == 200
    documents = resp.json()["documents"]
    assert [d["_id"] for d in documents] == ["64f1c2a9e4b0a1b2c3d4e5f6", "64f1c2a9e4b0a1b2c3d4e5f7"]
    assert documents[1]["Apartment Name"] == "Sobha Dream Acres"
    mongo.connect.assert_awaited_once()


def test_caps_documents_at_500(client, mongo_factory):
    _use(mongo_factory([{"_id": str(i)} for i in range(800)]))

    resp = client.get("/api/properties")

    assert resp.status_code == 200
    assert len(resp.json()["documents"]) == 500


def test_empty_collection(client, mongo_factory):
    _use(mongo_factory([]))

    resp = client.get("/api/properties")

    assert resp.status_code == 200
    assert resp.json() == {"documents": []}


def test_missing_connection_string(client):
    _use(MongoConnection(None, "ccube_research", "apartment"))

    resp = client.get("/api/properties")

    assert resp.status_code == 500
    assert "MONGODB_URI" in resp.json()["error"]


def test_connection_failure(client, mongo_factory):
    mongo = mongo_factory([])
    mongo.connect = AsyncMock(side_effect=DatabaseConnectionError("Failed to connect to MongoDB: timeout"))
    _use(mongo)

    resp = client.get("/api/properties")

    assert resp.status_code == 500
    assert resp.json() == {"error": "Failed to connect to MongoDB: timeout"}


def test_query_failure(client, mongo_factory):
    mongo = mongo_factory([])
    mongo.collection.find.side_effect = RuntimeError("cursor exploded")
    _use(mongo)

    resp = client.get("/api/properties")

    assert resp.status_code == 500
    assert resp.json() == {"error": "cursor exploded"}


def test_query_string_is_ignored(client, mongo_factory):
    mongo = mongo_factory([{"_id": "1"}])
    _use(mongo)

    resp = client.get("/api/properties?limit=1&status=New+Launch")

    assert resp.status_code == 200
    mongo.collection.find.assert_called_once_with({})


def test_health(client):
    resp = client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "healthy"}


def test_api_banner(client):
    resp = client.get("/api")
    assert resp.json()["status"] == "running"


def test_nan_field_is_served_as_null(client, mongo_factory):
    _use(mongo_factory([{"_id": "1", "Apartment Name": "Tower", "Latitude": float("nan")}]))

    resp = client.get("/api/properties")

    assert resp.status_code == 200
    assert resp.json() == {"documents": [{"_id": "1", "Apartment Name": "Tower", "Latitude": None}]}
