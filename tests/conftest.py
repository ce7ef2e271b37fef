from types import SimpleNamespace

import bson
import pytest
from bson import ObjectId
from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from api.deps import get_store
from api.main import app
from models.store import Store


class FakeCursor:
    def __init__(self, documents):
        self._documents = documents

    async def to_list(self, length=None):
        return [dict(document) for document in self._documents[:length]]


class FakeMotorCollection:
    """In-memory stand-in for the parts of a Motor collection the store uses."""

    def __init__(self, name):
        self.name = name
        self.documents = []

    async def insert_one(self, document):
        document.setdefault("_id", ObjectId())
        # The driver encodes before sending; this raises the same errors
        bson.encode(document)
        self.documents.append(dict(document))
        return SimpleNamespace(inserted_id=document["_id"])

    def find(self, filter=None):
        filter = filter or {}
        matches = [
            document for document in self.documents
            if all(document.get(key) == value for key, value in filter.items())
        ]
        return FakeCursor(matches)

    async def find_one(self, filter):
        for document in self.find(filter)._documents:
            return dict(document)
        return None


class BrokenMotorCollection(FakeMotorCollection):
    """A collection whose every operation fails like an unreachable server."""

    async def insert_one(self, document):
        raise PyMongoError("connection refused")

    def find(self, filter=None):
        raise PyMongoError("connection refused")

    async def find_one(self, filter):
        raise PyMongoError("connection refused")


@pytest.fixture
def database():
    return SimpleNamespace(
        users=FakeMotorCollection("users"),
        exercises=FakeMotorCollection("exercises"),
    )


@pytest.fixture
def store(database):
    return Store(database)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def broken_store():
    return Store(SimpleNamespace(
        users=BrokenMotorCollection("users"),
        exercises=BrokenMotorCollection("exercises"),
    ))
