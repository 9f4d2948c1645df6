import copy
import itertools
from types import SimpleNamespace

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from config import Settings
from main import create_app


def _project(doc, projection):
    doc = copy.deepcopy(doc)
    if projection:
        for key, keep in projection.items():
            if not keep:
                doc.pop(key, None)
    return doc


def _matches(doc, query):
    return all(doc.get(k) == v for k, v in query.items())


class FakeCollection:
    """Just enough of pymongo's Collection for the API and seeding code."""

    def __init__(self):
        self.docs = []

    def find(self, query=None, projection=None):
        return iter([_project(d, projection) for d in self.docs if _matches(d, query or {})])

    def find_one(self, query=None, projection=None):
        return next(self.find(query, projection), None)

    def insert_one(self, doc):
        doc = copy.deepcopy(doc)
        doc.setdefault("_id", ObjectId())
        self.docs.append(doc)
        return SimpleNamespace(inserted_id=doc["_id"])

    def update_one(self, query, update, upsert=False):
        for doc in self.docs:
            if _matches(doc, query):
                before = copy.deepcopy(doc)
                doc.update(copy.deepcopy(update["$set"]))
                return SimpleNamespace(upserted_id=None, matched_count=1, modified_count=int(doc != before))
        if not upsert:
            return SimpleNamespace(upserted_id=None, matched_count=0, modified_count=0)
        inserted = self.insert_one({**query, **update["$set"]})
        return SimpleNamespace(upserted_id=inserted.inserted_id, matched_count=0, modified_count=0)


class FailingCollection:
    def __init__(self, exc):
        self.exc = exc

    def __getattr__(self, name):
        def fail(*args, **kwargs):
            raise self.exc
        return fail


class FakeDatabase:
    def __init__(self):
        self.collections = {}

    def __getitem__(self, name):
        return self.collections.setdefault(name, FakeCollection())


class FakeProvider:
    def __init__(self, db=None, error=None):
        self.db = db
        self.error = error
        self.calls = itertools.count()
        self.closed = False

    def get_database(self):
        next(self.calls)
        if self.error is not None:
            raise self.error
        return self.db

    def close(self):
        self.closed = True


PORTFOLIO = {
    "id": "portfolio",
    "title": "Portfolio Website",
    "shortDescription": "A personal site.",
    "overview": "Built with Next.js, Tailwind, and MongoDB.",
    "technologies": ["Next.js", "Tailwind", "MongoDB"],
    "github": "https://github.com/example/portfolio-website",
}

TASKOPS = {
    "id": "taskops-api",
    "title": "TaskOps API",
    "shortDescription": "Task management API.",
    "overview": "Flask and MongoDB REST API.",
    "technologies": ["Python", "Flask"],
    "github": "https://github.com/example/TaskOps-API",
}


@pytest.fixture
def settings():
    return Settings(mongodb_uri="mongodb://localhost:27017", openweather_api_key="test-key")


@pytest.fixture
def db():
    fake = FakeDatabase()
    fake["projects"].insert_one(PORTFOLIO)
    fake["projects"].insert_one(TASKOPS)
    return fake


@pytest.fixture
def provider(db):
    return FakeProvider(db)


@pytest.fixture
def client(settings, provider):
    app = create_app(settings, provider)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def failing_client(settings):
    """Build a client whose collections raise ``exc`` on every call."""
    def build(exc):
        db = FakeDatabase()
        db.collections["projects"] = FailingCollection(exc)
        db.collections["forms"] = FailingCollection(exc)
        return TestClient(create_app(settings, FakeProvider(db)))
    return build
