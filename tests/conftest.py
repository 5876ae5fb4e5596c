import copy
import itertools

import pytest
from fastapi.testclient import TestClient

from finloan.database.store import DocumentStore, get_store
from finloan.main import app


class InMemoryStore(DocumentStore):
    """DocumentStore over plain lists, first match wins like MongoDB's natural order."""

    def __init__(self):
        self.collections = {}
        self.fail = False
        self._ids = itertools.count(1)

    def add(self, collection, doc):
        doc = dict(doc)
        doc.setdefault("id", f"{collection}-{next(self._ids)}")
        self.collections.setdefault(collection, []).append(doc)
        return doc

    def all(self, collection):
        return self.collections.get(collection, [])

    def _check(self):
        if self.fail:
            raise RuntimeError("store unavailable")

    def _matches(self, doc, filter):
        return all(doc.get(k) == v for k, v in filter.items())

    def _first(self, collection, filter):
        for doc in self.all(collection):
            if self._matches(doc, filter):
                return doc
        return None

    async def find(self, collection, filter):
        self._check()
        return [copy.deepcopy(d) for d in self.all(collection) if self._matches(d, filter)]

    async def find_one(self, collection, filter):
        self._check()
        doc = self._first(collection, filter)
        return copy.deepcopy(doc) if doc else None

    async def insert(self, collection, doc):
        self._check()
        return copy.deepcopy(self.add(collection, doc))

    async def find_one_and_update(self, collection, filter, patch):
        self._check()
        doc = self._first(collection, filter)
        if doc is None:
            return None
        doc.update(patch)
        return copy.deepcopy(doc)

    async def find_one_and_delete(self, collection, filter):
        self._check()
        doc = self._first(collection, filter)
        if doc is None:
            return None
        self.collections[collection].remove(doc)
        return copy.deepcopy(doc)


PERSONAL_LOAN = {
    "type": "personal",
    "description": "Personal loan",
    "interestRate": 10,
    "maxAmount": 500000,
    "tenure": 12,
    "imgUrl": "/images/personal.png",
}

HOME_LOAN = {
    "type": "home",
    "description": "Home loan",
    "interestRate": 8,
    "maxAmount": 5000000,
    "tenure": 240,
    "imgUrl": "/images/home.png",
}


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def catalog_store(store):
    store.add("services", PERSONAL_LOAN)
    store.add("services", HOME_LOAN)
    return store


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    yield TestClient(app, raise_server_exceptions=False)
    app.dependency_overrides = {}
