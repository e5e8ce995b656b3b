"""Shared pytest fixtures for awardops tests."""

import copy

import pytest
from fastapi.testclient import TestClient

from awardops.config import StoreConfig
from awardops.store.session import StoreError

# Award relations the real store expands when the award fields ask for them
AWARD_RELATIONS = {
    "category": "award_categories",
    "participant_nominee": "participants",
    "team_nominee": "teams",
}


class InMemoryStore:
    """Stand-in for StoreSession holding collections in memory.

    Honors the ceremony filter and expands award relations stored as bare
    ids, like the real store does for the requested relation fields.
    """

    def __init__(self, collections=None):
        self.collections = {name: list(items) for name, items in (collections or {}).items()}
        self.calls = []
        self.fail_with = None
        self.closed = False

    def _check(self, method, collection):
        self.calls.append((method, collection))
        if self.fail_with is not None:
            raise self.fail_with

    def _find(self, collection, item_id):
        for item in self.collections.get(collection, []):
            if item.get("id") == item_id:
                return item
        return None

    def _expand(self, item):
        expanded = copy.deepcopy(item)
        for field, collection in AWARD_RELATIONS.items():
            value = expanded.get(field)
            if isinstance(value, int):
                related = self._find(collection, value)
                expanded[field] = copy.deepcopy(related) if related else {"id": value}
        return expanded

    def list_items(self, collection, params):
        self._check("list", collection)
        self.last_params = params
        items = self.collections.get(collection, [])

        ceremony = params.get("filter[ceremony][_eq]")
        if ceremony is not None:
            items = [item for item in items if str(item.get("ceremony")) == ceremony]

        if collection == "awards":
            return [self._expand(item) for item in items]
        return copy.deepcopy(items)

    def create_item(self, collection, data):
        self._check("create", collection)
        items = self.collections.setdefault(collection, [])
        item = {"id": max((i["id"] for i in items), default=0) + 1, **data}
        items.append(item)
        return copy.deepcopy(item)

    def update_item(self, collection, item_id, data):
        self._check("update", collection)
        item = self._find(collection, item_id)
        if item is None:
            raise StoreError(403, '{"errors":[{"message":"You don\'t have permission"}]}')
        item.update(data)
        return copy.deepcopy(item)

    def close(self):
        self.closed = True


@pytest.fixture
def store_config():
    """Store configuration pointing at a dummy endpoint."""
    return StoreConfig(endpoint="https://cms.example.test/", credential="static-token")


@pytest.fixture
def store():
    """Empty in-memory store."""
    return InMemoryStore()


@pytest.fixture
def client(store, store_config):
    """API client whose store session is the in-memory store."""
    from awardops.api.app import create_app, get_store_session

    app = create_app(store_config)

    def override_get_store():
        yield store

    app.dependency_overrides[get_store_session] = override_get_store
    return TestClient(app)


@pytest.fixture
def make_store():
    """Factory for in-memory stores seeded with collections."""
    return InMemoryStore
