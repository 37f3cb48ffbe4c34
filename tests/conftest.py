from __future__ import annotations

import mongomock
import pytest

from liquido_api.app import db as db_module


@pytest.fixture
def mongo_client(monkeypatch):
    client = mongomock.MongoClient()
    monkeypatch.setattr(db_module, "_client", client)
    monkeypatch.setattr(db_module, "_client_uri", None)
    return client


@pytest.fixture
def mongo_db(mongo_client):
    return mongo_client["liquido-test"]
