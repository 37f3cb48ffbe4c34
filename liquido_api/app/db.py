from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import OperationFailure

from .config import config
from .errors import IndexCreationError
from .indexes import DISABLED_INDEXES, UNIQUE_INDEXES
from .models import IndexSpec

logger = logging.getLogger(__name__)

_client: MongoClient | None = None
_client_uri: Optional[str] = None


def get_client(uri: Optional[str] = None) -> MongoClient:
    """Return the shared client, rebuilding it when a different `uri` is asked for."""
    global _client, _client_uri
    if _client is not None and uri is not None and uri != _client_uri:
        close_client()
    if _client is None:
        _client_uri = uri or config.MONGO_URI
        _client = MongoClient(
            _client_uri,
            serverSelectionTimeoutMS=config.MONGO_SERVER_SELECTION_TIMEOUT_MS,
            appname="liquido-ensure-indexes",
        )
    return _client


def close_client() -> None:
    global _client, _client_uri
    if _client is not None:
        _client.close()
    _client = None
    _client_uri = None


def get_db(name: Optional[str] = None) -> Database:
    client = get_client()
    return client[name or config.default_db_name]


def ensure_indexes(db: Optional[Database] = None, specs: Iterable[IndexSpec] = UNIQUE_INDEXES) -> Dict[str, list[str]]:
    """Create the unique indexes in order and return the index names per collection.

    Stops at the first rejected index. Indexes created before it stay in place.
    """
    db = db if db is not None else get_db()
    created: Dict[str, list[str]] = {}
    for spec in specs:
        if spec.disabled or spec in DISABLED_INDEXES:
            raise ValueError(f"Refusing to apply disabled index {spec.name} on {spec.collection}")
        try:
            name = db[spec.collection].create_index(list(spec.keys), unique=spec.unique)
        except OperationFailure as exc:
            raise IndexCreationError(spec, exc) from exc
        logger.info("Ensured unique index %s on %s", name, spec.collection)
        created.setdefault(spec.collection, []).append(name)
    return created


def index_catalog(db: Database, coll_name: str) -> Dict[str, Any]:
    return db[coll_name].index_information()


def verify_indexes(db: Optional[Database] = None, specs: Iterable[IndexSpec] = UNIQUE_INDEXES) -> list[IndexSpec]:
    """Return the specs that have no matching unique index in the catalog."""
    db = db if db is not None else get_db()
    missing = []
    for spec in specs:
        catalog = index_catalog(db, spec.collection)
        if not any(spec.matches(info) for info in catalog.values()):
            logger.warning("Missing unique index %s on %s", spec.name, spec.collection)
            missing.append(spec)
    return missing


def find_applied_disabled(db: Optional[Database] = None) -> list[IndexSpec]:
    db = db if db is not None else get_db()
    applied = []
    for spec in DISABLED_INDEXES:
        catalog = index_catalog(db, spec.collection)
        if any(spec.matches(info) for info in catalog.values()):
            logger.warning("Disabled index %s is present on %s", spec.name, spec.collection)
            applied.append(spec)
    return applied
