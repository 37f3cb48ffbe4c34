"""Unique-index declarations for the Liquido collections.

Usage::

    liquido-ensure-indexes liquido-test
"""

from __future__ import annotations

from typing import Any, Iterable

from marshmallow import ValidationError
from pymongo import ASCENDING

from .errors import InvalidIndexDeclaration
from .models import IndexSpec
from .validators import IndexSpecSchema

UNIQUE_INDEX_DECLARATIONS: list[dict[str, Any]] = [
    {"collection": "users", "keys": [("email", ASCENDING)]},
    {"collection": "areas", "keys": [("title", ASCENDING)]},
    {"collection": "delegations", "keys": [("area", ASCENDING), ("fromUser", ASCENDING), ("toProxy", ASCENDING)]},
    {"collection": "ideas", "keys": [("title", ASCENDING)]},
    {"collection": "laws", "keys": [("title", ASCENDING)]},
]

# Declared but never applied. Whether one ballot per voter hash and law is
# still a wanted invariant has not been decided.
DISABLED_INDEX_DECLARATIONS: list[dict[str, Any]] = [
    {
        "collection": "ballots",
        "keys": [("initialLawId", ASCENDING), ("voterHash", ASCENDING)],
        "reason": "withheld until it is decided whether a voter may only hold one ballot per law",
    },
]


def load_index_specs(declarations: Iterable[dict[str, Any]]) -> list[IndexSpec]:
    schema = IndexSpecSchema(many=True)
    try:
        return schema.load(list(declarations))
    except ValidationError as exc:
        raise InvalidIndexDeclaration(exc.messages) from exc


UNIQUE_INDEXES: list[IndexSpec] = load_index_specs(UNIQUE_INDEX_DECLARATIONS)
DISABLED_INDEXES: list[IndexSpec] = load_index_specs(DISABLED_INDEX_DECLARATIONS)
