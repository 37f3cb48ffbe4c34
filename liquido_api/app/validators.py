from __future__ import annotations

from typing import Any

from marshmallow import Schema, fields, post_load, validate

from .models import IndexSpec


class IndexSpecSchema(Schema):
    collection = fields.String(required=True, validate=validate.Length(min=1))
    keys = fields.List(
        fields.Tuple(
            (
                fields.String(validate=validate.Length(min=1)),
                fields.Integer(validate=validate.OneOf([1, -1])),
            )
        ),
        required=True,
        validate=validate.Length(min=1),
    )
    unique = fields.Boolean(load_default=True)
    reason = fields.String(load_default=None, allow_none=True)

    @post_load
    def make_spec(self, data: dict[str, Any], **kwargs: Any) -> IndexSpec:
        return IndexSpec(
            collection=data["collection"],
            keys=tuple((key, direction) for key, direction in data["keys"]),
            unique=data["unique"],
            reason=data["reason"],
        )
