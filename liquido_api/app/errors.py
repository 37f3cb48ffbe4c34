from __future__ import annotations

from typing import Any, TYPE_CHECKING

if TYPE_CHECKING:
    from .models import IndexSpec


class LiquidoDbError(Exception):
    """Base class for errors raised while preparing the Liquido database."""


class IndexCreationError(LiquidoDbError):
    """MongoDB rejected a create-index request.

    Raised when existing documents already violate the uniqueness constraint,
    or when an index with the same name exists with different options.
    """

    def __init__(self, spec: "IndexSpec", cause: Exception):
        self.spec = spec
        self.code = getattr(cause, "code", None)
        self.details = getattr(cause, "details", None)
        super().__init__(f"Could not create index {spec.name} on {spec.collection}: {cause}")


class InvalidIndexDeclaration(LiquidoDbError):
    def __init__(self, messages: Any):
        self.messages = messages
        super().__init__(f"Invalid index declaration: {messages}")
