from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class IndexSpec:
    """One uniqueness constraint to be enforced by MongoDB."""

    collection: str
    keys: tuple[tuple[str, int], ...]
    unique: bool = True
    reason: Optional[str] = field(default=None, compare=False)

    @property
    def name(self) -> str:
        # Same naming rule as the server, e.g. area_1_fromUser_1_toProxy_1
        return "_".join(f"{key}_{direction}" for key, direction in self.keys)

    @property
    def disabled(self) -> bool:
        return self.reason is not None

    def matches(self, info: dict[str, Any]) -> bool:
        """True when an ``index_information()`` entry enforces this spec."""
        return bool(info.get("unique")) == self.unique and list(info.get("key", [])) == list(self.keys)
