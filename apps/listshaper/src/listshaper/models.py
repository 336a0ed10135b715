"""Display-ready view types produced by the shaping layer."""

from __future__ import annotations

from dataclasses import dataclass, field

from .constants import SCOPE_ALL
from .records import Record


@dataclass
class Group:
    """Named bucket of records sharing one group-by value."""

    name: str
    records: list[Record] = field(default_factory=list)


@dataclass(frozen=True)
class FilterQuery:
    """Search text plus an optional scope label."""

    text: str = ""
    scope: str | None = None

    @property
    def is_unscoped(self) -> bool:
        return self.scope is None or self.scope.upper() == SCOPE_ALL

    @property
    def is_empty(self) -> bool:
        return self.text == "" and self.is_unscoped
