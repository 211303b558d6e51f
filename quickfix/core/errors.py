from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass
class QuickFixError(Exception):
    """Request-level failure rendered as a JSON error body."""

    status_code: int
    message: str
    extra: dict[str, Any] = field(default_factory=dict)

    def __str__(self) -> str:
        return self.message

    def to_error(self) -> dict[str, Any]:
        return {"error": self.message, **self.extra}
