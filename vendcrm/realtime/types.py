from __future__ import annotations

from collections.abc import Awaitable
from collections.abc import Callable
from dataclasses import dataclass
from dataclasses import field
from datetime import datetime
from enum import Enum
from typing import Any
from typing import Protocol


class CursorPolicy(str, Enum):
    # Advance to the (created_at, id) of the last row seen.
    MAX_SEEN = "max_seen"
    # Advance to the wall clock after a non-empty batch.
    NOW = "now"


@dataclass(frozen=True)
class Cursor:
    """Position of the relay in the activity table.

    With ``id`` set, rows strictly after ``(created_at, id)`` are new. With
    ``id`` left as ``None`` only ``created_at`` is compared.
    """

    created_at: datetime
    id: int | None = None


@dataclass(frozen=True)
class FeedRecord:
    id: int
    created_at: datetime
    payload: dict[str, Any] = field(hash=False)


class FeedConnection(Protocol):
    """Anything the relay can push serialized records to."""

    @property
    def is_open(self) -> bool: ...

    async def send_text(self, text: str) -> None: ...


FetchRecords = Callable[[Cursor], Awaitable[list[FeedRecord]]]
