"""Activity relay: polls the store and fans new records out to connections.

One relay is built per process (see ``config/asgi.py``) and shared by the raw
WebSocket consumer and the Socket.IO namespace. It owns the connection set
and the cursor; nothing else writes to either.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from collections.abc import Callable
from datetime import datetime
from typing import Any

from channels.db import database_sync_to_async
from django.conf import settings
from django.core.serializers.json import DjangoJSONEncoder
from django.utils import timezone

from vendcrm.realtime.types import Cursor
from vendcrm.realtime.types import CursorPolicy
from vendcrm.realtime.types import FeedConnection
from vendcrm.realtime.types import FeedRecord
from vendcrm.realtime.types import FetchRecords

logger = logging.getLogger(__name__)


def _fetch_activities() -> FetchRecords:
    from vendcrm.realtime.events.activities import activities_after

    return database_sync_to_async(activities_after)


class ActivityRelay:
    def __init__(
        self,
        fetch: FetchRecords | None = None,
        *,
        interval: float = 5.0,
        policy: CursorPolicy | str = CursorPolicy.MAX_SEEN,
        cursor: Cursor | None = None,
        clock: Callable[[], datetime] = timezone.now,
    ):
        if interval <= 0:
            msg = "Poll interval must be positive."
            raise ValueError(msg)
        self.fetch = fetch if fetch is not None else _fetch_activities()
        self.interval = interval
        self.policy = CursorPolicy(policy)
        self.cursor = cursor
        self.clock = clock
        self._connections: set[FeedConnection] = set()
        self._task: asyncio.Task | None = None

    @classmethod
    def from_settings(cls, fetch: FetchRecords | None = None) -> ActivityRelay:
        return cls(
            fetch,
            interval=settings.ACTIVITY_RELAY_POLL_INTERVAL,
            policy=settings.ACTIVITY_RELAY_CURSOR_POLICY,
        )

    # Connection registry

    def register(self, connection: FeedConnection) -> None:
        self._connections.add(connection)

    def unregister(self, connection: FeedConnection) -> None:
        self._connections.discard(connection)

    @property
    def connections(self) -> frozenset[FeedConnection]:
        return frozenset(self._connections)

    async def broadcast(self, payload: dict[str, Any]) -> int:
        """Send ``payload`` to every open connection.

        A failing connection is logged and left registered; the others still
        receive the message. Returns the number of successful sends.
        """

        text = json.dumps(payload, cls=DjangoJSONEncoder)
        delivered = 0
        for connection in list(self._connections):
            if not connection.is_open:
                continue
            try:
                await connection.send_text(text)
            except Exception:
                logger.exception("Failed to send activity to %r", connection)
            else:
                delivered += 1
        return delivered

    # Polling monitor

    def _initial_cursor(self) -> Cursor:
        if self.policy is CursorPolicy.MAX_SEEN:
            return Cursor(self.clock(), 0)
        return Cursor(self.clock())

    def _advance(self, records: list[FeedRecord]) -> Cursor:
        if self.policy is CursorPolicy.MAX_SEEN:
            last = records[-1]
            return Cursor(last.created_at, last.id)
        return Cursor(self.clock())

    async def poll_once(self) -> int:
        """Run one polling cycle and return how many records were relayed."""

        if self.cursor is None:
            self.cursor = self._initial_cursor()

        try:
            records = await self.fetch(self.cursor)
        except Exception:
            logger.exception("Error checking for new activities")
            return 0

        if not records:
            return 0

        logger.info("Relaying %d new activities", len(records))
        for record in records:
            await self.broadcast(record.payload)
        self.cursor = self._advance(records)
        return len(records)

    async def _run(self) -> None:
        logger.info(
            "Activity monitoring started (interval=%.1fs, cursor policy=%s)",
            self.interval,
            self.policy.value,
        )
        while True:
            await asyncio.sleep(self.interval)
            await self.poll_once()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start polling on the running event loop. Calling it twice is a no-op."""

        if self.running:
            return
        if self.cursor is None:
            self.cursor = self._initial_cursor()
        self._task = asyncio.get_running_loop().create_task(self._run())

    async def stop(self) -> None:
        task, self._task = self._task, None
        if task is not None:
            task.cancel()
            with contextlib.suppress(asyncio.CancelledError):
                await task
            logger.info("Activity monitoring stopped")
        self._connections.clear()
