"""Follower for the activity feed.

Connects to the Socket.IO mount, keeps the most recent activities in a
bounded list (newest first) and reconnects after a fixed delay whenever the
connection closes or fails. There is no catch-up: records broadcast while
disconnected are not replayed.

The raw ``/ws`` endpoint carries the same text frames for browser clients.
This follower only speaks Socket.IO, since ``socketio.AsyncClient`` is already
in the stack and no plain WebSocket client library is.
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
from collections import deque
from collections.abc import Callable
from enum import Enum
from typing import Any

import socketio
from socketio.exceptions import SocketIOError

from vendcrm.realtime.socketio import ACTIVITY_EVENT

logger = logging.getLogger(__name__)


class ConnectionStatus(str, Enum):
    CONNECTING = "connecting"
    CONNECTED = "connected"
    DISCONNECTED = "disconnected"


class ActivityFeedClient:
    def __init__(
        self,
        url: str,
        *,
        capacity: int = 50,
        reconnect_delay: float = 5.0,
        socketio_path: str = "ws/activities",
        on_activity: Callable[[dict[str, Any]], None] | None = None,
    ):
        if capacity < 1:
            msg = "Capacity must be at least 1."
            raise ValueError(msg)
        self.url = url
        self.capacity = capacity
        self.reconnect_delay = reconnect_delay
        self.socketio_path = socketio_path
        self.on_activity = on_activity
        self.status = ConnectionStatus.DISCONNECTED
        self.reconnect_attempts = 0
        self._feed: deque[dict[str, Any]] = deque(maxlen=capacity)
        self._sio: socketio.AsyncClient | None = None
        self._stopped = asyncio.Event()

    @property
    def activities(self) -> list[dict[str, Any]]:
        return list(self._feed)

    def handle_message(self, data: Any) -> dict[str, Any] | None:
        """Parse one feed message and prepend it; malformed data is logged and dropped."""

        try:
            record = json.loads(data) if isinstance(data, (str, bytes, bytearray)) else data
        except ValueError:
            logger.exception("Error parsing activity message")
            return None
        if not isinstance(record, dict):
            logger.error("Ignoring activity message that is not an object: %r", record)
            return None

        self._feed.appendleft(record)
        if self.on_activity is not None:
            self.on_activity(record)
        return record

    async def _connect_once(self) -> None:
        sio = socketio.AsyncClient(reconnection=False)
        sio.on(ACTIVITY_EVENT, self.handle_message)

        @sio.event
        async def connect():
            self.status = ConnectionStatus.CONNECTED
            logger.info("Connected to activity feed at %s", self.url)

        @sio.event
        async def disconnect(*args):
            self.status = ConnectionStatus.DISCONNECTED
            logger.info("Disconnected from activity feed")

        self._sio = sio
        try:
            await sio.connect(
                self.url,
                socketio_path=self.socketio_path,
                transports=["websocket"],
            )
            await sio.wait()
        finally:
            self._sio = None

    async def run(self) -> None:
        """Follow the feed until :meth:`stop` is called."""

        self._stopped.clear()
        while not self._stopped.is_set():
            self.status = ConnectionStatus.CONNECTING
            try:
                await self._connect_once()
            except (SocketIOError, OSError):
                logger.warning("Activity feed connection error", exc_info=True)
            self.status = ConnectionStatus.DISCONNECTED
            if self._stopped.is_set():
                break

            self.reconnect_attempts += 1
            logger.info("Reconnecting to activity feed in %.1fs", self.reconnect_delay)
            with contextlib.suppress(asyncio.TimeoutError):
                await asyncio.wait_for(self._stopped.wait(), timeout=self.reconnect_delay)

    async def stop(self) -> None:
        self._stopped.set()
        if self._sio is not None:
            await self._sio.disconnect()
