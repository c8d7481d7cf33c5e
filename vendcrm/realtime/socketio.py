"""Socket.IO mirror of the activity feed for the frontend.

Current frontend convention:
- URL base: ws://<host>:8000
- Socket.IO path: /ws/activities/
- Event: ``activity``, data is the JSON-encoded activity (same text as ``/ws``)
- Auth: none, same contract as the raw WebSocket

The server instance is built per relay by :func:`create_socketio_server`, so
tests can spin one up without touching module globals.
"""

from __future__ import annotations

import logging
from typing import Any

import socketio

from vendcrm.realtime.relay import ActivityRelay

logger = logging.getLogger(__name__)

ACTIVITY_EVENT = "activity"


class SocketIOFeedConnection:
    def __init__(self, server: socketio.AsyncServer, sid: str, namespace: str = "/"):
        self.server = server
        self.sid = sid
        self.namespace = namespace
        self.is_open = True

    def __repr__(self):
        return f"<SocketIOFeedConnection sid={self.sid}>"

    async def send_text(self, text: str) -> None:
        await self.server.emit(ACTIVITY_EVENT, text, to=self.sid, namespace=self.namespace)


class ActivityNamespace(socketio.AsyncNamespace):
    def __init__(self, relay: ActivityRelay, namespace: str = "/"):
        super().__init__(namespace)
        self.relay = relay
        self._connections: dict[str, SocketIOFeedConnection] = {}

    async def on_connect(self, sid: str, environ: dict[str, Any], auth: Any | None = None):
        connection = SocketIOFeedConnection(self.server, sid, self.namespace)
        self._connections[sid] = connection
        self.relay.register(connection)
        logger.info("Socket.IO client connected to activity stream (%s)", sid)

    async def on_disconnect(self, sid: str, *args: Any):
        connection = self._connections.pop(sid, None)
        if connection is None:
            return
        connection.is_open = False
        self.relay.unregister(connection)
        logger.info("Socket.IO client disconnected from activity stream (%s)", sid)


def create_socketio_server(relay: ActivityRelay) -> socketio.AsyncServer:
    sio = socketio.AsyncServer(
        async_mode="asgi",
        cors_allowed_origins="*",
        logger=False,
        engineio_logger=False,
    )
    sio.register_namespace(ActivityNamespace(relay))
    return sio
