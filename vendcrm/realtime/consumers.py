from __future__ import annotations

import logging

from channels.generic.websocket import AsyncWebsocketConsumer

from vendcrm.realtime.relay import ActivityRelay

logger = logging.getLogger(__name__)


class ActivityFeedConsumer(AsyncWebsocketConsumer):
    """Plain WebSocket endpoint for the activity feed.

    No sub-protocol and no auth. Every server frame is one JSON activity;
    frames sent by the client are ignored.
    """

    def __init__(self, *args, relay: ActivityRelay, **kwargs):
        super().__init__(*args, **kwargs)
        self.relay = relay
        self.is_open = False

    def __repr__(self):
        return f"<ActivityFeedConsumer client={self._peer()}>"

    def _peer(self) -> str:
        client = getattr(self, "scope", {}).get("client")
        if not client:
            return "unknown"
        host, port = client
        return f"{host}:{port}"

    async def connect(self):
        await self.accept()
        self.is_open = True
        self.relay.register(self)
        logger.info("Client connected to activity stream (%s)", self._peer())

    async def disconnect(self, code):
        self.is_open = False
        self.relay.unregister(self)
        logger.info("Client disconnected from activity stream (%s)", self._peer())

    async def receive(self, text_data=None, bytes_data=None):
        logger.debug("Ignoring client frame on activity stream (%s)", self._peer())

    async def send_text(self, text: str) -> None:
        await self.send(text_data=text)
