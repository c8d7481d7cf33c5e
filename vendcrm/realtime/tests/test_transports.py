import json
from unittest import mock

import pytest
from asgiref.sync import async_to_sync
from channels.routing import URLRouter
from channels.testing import WebsocketCommunicator

from vendcrm.realtime.consumers import ActivityFeedConsumer
from vendcrm.realtime.relay import ActivityRelay
from vendcrm.realtime.routing import websocket_urlpatterns
from vendcrm.realtime.socketio import ACTIVITY_EVENT
from vendcrm.realtime.socketio import create_socketio_server
from vendcrm.realtime.tests.fakes import FakeConnection
from vendcrm.realtime.tests.fakes import FakeStore

# Consumers close stale DB connections on every event.
pytestmark = pytest.mark.django_db(transaction=True)


def test_websocket_client_receives_broadcasts_and_is_unregistered_on_close():
    relay = ActivityRelay(FakeStore())

    async def scenario():
        communicator = WebsocketCommunicator(
            ActivityFeedConsumer.as_asgi(relay=relay), "/ws"
        )
        connected, _ = await communicator.connect()
        assert connected
        assert len(relay.connections) == 1

        await relay.broadcast({"id": 7, "type": "call"})
        assert json.loads(await communicator.receive_from()) == {"id": 7, "type": "call"}

        await communicator.disconnect()
        assert relay.connections == frozenset()

    async_to_sync(scenario)()


def test_client_frames_are_ignored():
    relay = ActivityRelay(FakeStore())

    async def scenario():
        communicator = WebsocketCommunicator(
            ActivityFeedConsumer.as_asgi(relay=relay), "/ws"
        )
        await communicator.connect()
        await communicator.send_to(text_data='{"hello": "server"}')
        assert await communicator.receive_nothing()
        assert len(relay.connections) == 1
        await communicator.disconnect()

    async_to_sync(scenario)()


def test_ws_route_accepts_with_and_without_trailing_slash():
    relay = ActivityRelay(FakeStore())
    application = URLRouter(websocket_urlpatterns(relay))

    async def scenario():
        for path in ("/ws", "/ws/"):
            communicator = WebsocketCommunicator(application, path)
            connected, _ = await communicator.connect()
            assert connected
            await communicator.disconnect()

    async_to_sync(scenario)()
    assert relay.connections == frozenset()


def test_websocket_and_raw_connections_share_one_broadcast():
    relay = ActivityRelay(FakeStore())
    other = FakeConnection("other")
    relay.register(other)

    async def scenario():
        communicator = WebsocketCommunicator(
            ActivityFeedConsumer.as_asgi(relay=relay), "/ws"
        )
        await communicator.connect()
        delivered = await relay.broadcast({"id": 1})
        assert delivered == 2  # noqa: PLR2004
        assert json.loads(await communicator.receive_from()) == {"id": 1}
        await communicator.disconnect()

    async_to_sync(scenario)()
    assert other.received == [{"id": 1}]


def test_socketio_namespace_registers_and_emits_activity_event():
    relay = ActivityRelay(FakeStore())
    sio = create_socketio_server(relay)
    namespace = sio.namespace_handlers["/"]

    async def scenario():
        with mock.patch.object(sio, "emit", new=mock.AsyncMock()) as emit:
            await namespace.on_connect("sid-1", {})
            assert len(relay.connections) == 1

            await relay.broadcast({"id": 3})
            emit.assert_awaited_once_with(
                ACTIVITY_EVENT, '{"id": 3}', to="sid-1", namespace="/"
            )

        await namespace.on_disconnect("sid-1", "client disconnect")
        assert relay.connections == frozenset()
        # A second disconnect for the same sid is harmless.
        await namespace.on_disconnect("sid-1")

    async_to_sync(scenario)()
