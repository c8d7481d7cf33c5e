import asyncio

from asgiref.sync import async_to_sync


def test_lifespan_starts_and_stops_activity_relay(settings):
    settings.ACTIVITY_RELAY_ENABLED = True
    from config import asgi

    async def scenario():
        inbox: asyncio.Queue = asyncio.Queue()
        outbox: asyncio.Queue = asyncio.Queue()
        app = asyncio.create_task(
            asgi.application(
                {"type": "lifespan", "asgi": {"version": "3.0"}},
                inbox.get,
                outbox.put,
            ),
        )

        await inbox.put({"type": "lifespan.startup"})
        started = await asyncio.wait_for(outbox.get(), timeout=2)
        running_after_startup = asgi.relay.running

        await inbox.put({"type": "lifespan.shutdown"})
        stopped = await asyncio.wait_for(outbox.get(), timeout=2)
        await asyncio.wait_for(app, timeout=2)
        return started, running_after_startup, stopped

    started, running_after_startup, stopped = async_to_sync(scenario)()

    assert started == {"type": "lifespan.startup.complete"}
    assert running_after_startup is True
    assert stopped == {"type": "lifespan.shutdown.complete"}
    assert asgi.relay.running is False


def test_lifespan_leaves_relay_idle_when_disabled(settings):
    settings.ACTIVITY_RELAY_ENABLED = False
    from config import asgi

    async def scenario():
        inbox: asyncio.Queue = asyncio.Queue()
        outbox: asyncio.Queue = asyncio.Queue()
        app = asyncio.create_task(
            asgi.application({"type": "lifespan"}, inbox.get, outbox.put),
        )
        await inbox.put({"type": "lifespan.startup"})
        await asyncio.wait_for(outbox.get(), timeout=2)
        running = asgi.relay.running
        await inbox.put({"type": "lifespan.shutdown"})
        await asyncio.wait_for(app, timeout=2)
        return running

    assert async_to_sync(scenario)() is False
