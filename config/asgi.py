"""
ASGI config for vendcrm project.

It exposes the ASGI callable as a module-level variable named ``application``.

For more information on this file, see
https://docs.djangoproject.com/en/dev/howto/deployment/asgi/

"""

import os

from django.core.asgi import get_asgi_application

# If DJANGO_SETTINGS_MODULE is unset, select a sensible default based on BUILD_ENV
# Default to local settings for the local dev image, production otherwise.
if "DJANGO_SETTINGS_MODULE" not in os.environ:
    build_env = os.environ.get("BUILD_ENV", "production").lower()
    default_settings = (
        "config.settings.local"
        if build_env == "local"
        else "config.settings.production"
    )
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", default_settings)

django_application = get_asgi_application()

from channels.routing import ProtocolTypeRouter  # noqa: E402
from channels.routing import URLRouter  # noqa: E402
from django.conf import settings  # noqa: E402
from socketio import ASGIApp  # noqa: E402

from vendcrm.realtime.relay import ActivityRelay  # noqa: E402
from vendcrm.realtime.routing import websocket_urlpatterns  # noqa: E402
from vendcrm.realtime.socketio import create_socketio_server  # noqa: E402

relay = ActivityRelay.from_settings()


async def start_relay():
    if settings.ACTIVITY_RELAY_ENABLED:
        relay.start()


async def stop_relay():
    await relay.stop()


# Socket.IO must sit above the ProtocolTypeRouter because it uses BOTH:
# - HTTP long-polling (Engine.IO)
# - WebSocket upgrades
# Mount it at `/ws/activities/` to match the frontend `path`. Everything else,
# including the raw `/ws` WebSocket, falls through to the router.
application = ASGIApp(
    create_socketio_server(relay),
    other_asgi_app=ProtocolTypeRouter(
        {
            "http": django_application,
            "websocket": URLRouter(websocket_urlpatterns(relay)),
        },
    ),
    socketio_path="ws/activities",
    on_startup=start_relay,
    on_shutdown=stop_relay,
)
