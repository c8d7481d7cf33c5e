from django.urls import path

from vendcrm.realtime.consumers import ActivityFeedConsumer


def websocket_urlpatterns(relay):
    consumer = ActivityFeedConsumer.as_asgi(relay=relay)
    return [
        path("ws", consumer),
        path("ws/", consumer),
    ]
