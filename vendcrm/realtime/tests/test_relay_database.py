from datetime import timedelta

import pytest
from asgiref.sync import async_to_sync
from django.utils import timezone

from tests.factories import create_activity
from vendcrm.realtime.events.activities import build_activity_payload
from vendcrm.realtime.relay import ActivityRelay
from vendcrm.realtime.tests.fakes import FakeConnection
from vendcrm.realtime.types import Cursor

pytestmark = pytest.mark.django_db(transaction=True)


def test_default_fetch_relays_stored_activity_once():
    moment = timezone.now().replace(microsecond=0) - timedelta(minutes=1)
    activity = create_activity(created_at=moment, description="Restocked lobby unit")
    relay = ActivityRelay(clock=lambda: moment - timedelta(seconds=1))
    client = FakeConnection()
    relay.register(client)

    assert async_to_sync(relay.poll_once)() == 1
    assert async_to_sync(relay.poll_once)() == 0

    assert client.received == [build_activity_payload(activity)]
    assert relay.cursor == Cursor(moment, activity.id)


def test_default_fetch_sees_rows_written_after_startup():
    moment = timezone.now().replace(microsecond=0) - timedelta(minutes=1)
    relay = ActivityRelay(clock=lambda: moment)
    client = FakeConnection()
    relay.register(client)

    assert async_to_sync(relay.poll_once)() == 0
    first = create_activity(created_at=moment)
    second = create_activity(first.customer, created_at=moment)

    assert async_to_sync(relay.poll_once)() == 2  # noqa: PLR2004
    assert [m["id"] for m in client.received] == [first.id, second.id]
