import asyncio
import json

from django.conf import settings
from django.core.management.base import BaseCommand
from django.utils.translation import gettext as _

from vendcrm.realtime.client import ActivityFeedClient


class Command(BaseCommand):
    help = _("Follow the realtime activity feed and print each activity")

    def add_arguments(self, parser):
        parser.add_argument("--url", default=settings.ACTIVITY_FEED_URL)
        parser.add_argument(
            "--capacity",
            type=int,
            default=settings.ACTIVITY_FEED_CAPACITY,
        )
        parser.add_argument(
            "--reconnect-delay",
            type=float,
            default=settings.ACTIVITY_FEED_RECONNECT_DELAY,
        )

    def handle(self, *args, **options):
        client = ActivityFeedClient(
            options["url"],
            capacity=options["capacity"],
            reconnect_delay=options["reconnect_delay"],
            on_activity=self._print_activity,
        )
        self.stdout.write(_("Following activities at %s") % options["url"])
        try:
            asyncio.run(client.run())
        except KeyboardInterrupt:
            self.stdout.write(self.style.WARNING(_("Stopped")))

    def _print_activity(self, record):
        self.stdout.write(json.dumps(record, sort_keys=True))
