from __future__ import annotations

from typing import Any

import redis
from django.conf import settings
from django.db import connection
from django.db import transaction
from django.http import JsonResponse

from vendcrm.realtime.types import CursorPolicy


def check_db() -> dict[str, Any]:
    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1;")
            cursor.fetchone()
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    else:
        return {"ok": True}


def check_redis() -> dict[str, Any]:
    """Celery broker reachability, needed for the low-stock report."""
    url = getattr(settings, "REDIS_URL", None)
    if not url:
        return {"ok": False, "error": "REDIS_URL not configured"}
    try:
        redis.Redis.from_url(
            url,
            socket_timeout=0.5,
            socket_connect_timeout=0.5,
        ).ping()
    except Exception as exc:  # noqa: BLE001 - health must degrade, not crash
        return {"ok": False, "error": str(exc)}
    else:
        return {"ok": True}


def check_relay() -> dict[str, Any]:
    """Activity relay configuration as this process would start it."""
    info = {
        "enabled": bool(settings.ACTIVITY_RELAY_ENABLED),
        "poll_interval": float(settings.ACTIVITY_RELAY_POLL_INTERVAL),
        "cursor_policy": settings.ACTIVITY_RELAY_CURSOR_POLICY,
    }
    try:
        CursorPolicy(info["cursor_policy"])
    except ValueError:
        return {"ok": False, "error": "unknown cursor policy", **info}
    if info["poll_interval"] <= 0:
        return {"ok": False, "error": "poll interval must be positive", **info}
    return {"ok": True, **info}


COMPONENT_CHECKS = {
    "db": check_db,
    "redis": check_redis,
    "relay": check_relay,
}


# The view reports a dead database itself, so it must not run inside the
# request transaction that ATOMIC_REQUESTS opens.
@transaction.non_atomic_requests
def health(request):
    components = {name: check() for name, check in COMPONENT_CHECKS.items()}

    if not components["db"]["ok"]:
        status = "down"
    elif all(c["ok"] for c in components.values()):
        status = "ok"
    else:
        status = "degraded"

    return JsonResponse(
        {"status": status, "components": components},
        status=200 if status == "ok" else 503,
    )
