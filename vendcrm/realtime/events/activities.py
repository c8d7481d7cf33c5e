from __future__ import annotations

from typing import Any

from django.db.models import Q

from vendcrm.activities.models import Activity
from vendcrm.realtime.types import Cursor
from vendcrm.realtime.types import FeedRecord


def build_activity_payload(activity: Activity) -> dict[str, Any]:
    return {
        "id": activity.id,
        "customerId": activity.customer_id,
        "type": activity.type,
        "description": activity.description,
        "outcome": activity.outcome,
        "nextSteps": activity.next_steps,
        "contactMethod": activity.contact_method,
        "contactedBy": activity.contacted_by,
        "createdAt": activity.created_at.isoformat(),
    }


def activities_after(cursor: Cursor) -> list[FeedRecord]:
    """Return activities newer than ``cursor`` in insertion order."""

    queryset = Activity.objects.order_by("created_at", "id")
    if cursor.id is None:
        queryset = queryset.filter(created_at__gt=cursor.created_at)
    else:
        queryset = queryset.filter(
            Q(created_at__gt=cursor.created_at)
            | Q(created_at=cursor.created_at, id__gt=cursor.id),
        )

    return [
        FeedRecord(
            id=activity.id,
            created_at=activity.created_at,
            payload=build_activity_payload(activity),
        )
        for activity in queryset
    ]
