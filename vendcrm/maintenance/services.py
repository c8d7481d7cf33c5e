from __future__ import annotations

from datetime import timedelta

from django.db.models import Q
from django.utils import timezone

from vendcrm.maintenance.models import MaintenanceRecord


def change_status(record: MaintenanceRecord, status: str) -> MaintenanceRecord:
    """Set a record's status, keeping ``completed_date`` consistent with it."""
    if status == record.status:
        return record
    record.status = status
    if status == MaintenanceRecord.Status.DONE:
        record.completed_date = timezone.now()
    else:
        record.completed_date = None
    record.save(update_fields=["status", "completed_date", "updated_at"])
    return record


def upcoming_records(days: int = 30):
    """Open work scheduled, or machines due for service, within ``days``."""
    now = timezone.now()
    horizon = now + timedelta(days=days)
    open_statuses = [
        MaintenanceRecord.Status.PENDING,
        MaintenanceRecord.Status.IN_PROGRESS,
    ]
    return MaintenanceRecord.objects.filter(
        Q(status__in=open_statuses, scheduled_date__lte=horizon)
        | Q(next_maintenance_date__gte=now, next_maintenance_date__lte=horizon)
    ).order_by("scheduled_date", "id")
