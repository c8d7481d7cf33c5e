"""Dashboard aggregates computed from the CRM tables.

Volumes are small (one sales team), so most rollups are done in Python over
``values()`` rows rather than with database-specific date functions.
"""

from __future__ import annotations

import csv
import io
import json
from collections import defaultdict
from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from django.db.models import Sum
from django.utils import timezone

from vendcrm.activities.models import Activity
from vendcrm.customers.models import Customer
from vendcrm.sales.models import Opportunity

UNASSIGNED_TERRITORY = "Unassigned"
WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
ZERO = Decimal("0.00")


def territory_coverage() -> list[dict[str, Any]]:
    revenue_by_customer = {
        row["customer_id"]: row["total"] or ZERO
        for row in Opportunity.objects.order_by()
        .values("customer_id")
        .annotate(total=Sum("value"))
    }
    rows: dict[str, dict[str, Any]] = {}
    for customer in Customer.objects.only("id", "service_territory", "machine_types"):
        territory = customer.service_territory or UNASSIGNED_TERRITORY
        row = rows.setdefault(
            territory,
            {
                "territory": territory,
                "customer_count": 0,
                "machine_count": 0,
                "total_revenue": ZERO,
            },
        )
        row["customer_count"] += 1
        row["machine_count"] += customer.machine_count
        row["total_revenue"] += revenue_by_customer.get(customer.pk, ZERO)
    return sorted(rows.values(), key=lambda r: r["territory"])


def sales_overview() -> dict[str, Any]:
    opportunities = list(
        Opportunity.objects.order_by().values("stage", "value", "close_date", "created_at")
    )
    stage_counts = {stage: 0 for stage in Opportunity.Stage.values}
    revenue_by_month: dict[str, Decimal] = defaultdict(lambda: ZERO)
    won = lost = 0
    total_value = ZERO
    for opp in opportunities:
        stage_counts[opp["stage"]] = stage_counts.get(opp["stage"], 0) + 1
        total_value += opp["value"]
        if opp["stage"] == Opportunity.Stage.CLOSED_WON:
            won += 1
            closed_at = timezone.localtime(opp["close_date"] or opp["created_at"])
            revenue_by_month[f"{closed_at:%Y-%m}"] += opp["value"]
        elif opp["stage"] == Opportunity.Stage.CLOSED_LOST:
            lost += 1
    decided = won + lost
    return {
        "stage_counts": stage_counts,
        "revenue_by_month": [
            {"month": month, "revenue": revenue_by_month[month]}
            for month in sorted(revenue_by_month)
        ],
        "won": won,
        "lost": lost,
        "win_rate": round(won / decided, 4) if decided else None,
        "average_deal_value": (
            (total_value / len(opportunities)).quantize(ZERO) if opportunities else ZERO
        ),
    }


def activity_heatmap() -> list[dict[str, Any]]:
    """Activity counts per (weekday, hour) in the server's time zone."""
    counts: dict[tuple[int, int], int] = defaultdict(int)
    for created_at in Activity.objects.order_by().values_list("created_at", flat=True):
        local = timezone.localtime(created_at)
        counts[(local.weekday(), local.hour)] += 1
    return [
        {"weekday": WEEKDAYS[day], "hour": hour, "count": count}
        for (day, hour), count in sorted(counts.items())
    ]


def _csv_cell(value: Any) -> Any:
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ";".join(
            json.dumps(v, default=str) if isinstance(v, dict) else str(v) for v in value
        )
    if isinstance(value, dict):
        return json.dumps(value, default=str)
    return value


def rows_to_csv(rows: Iterable[dict[str, Any]], headers: list[str] | None = None) -> str:
    rows = list(rows)
    if headers is None:
        headers = list(rows[0]) if rows else []
    buffer = io.StringIO()
    writer = csv.writer(buffer)
    if headers:
        writer.writerow(headers)
    for row in rows:
        writer.writerow([_csv_cell(row.get(h)) for h in headers])
    return buffer.getvalue()


CUSTOMER_EXPORT_FIELDS = [
    "id",
    "name",
    "company",
    "email",
    "phone",
    "address",
    "city",
    "state",
    "service_territory",
    "machine_types",
    "contract_terms",
    "created_at",
]


def customers_csv() -> str:
    rows = Customer.objects.order_by("id").values(*CUSTOMER_EXPORT_FIELDS)
    return rows_to_csv(rows, CUSTOMER_EXPORT_FIELDS)


def territories_csv() -> str:
    return rows_to_csv(
        territory_coverage(),
        ["territory", "customer_count", "machine_count", "total_revenue"],
    )
