from __future__ import annotations

from datetime import timedelta
from decimal import Decimal

from django.db.models import Count
from django.db.models import Sum
from django.utils import timezone

from vendcrm.sales.models import Opportunity

QUOTE_VALIDITY_DAYS = 30


def move_to_stage(opportunity: Opportunity, stage: str) -> Opportunity:
    """Move a deal between pipeline columns.

    Entering a closed stage stamps ``close_date``; reopening clears it.
    """
    if stage == opportunity.stage:
        return opportunity
    opportunity.stage = stage
    if stage in Opportunity.CLOSED_STAGES:
        opportunity.close_date = timezone.now()
    else:
        opportunity.close_date = None
    opportunity.save(update_fields=["stage", "close_date", "updated_at"])
    return opportunity


def pipeline_summary(queryset=None) -> list[dict]:
    qs = Opportunity.objects.all() if queryset is None else queryset
    totals = {
        row["stage"]: row
        for row in qs.order_by()
        .values("stage")
        .annotate(count=Count("id"), total=Sum("value"))
    }
    summary = []
    for stage, label in Opportunity.Stage.choices:
        row = totals.get(stage, {})
        summary.append(
            {
                "stage": stage,
                "label": str(label),
                "count": row.get("count", 0),
                "total_value": row.get("total") or Decimal("0.00"),
            }
        )
    return summary


def build_quote(opportunity: Opportunity) -> dict:
    issued = timezone.localdate()
    customer = opportunity.customer
    product = opportunity.product
    return {
        "quote_number": f"Q-{issued:%Y%m%d}-{opportunity.pk:05d}",
        "issued_on": issued,
        "valid_until": issued + timedelta(days=QUOTE_VALIDITY_DAYS),
        "customer": {
            "id": customer.pk,
            "name": customer.name,
            "company": customer.company,
            "email": customer.email,
            "phone": customer.phone,
            "address": customer.address,
        },
        "product": {
            "id": product.pk,
            "name": product.name,
            "sku": product.sku,
            "description": product.description,
            "unit_price": product.price,
        },
        "stage": opportunity.stage,
        "total": opportunity.value,
        "notes": opportunity.notes,
    }
