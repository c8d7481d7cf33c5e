"""Loyalty points bookkeeping.

Balances are never stored; they are summed from the transaction ledger so an
earn/redeem pair can always be audited back to its rows.
"""

from __future__ import annotations

from dataclasses import dataclass

from django.db import transaction
from django.db.models import Sum
from rest_framework.exceptions import ValidationError

from vendcrm.customers.models import Customer
from vendcrm.customers.models import LoyaltyTransaction

# Lowest lifetime-earned total for each tier, highest first.
TIER_THRESHOLDS: tuple[tuple[str, int], ...] = (
    ("platinum", 10_000),
    ("gold", 5_000),
    ("silver", 1_000),
    ("bronze", 0),
)


@dataclass(frozen=True)
class LoyaltySummary:
    customer_id: int
    points: int
    lifetime_points: int
    tier: str


def tier_for(lifetime_points: int) -> str:
    for tier, threshold in TIER_THRESHOLDS:
        if lifetime_points >= threshold:
            return tier
    return TIER_THRESHOLDS[-1][0]


def loyalty_summary(customer: Customer) -> LoyaltySummary:
    ledger = LoyaltyTransaction.objects.filter(customer=customer)
    points = ledger.aggregate(total=Sum("points"))["total"] or 0
    lifetime = (
        ledger.filter(kind=LoyaltyTransaction.Kind.EARN).aggregate(
            total=Sum("points")
        )["total"]
        or 0
    )
    return LoyaltySummary(
        customer_id=customer.pk,
        points=int(points),
        lifetime_points=int(lifetime),
        tier=tier_for(int(lifetime)),
    )


def earn_points(
    customer: Customer, points: int, *, source: str = "", description: str = ""
) -> LoyaltyTransaction:
    if points <= 0:
        raise ValidationError({"points": "Must be a positive number."})
    return LoyaltyTransaction.objects.create(
        customer=customer,
        kind=LoyaltyTransaction.Kind.EARN,
        points=points,
        source=source,
        description=description,
    )


def redeem_points(
    customer: Customer, points: int, *, description: str = ""
) -> LoyaltyTransaction:
    if points <= 0:
        raise ValidationError({"points": "Must be a positive number."})
    with transaction.atomic():
        # Lock the customer row so concurrent redemptions see each other.
        Customer.objects.select_for_update().filter(pk=customer.pk).first()
        balance = loyalty_summary(customer).points
        if points > balance:
            raise ValidationError(
                {"points": f"Insufficient points: balance is {balance}."}
            )
        return LoyaltyTransaction.objects.create(
            customer=customer,
            kind=LoyaltyTransaction.Kind.REDEEM,
            points=-points,
            source="redemption",
            description=description,
        )
