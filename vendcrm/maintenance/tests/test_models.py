from decimal import Decimal

import pytest

from tests.factories import create_maintenance

pytestmark = pytest.mark.django_db


def test_costs_are_derived_from_parts_and_labor():
    record = create_maintenance(
        labor_cost=Decimal("80.00"),
        parts_used=[
            {"name": "Coin mech", "quantity": 1, "cost": "45.50"},
            {"name": "Spiral", "quantity": 4, "cost": "3.25"},
        ],
    )

    assert record.parts_cost == Decimal("58.50")
    assert record.cost == Decimal("138.50")


def test_partial_save_still_recalculates_cost():
    record = create_maintenance(labor_cost=Decimal("10.00"))
    record.labor_cost = Decimal("25.00")
    record.save(update_fields=["labor_cost"])

    record.refresh_from_db()
    assert record.cost == Decimal("25.00")
