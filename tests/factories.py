from __future__ import annotations

from datetime import timedelta
from decimal import Decimal
from itertools import count

from django.contrib.auth import get_user_model
from django.utils import timezone

from vendcrm.activities.models import Activity
from vendcrm.customers.models import Customer
from vendcrm.inventory.models import Product
from vendcrm.inventory.models import Supplier
from vendcrm.maintenance.models import MaintenanceRecord
from vendcrm.sales.models import Opportunity

User = get_user_model()

_seq = count(1)


def create_user(username: str | None = None, **extra) -> User:
    username = username or f"user{next(_seq)}"
    return User.objects.create_user(
        username=username,
        email=f"{username}@example.com",
        password="TestPass123!",  # noqa: S106
        **extra,
    )


def create_customer(**overrides) -> Customer:
    n = next(_seq)
    fields = {
        "name": f"Contact {n}",
        "company": f"Snack Co {n}",
        "email": f"contact{n}@example.com",
        "phone": "555-0100",
        "address": f"{n} Main St",
        "machine_types": ["snack"],
    }
    fields.update(overrides)
    return Customer.objects.create(**fields)


def create_product(**overrides) -> Product:
    n = next(_seq)
    fields = {
        "name": f"Combo Machine {n}",
        "price": Decimal("2500.00"),
        "category": "machine",
        "sku": f"SKU-{n:04d}",
    }
    fields.update(overrides)
    return Product.objects.create(**fields)


def create_supplier(**overrides) -> Supplier:
    n = next(_seq)
    fields = {
        "name": f"Parts Supply {n}",
        "contact": "Dana",
        "email": f"supply{n}@example.com",
        "phone": "555-0199",
        "address": "1 Depot Rd",
    }
    fields.update(overrides)
    return Supplier.objects.create(**fields)


def create_opportunity(customer=None, product=None, **overrides) -> Opportunity:
    fields = {
        "customer": customer or create_customer(),
        "product": product or create_product(),
        "value": Decimal("1000.00"),
    }
    fields.update(overrides)
    return Opportunity.objects.create(**fields)


def create_activity(customer=None, **overrides) -> Activity:
    fields = {
        "customer": customer or create_customer(),
        "type": Activity.Type.CALL,
        "description": "Follow-up call",
    }
    fields.update(overrides)
    return Activity.objects.create(**fields)


def create_maintenance(customer=None, **overrides) -> MaintenanceRecord:
    n = next(_seq)
    fields = {
        "customer": customer or create_customer(),
        "machine_id": f"VM-{n:04d}",
        "serial_number": f"SN{n:06d}",
        "machine_type": "snack",
        "maintenance_type": "preventive",
        "description": "Quarterly service",
        "scheduled_date": timezone.now() + timedelta(days=7),
    }
    fields.update(overrides)
    return MaintenanceRecord.objects.create(**fields)
