from decimal import Decimal

import pytest
from django.utils import timezone
from rest_framework import status

from tests.factories import create_customer
from tests.factories import create_opportunity
from tests.factories import create_product

pytestmark = pytest.mark.django_db


def test_create_opportunity(api_client):
    customer = create_customer()
    product = create_product()
    payload = {
        "customerId": customer.pk,
        "productId": product.pk,
        "value": "4200.00",
        "probability": 40,
    }

    r = api_client.post("/api/v1/opportunities/", payload, format="json")

    assert r.status_code == status.HTTP_201_CREATED, r.content
    assert r.data["stage"] == "prospecting"
    assert r.data["status"] == "open"
    assert r.data["customer_company"] == customer.company


def test_probability_over_100_is_rejected(api_client):
    payload = {
        "customer": create_customer().pk,
        "product": create_product().pk,
        "value": "10.00",
        "probability": 120,
    }
    r = api_client.post("/api/v1/opportunities/", payload, format="json")
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert "probability" in r.data


def test_stage_patch_moves_deal(api_client):
    deal = create_opportunity()

    r = api_client.patch(
        f"/api/v1/opportunities/{deal.pk}/stage/",
        {"stage": "closed-won"},
        format="json",
    )

    assert r.status_code == status.HTTP_200_OK
    assert r.data["stage"] == "closed-won"
    assert r.data["status"] == "won"
    assert r.data["close_date"] is not None


def test_stage_patch_rejects_unknown_stage(api_client):
    deal = create_opportunity()
    r = api_client.patch(
        f"/api/v1/opportunities/{deal.pk}/stage/", {"stage": "won"}, format="json"
    )
    assert r.status_code == status.HTTP_400_BAD_REQUEST


def test_pipeline(api_client):
    create_opportunity(value=Decimal("300.00"))

    r = api_client.get("/api/v1/opportunities/pipeline/")

    assert r.status_code == status.HTTP_200_OK
    first = r.data[0]
    assert first["stage"] == "prospecting"
    assert first["count"] == 1
    assert first["total_value"] == "300.00"
    assert len(r.data) == 5  # noqa: PLR2004


def test_quote(api_client):
    deal = create_opportunity(value=Decimal("999.00"))

    r = api_client.get(f"/api/v1/opportunities/{deal.pk}/quote/")

    assert r.status_code == status.HTTP_200_OK
    today = timezone.localdate()
    assert r.data["quote_number"] == f"Q-{today:%Y%m%d}-{deal.pk:05d}"
    assert r.data["customer"]["id"] == deal.customer_id
    assert r.data["product"]["sku"] == deal.product.sku
    assert (r.data["valid_until"] - r.data["issued_on"]).days == 30  # noqa: PLR2004
