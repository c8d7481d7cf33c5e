import pytest
from rest_framework import status
from rest_framework.test import APIClient

from tests.factories import create_activity
from tests.factories import create_customer
from tests.factories import create_maintenance
from tests.factories import create_opportunity
from vendcrm.customers.models import Customer

pytestmark = pytest.mark.django_db


def test_requires_authentication():
    r = APIClient().get("/api/v1/customers/")
    assert r.status_code in {status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN}


def test_create_customer(api_client):
    payload = {
        "name": "Jordan Lee",
        "company": "Campus Vending",
        "email": "jordan@campus.example.com",
        "phone": "555-0123",
        "address": "10 College Ave",
        "machineTypes": ["snack", "beverage"],
        "serviceTerritory": "North",
    }
    r = api_client.post("/api/v1/customers/", payload, format="json")
    assert r.status_code == status.HTTP_201_CREATED, r.content
    assert r.data["machine_types"] == ["snack", "beverage"]
    assert r.data["machine_count"] == 2  # noqa: PLR2004
    assert Customer.objects.get(pk=r.data["id"]).service_territory == "North"


def test_machine_types_must_be_a_list(api_client):
    payload = {
        "name": "Jordan Lee",
        "company": "Campus Vending",
        "email": "jordan@campus.example.com",
        "phone": "555-0123",
        "address": "10 College Ave",
        "machine_types": "snack",
    }
    r = api_client.post("/api/v1/customers/", payload, format="json")
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert "machine_types" in r.data


def test_list_is_paginated_and_searchable(api_client):
    create_customer(company="Harbor Snacks")
    create_customer(company="Mountain Drinks")

    r = api_client.get("/api/v1/customers/", {"search": "harbor"})

    assert r.status_code == status.HTTP_200_OK
    assert r.data["count"] == 1
    assert r.data["results"][0]["company"] == "Harbor Snacks"


def test_filter_by_territory(api_client):
    create_customer(service_territory="North")
    create_customer(service_territory="South")

    r = api_client.get("/api/v1/customers/", {"service_territory": "South"})

    assert [c["service_territory"] for c in r.data["results"]] == ["South"]


def test_unknown_customer_is_404(api_client):
    r = api_client.get("/api/v1/customers/999999/")
    assert r.status_code == status.HTTP_404_NOT_FOUND


def test_loyalty_earn_and_redeem(api_client):
    customer = create_customer()
    url = f"/api/v1/customers/{customer.pk}/loyalty/"

    r = api_client.post(f"{url}earn/", {"points": 1500}, format="json")
    assert r.status_code == status.HTTP_201_CREATED, r.content
    assert r.data["tier"] == "silver"

    r = api_client.post(f"{url}redeem/", {"points": 2000}, format="json")
    assert r.status_code == status.HTTP_400_BAD_REQUEST

    r = api_client.post(f"{url}redeem/", {"points": 500}, format="json")
    assert r.status_code == status.HTTP_201_CREATED

    r = api_client.get(url)
    assert r.data["points"] == 1000  # noqa: PLR2004
    assert r.data["lifetime_points"] == 1500  # noqa: PLR2004
    assert [t["kind"] for t in r.data["transactions"]] == ["redeem", "earn"]


def test_history_groups_related_records(api_client):
    customer = create_customer()
    create_activity(customer)
    create_opportunity(customer)
    create_maintenance(customer)
    create_activity()  # someone else's

    r = api_client.get(f"/api/v1/customers/{customer.pk}/history/")

    assert r.status_code == status.HTTP_200_OK
    assert r.data["customer"]["id"] == customer.pk
    assert len(r.data["activities"]) == 1
    assert len(r.data["opportunities"]) == 1
    assert len(r.data["maintenance"]) == 1
