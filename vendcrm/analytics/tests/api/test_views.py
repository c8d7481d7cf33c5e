import csv
import io

import pytest
from rest_framework import status
from rest_framework.test import APIClient

from tests.factories import create_customer

pytestmark = pytest.mark.django_db


@pytest.mark.parametrize(
    "path",
    [
        "/api/v1/analytics/customers/",
        "/api/v1/analytics/sales/",
        "/api/v1/analytics/activities/heatmap/",
    ],
)
def test_analytics_endpoints(api_client, path):
    create_customer()
    r = api_client.get(path)
    assert r.status_code == status.HTTP_200_OK


def test_analytics_requires_authentication():
    r = APIClient().get("/api/v1/analytics/sales/")
    assert r.status_code in {status.HTTP_401_UNAUTHORIZED, status.HTTP_403_FORBIDDEN}


def test_customer_export(api_client):
    create_customer(company="Harbor Snacks", machine_types=["snack", "coffee"])

    r = api_client.get("/api/v1/analytics/export/customers.csv")

    assert r.status_code == status.HTTP_200_OK
    assert r["Content-Type"].startswith("text/csv")
    assert 'filename="customers.csv"' in r["Content-Disposition"]
    rows = list(csv.DictReader(io.StringIO(r.content.decode())))
    assert rows[0]["company"] == "Harbor Snacks"
    assert rows[0]["machine_types"] == "snack;coffee"


def test_territory_export(api_client):
    create_customer(service_territory="East")

    r = api_client.get("/api/v1/analytics/export/territories.csv")

    rows = list(csv.DictReader(io.StringIO(r.content.decode())))
    assert rows == [
        {
            "territory": "East",
            "customer_count": "1",
            "machine_count": "1",
            "total_revenue": "0.00",
        }
    ]
