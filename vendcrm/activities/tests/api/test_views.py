from datetime import timedelta

import pytest
from django.utils import timezone
from rest_framework import status

from tests.factories import create_activity
from tests.factories import create_customer
from tests.factories import create_opportunity
from vendcrm.activities.models import Activity

pytestmark = pytest.mark.django_db


def test_create_accepts_frontend_field_names(api_client):
    customer = create_customer()
    payload = {
        "customerId": customer.pk,
        "type": "call",
        "description": "Discussed a second machine",
        "outcome": "Positive",
        "nextSteps": "Site visit next week",
        "contactMethod": "phone",
    }

    r = api_client.post("/api/v1/activities/", payload, format="json")

    assert r.status_code == status.HTTP_201_CREATED, r.content
    activity = Activity.objects.get(pk=r.data["id"])
    assert activity.customer == customer
    assert activity.next_steps == "Site visit next week"
    assert activity.contact_method == "phone"
    # Defaults to the logged-in rep.
    assert activity.contacted_by == "Sam Rep"


def test_explicit_contacted_by_is_kept(api_client):
    customer = create_customer()
    payload = {
        "customer": customer.pk,
        "type": "email",
        "description": "Sent brochure",
        "contactedBy": "Alex",
    }
    r = api_client.post("/api/v1/activities/", payload, format="json")
    assert r.status_code == status.HTTP_201_CREATED, r.content
    assert r.data["contacted_by"] == "Alex"


def test_rejects_unknown_type(api_client):
    customer = create_customer()
    payload = {"customer": customer.pk, "type": "fax", "description": "x"}
    r = api_client.post("/api/v1/activities/", payload, format="json")
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert "type" in r.data


def test_opportunity_must_belong_to_customer(api_client):
    customer = create_customer()
    foreign_deal = create_opportunity()
    payload = {
        "customer": customer.pk,
        "opportunity": foreign_deal.pk,
        "type": "meeting",
        "description": "Pricing review",
    }
    r = api_client.post("/api/v1/activities/", payload, format="json")
    assert r.status_code == status.HTTP_400_BAD_REQUEST
    assert "opportunity" in r.data


def test_list_is_ordered_by_creation_and_filterable(api_client):
    customer = create_customer()
    now = timezone.now()
    newer = create_activity(customer, created_at=now)
    older = create_activity(customer, created_at=now - timedelta(hours=1))
    create_activity()

    r = api_client.get("/api/v1/activities/", {"customer": customer.pk})

    assert r.status_code == status.HTTP_200_OK
    assert [a["id"] for a in r.data["results"]] == [older.id, newer.id]


def test_update_marks_completed(api_client):
    activity = create_activity()
    r = api_client.patch(
        f"/api/v1/activities/{activity.pk}/", {"completed": True}, format="json"
    )
    assert r.status_code == status.HTTP_200_OK
    activity.refresh_from_db()
    assert activity.completed is True


def test_created_at_is_read_only(api_client):
    activity = create_activity()
    original = activity.created_at
    r = api_client.patch(
        f"/api/v1/activities/{activity.pk}/",
        {"created_at": "2001-01-01T00:00:00Z"},
        format="json",
    )
    assert r.status_code == status.HTTP_200_OK
    activity.refresh_from_db()
    assert activity.created_at == original
