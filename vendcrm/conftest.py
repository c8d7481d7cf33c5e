import pytest
from rest_framework.test import APIClient

from tests.factories import create_user


@pytest.fixture
def user(db):
    return create_user("rep", name="Sam Rep")


@pytest.fixture
def api_client(user):
    client = APIClient()
    client.force_authenticate(user=user)
    return client
