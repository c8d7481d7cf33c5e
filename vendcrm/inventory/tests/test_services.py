import pytest
from rest_framework.exceptions import ValidationError

from tests.factories import create_product
from vendcrm.inventory.models import StockMovement
from vendcrm.inventory.services import low_stock_products
from vendcrm.inventory.services import record_stock_movement
from vendcrm.inventory.services import signed_quantity
from vendcrm.inventory.tasks import low_stock_report

pytestmark = pytest.mark.django_db


def test_signed_quantity():
    assert signed_quantity(StockMovement.Type.IN, -5) == 5  # noqa: PLR2004
    assert signed_quantity(StockMovement.Type.OUT, 5) == -5  # noqa: PLR2004
    assert signed_quantity(StockMovement.Type.ADJUSTMENT, -2) == -2  # noqa: PLR2004


def test_movements_update_stock():
    product = create_product(in_stock=0)

    record_stock_movement(product, StockMovement.Type.IN, 12, reference="PO-1")
    record_stock_movement(product, StockMovement.Type.OUT, 5)

    product.refresh_from_db()
    assert product.in_stock == 7  # noqa: PLR2004
    assert list(product.stock_movements.values_list("quantity", flat=True)) == [-5, 12]


def test_stock_cannot_go_negative():
    product = create_product(in_stock=2)

    with pytest.raises(ValidationError):
        record_stock_movement(product, StockMovement.Type.OUT, 3)

    product.refresh_from_db()
    assert product.in_stock == 2  # noqa: PLR2004
    assert not product.stock_movements.exists()


def test_zero_movement_is_rejected():
    with pytest.raises(ValidationError):
        record_stock_movement(create_product(), StockMovement.Type.ADJUSTMENT, 0)


def test_low_stock_report_task():
    low = create_product(in_stock=3, reorder_point=5)
    create_product(in_stock=50, reorder_point=5)

    rows = low_stock_report.delay().get()

    assert rows == [
        {"sku": low.sku, "name": low.name, "in_stock": 3, "reorder_point": 5}
    ]
    assert list(low_stock_products()) == [low]
