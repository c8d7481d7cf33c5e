from __future__ import annotations

import logging

from django.db import transaction
from django.db.models import F
from rest_framework.exceptions import ValidationError

from vendcrm.inventory.models import Product
from vendcrm.inventory.models import StockMovement

logger = logging.getLogger(__name__)


def signed_quantity(movement_type: str, quantity: int) -> int:
    """Normalize the sign of a movement: in is positive, out is negative.

    Adjustments keep whatever sign the caller gave.
    """
    if movement_type == StockMovement.Type.IN:
        return abs(quantity)
    if movement_type == StockMovement.Type.OUT:
        return -abs(quantity)
    return quantity


def record_stock_movement(
    product: Product, movement_type: str, quantity: int, reference: str = ""
) -> StockMovement:
    delta = signed_quantity(movement_type, quantity)
    if delta == 0:
        raise ValidationError({"quantity": "Must not be zero."})
    with transaction.atomic():
        locked = Product.objects.select_for_update().get(pk=product.pk)
        if locked.in_stock + delta < 0:
            msg = f"Insufficient stock: {locked.in_stock} on hand."
            raise ValidationError({"quantity": msg})
        Product.objects.filter(pk=locked.pk).update(in_stock=F("in_stock") + delta)
        movement = StockMovement.objects.create(
            product=locked,
            quantity=delta,
            type=movement_type,
            reference=reference,
        )
    product.refresh_from_db(fields=["in_stock"])
    logger.info(
        "Stock movement product=%s delta=%s now=%s", product.sku, delta, product.in_stock
    )
    return movement


def low_stock_products():
    return Product.objects.filter(in_stock__lte=F("reorder_point")).order_by(
        "in_stock", "name"
    )
