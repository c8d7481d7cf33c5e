import logging

from celery import shared_task

from vendcrm.inventory.services import low_stock_products

logger = logging.getLogger(__name__)


@shared_task(name="inventory.low_stock_report")
def low_stock_report() -> list[dict]:
    """Log products at or below their reorder point.

    Returns:
        One ``{sku, name, in_stock, reorder_point}`` row per product to reorder.
    """
    rows = [
        {
            "sku": p.sku,
            "name": p.name,
            "in_stock": p.in_stock,
            "reorder_point": p.reorder_point,
        }
        for p in low_stock_products()
    ]
    if rows:
        logger.warning(
            "%d products at or below reorder point: %s",
            len(rows),
            ", ".join(r["sku"] for r in rows),
        )
    return rows
