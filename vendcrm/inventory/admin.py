from django.contrib import admin

from vendcrm.inventory.models import InventoryItem
from vendcrm.inventory.models import Product
from vendcrm.inventory.models import PurchaseOrder
from vendcrm.inventory.models import StockMovement
from vendcrm.inventory.models import Supplier


@admin.register(Product)
class ProductAdmin(admin.ModelAdmin):
    list_display = ["name", "sku", "category", "price", "in_stock", "reorder_point"]
    list_filter = ["category"]
    search_fields = ["name", "sku"]
    # Stock changes go through StockMovement.
    readonly_fields = ["in_stock"]


@admin.register(InventoryItem)
class InventoryItemAdmin(admin.ModelAdmin):
    list_display = ["product", "location", "quantity"]
    list_select_related = ["product"]


@admin.register(Supplier)
class SupplierAdmin(admin.ModelAdmin):
    list_display = ["name", "contact", "email", "phone"]
    search_fields = ["name", "contact", "email"]


@admin.register(PurchaseOrder)
class PurchaseOrderAdmin(admin.ModelAdmin):
    list_display = ["id", "supplier", "status", "order_date", "total"]
    list_filter = ["status"]


@admin.register(StockMovement)
class StockMovementAdmin(admin.ModelAdmin):
    list_display = ["product", "type", "quantity", "reference", "created_at"]
    list_filter = ["type"]

    def has_change_permission(self, request, obj=None):
        return False
