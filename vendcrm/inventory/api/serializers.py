from rest_framework import serializers

from vendcrm.common.serializers import FrontendAliasMixin
from vendcrm.inventory.models import InventoryItem
from vendcrm.inventory.models import Product
from vendcrm.inventory.models import PurchaseOrder
from vendcrm.inventory.models import StockMovement
from vendcrm.inventory.models import Supplier


class ProductSerializer(FrontendAliasMixin, serializers.ModelSerializer):
    needs_reorder = serializers.BooleanField(read_only=True)

    class Meta:
        model = Product
        fields = "__all__"
        # Stock levels only change through stock movements.
        read_only_fields = ("in_stock", "created_at", "updated_at")


class InventoryItemSerializer(FrontendAliasMixin, serializers.ModelSerializer):
    product_name = serializers.CharField(source="product.name", read_only=True)
    sku = serializers.CharField(source="product.sku", read_only=True)

    class Meta:
        model = InventoryItem
        fields = "__all__"
        read_only_fields = ("created_at", "updated_at")

    def validate_quantity(self, value):
        if value < 0:
            msg = "Quantity cannot be negative."
            raise serializers.ValidationError(msg)
        return value


class SupplierSerializer(FrontendAliasMixin, serializers.ModelSerializer):
    class Meta:
        model = Supplier
        fields = "__all__"
        read_only_fields = ("created_at", "updated_at")


class PurchaseOrderSerializer(FrontendAliasMixin, serializers.ModelSerializer):
    supplier_name = serializers.CharField(source="supplier.name", read_only=True)

    class Meta:
        model = PurchaseOrder
        fields = "__all__"
        read_only_fields = ("created_at", "updated_at")

    def validate(self, attrs):
        order_date = attrs.get("order_date") or getattr(self.instance, "order_date", None)
        delivery_date = attrs.get("delivery_date")
        if order_date and delivery_date and delivery_date < order_date:
            msg = "Delivery date cannot be before the order date."
            raise serializers.ValidationError({"delivery_date": msg})
        return attrs


class StockMovementSerializer(FrontendAliasMixin, serializers.ModelSerializer):
    class Meta:
        model = StockMovement
        fields = ("id", "product", "quantity", "type", "reference", "created_at")
        read_only_fields = ("id", "created_at")
