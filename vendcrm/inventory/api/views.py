"""Inventory, product catalogue and supplier endpoints."""

import logging

from rest_framework import mixins
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from vendcrm.inventory.api.serializers import InventoryItemSerializer
from vendcrm.inventory.api.serializers import ProductSerializer
from vendcrm.inventory.api.serializers import PurchaseOrderSerializer
from vendcrm.inventory.api.serializers import StockMovementSerializer
from vendcrm.inventory.api.serializers import SupplierSerializer
from vendcrm.inventory.models import InventoryItem
from vendcrm.inventory.models import Product
from vendcrm.inventory.models import PurchaseOrder
from vendcrm.inventory.models import StockMovement
from vendcrm.inventory.models import Supplier
from vendcrm.inventory.services import low_stock_products
from vendcrm.inventory.services import record_stock_movement

logger = logging.getLogger(__name__)


class ProductViewSet(viewsets.ModelViewSet):
    queryset = Product.objects.all()
    serializer_class = ProductSerializer
    filterset_fields = ["category"]
    search_fields = ["name", "sku", "description"]
    ordering_fields = ["name", "price", "in_stock", "created_at"]

    @action(detail=False, methods=["get"], url_path="low-stock")
    def low_stock(self, request):
        serializer = self.get_serializer(low_stock_products(), many=True)
        return Response(serializer.data)


class InventoryItemViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    queryset = InventoryItem.objects.select_related("product")
    serializer_class = InventoryItemSerializer
    filterset_fields = ["product", "location"]


class SupplierViewSet(viewsets.ModelViewSet):
    queryset = Supplier.objects.all()
    serializer_class = SupplierSerializer
    search_fields = ["name", "contact", "email"]


class PurchaseOrderViewSet(viewsets.ModelViewSet):
    queryset = PurchaseOrder.objects.select_related("supplier")
    serializer_class = PurchaseOrderSerializer
    filterset_fields = ["supplier", "status"]


class StockMovementViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    viewsets.GenericViewSet,
):
    queryset = StockMovement.objects.select_related("product")
    serializer_class = StockMovementSerializer
    filterset_fields = ["product", "type"]

    def create(self, request, *args, **kwargs):
        serializer = self.get_serializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data
        movement = record_stock_movement(
            data["product"],
            data["type"],
            data["quantity"],
            reference=data.get("reference", ""),
        )
        out = self.get_serializer(movement).data
        return Response(out, status=status.HTTP_201_CREATED)
