from django.conf import settings
from django.urls import include
from django.urls import path
from rest_framework.routers import DefaultRouter
from rest_framework.routers import SimpleRouter

from vendcrm.activities.api.views import ActivityViewSet
from vendcrm.customers.api.views import CustomerViewSet
from vendcrm.inventory.api.views import InventoryItemViewSet
from vendcrm.inventory.api.views import ProductViewSet
from vendcrm.inventory.api.views import PurchaseOrderViewSet
from vendcrm.inventory.api.views import StockMovementViewSet
from vendcrm.inventory.api.views import SupplierViewSet
from vendcrm.maintenance.api.views import MaintenanceRecordViewSet
from vendcrm.sales.api.views import OpportunityViewSet
from vendcrm.users.api.views import UserViewSet

router = DefaultRouter() if settings.DEBUG else SimpleRouter()

router.register("users", UserViewSet)
router.register("customers", CustomerViewSet)
router.register("activities", ActivityViewSet)
router.register("opportunities", OpportunityViewSet)
router.register("maintenance", MaintenanceRecordViewSet)
router.register("products", ProductViewSet)
router.register("inventory", InventoryItemViewSet)
router.register("suppliers", SupplierViewSet)
router.register("purchase-orders", PurchaseOrderViewSet)
router.register("stock-movements", StockMovementViewSet)


app_name = "api"
urlpatterns = [
    path("analytics/", include("vendcrm.analytics.api.urls")),
    *router.urls,
]
