"""Customer records, loyalty points and interaction history."""

import logging

from drf_spectacular.utils import extend_schema
from rest_framework import status
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from vendcrm.activities.api.serializers import ActivitySerializer
from vendcrm.customers.api.serializers import CustomerSerializer
from vendcrm.customers.api.serializers import LoyaltyEarnSerializer
from vendcrm.customers.api.serializers import LoyaltyRedeemSerializer
from vendcrm.customers.api.serializers import LoyaltyTransactionSerializer
from vendcrm.customers.models import Customer
from vendcrm.customers.services import earn_points
from vendcrm.customers.services import loyalty_summary
from vendcrm.customers.services import redeem_points
from vendcrm.maintenance.api.serializers import MaintenanceRecordSerializer
from vendcrm.sales.api.serializers import OpportunitySerializer

logger = logging.getLogger(__name__)

RECENT_TRANSACTIONS = 20


class CustomerViewSet(viewsets.ModelViewSet):
    queryset = Customer.objects.all()
    serializer_class = CustomerSerializer
    filterset_fields = ["service_territory", "state", "city"]
    search_fields = ["name", "company", "email", "phone"]
    ordering_fields = ["company", "name", "created_at"]

    def _loyalty_payload(self, customer: Customer) -> dict:
        summary = loyalty_summary(customer)
        recent = customer.loyalty_transactions.all()[:RECENT_TRANSACTIONS]
        return {
            "customer_id": summary.customer_id,
            "points": summary.points,
            "lifetime_points": summary.lifetime_points,
            "tier": summary.tier,
            "transactions": LoyaltyTransactionSerializer(recent, many=True).data,
        }

    @action(detail=True, methods=["get"])
    def loyalty(self, request, pk=None):
        return Response(self._loyalty_payload(self.get_object()))

    @extend_schema(request=LoyaltyEarnSerializer)
    @action(detail=True, methods=["post"], url_path="loyalty/earn")
    def loyalty_earn(self, request, pk=None):
        customer = self.get_object()
        serializer = LoyaltyEarnSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        earn_points(customer, **serializer.validated_data)
        return Response(self._loyalty_payload(customer), status=status.HTTP_201_CREATED)

    @extend_schema(request=LoyaltyRedeemSerializer)
    @action(detail=True, methods=["post"], url_path="loyalty/redeem")
    def loyalty_redeem(self, request, pk=None):
        customer = self.get_object()
        serializer = LoyaltyRedeemSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        redeem_points(customer, **serializer.validated_data)
        logger.info(
            "Customer %s redeemed %s points",
            customer.pk,
            serializer.validated_data["points"],
        )
        return Response(self._loyalty_payload(customer), status=status.HTTP_201_CREATED)

    @action(detail=True, methods=["get"])
    def history(self, request, pk=None):
        customer = self.get_object()
        context = self.get_serializer_context()
        activities = customer.activities.order_by("-created_at", "-id")
        opportunities = customer.opportunities.select_related("product")
        maintenance = customer.maintenance_records.all()
        return Response(
            {
                "customer": self.get_serializer(customer).data,
                "activities": ActivitySerializer(
                    activities, many=True, context=context
                ).data,
                "opportunities": OpportunitySerializer(
                    opportunities, many=True, context=context
                ).data,
                "maintenance": MaintenanceRecordSerializer(
                    maintenance, many=True, context=context
                ).data,
            }
        )
