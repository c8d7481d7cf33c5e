from rest_framework import serializers

from vendcrm.common.serializers import FrontendAliasMixin
from vendcrm.customers.models import Customer
from vendcrm.customers.models import LoyaltyTransaction


class CustomerSerializer(FrontendAliasMixin, serializers.ModelSerializer):
    machine_count = serializers.IntegerField(read_only=True)

    class Meta:
        model = Customer
        fields = "__all__"
        read_only_fields = ("created_at", "updated_at")

    def validate_machine_types(self, value):
        if value in (None, ""):
            return []
        if not isinstance(value, list):
            msg = "Must be a list of machine types."
            raise serializers.ValidationError(msg)
        return value


class LoyaltyTransactionSerializer(serializers.ModelSerializer):
    class Meta:
        model = LoyaltyTransaction
        fields = ("id", "kind", "points", "source", "description", "created_at")
        read_only_fields = fields


class LoyaltyEarnSerializer(serializers.Serializer):
    points = serializers.IntegerField(min_value=1)
    source = serializers.CharField(max_length=100, required=False, default="manual")
    description = serializers.CharField(
        max_length=255, required=False, allow_blank=True, default=""
    )


class LoyaltyRedeemSerializer(serializers.Serializer):
    points = serializers.IntegerField(min_value=1)
    description = serializers.CharField(
        max_length=255, required=False, allow_blank=True, default=""
    )
