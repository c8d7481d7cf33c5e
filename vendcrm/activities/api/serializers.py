from rest_framework import serializers

from vendcrm.activities.models import Activity
from vendcrm.common.serializers import FrontendAliasMixin


class ActivitySerializer(FrontendAliasMixin, serializers.ModelSerializer):
    class Meta:
        model = Activity
        fields = (
            "id",
            "customer",
            "opportunity",
            "type",
            "description",
            "outcome",
            "next_steps",
            "contact_method",
            "contacted_by",
            "due_date",
            "completed",
            "created_at",
            "updated_at",
        )
        read_only_fields = ("id", "created_at", "updated_at")

    def validate(self, attrs):
        customer = attrs.get("customer") or getattr(self.instance, "customer", None)
        opportunity = attrs.get("opportunity")
        if opportunity and customer and opportunity.customer_id != customer.pk:
            msg = "Opportunity belongs to a different customer."
            raise serializers.ValidationError({"opportunity": msg})
        return attrs
