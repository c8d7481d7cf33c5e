from rest_framework import serializers

from vendcrm.common.serializers import FrontendAliasMixin
from vendcrm.sales.models import Opportunity


class OpportunitySerializer(FrontendAliasMixin, serializers.ModelSerializer):
    status = serializers.CharField(read_only=True)
    customer_company = serializers.CharField(source="customer.company", read_only=True)
    product_name = serializers.CharField(source="product.name", read_only=True)

    class Meta:
        model = Opportunity
        fields = "__all__"
        read_only_fields = ("close_date", "created_at", "updated_at")


class OpportunityStageSerializer(serializers.Serializer):
    stage = serializers.ChoiceField(choices=Opportunity.Stage.choices)


class PipelineStageSerializer(serializers.Serializer):
    stage = serializers.CharField()
    label = serializers.CharField()
    count = serializers.IntegerField()
    total_value = serializers.DecimalField(max_digits=14, decimal_places=2)
