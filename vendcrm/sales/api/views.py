from drf_spectacular.utils import extend_schema
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.response import Response

from vendcrm.sales.api.serializers import OpportunitySerializer
from vendcrm.sales.api.serializers import OpportunityStageSerializer
from vendcrm.sales.api.serializers import PipelineStageSerializer
from vendcrm.sales.models import Opportunity
from vendcrm.sales.services import build_quote
from vendcrm.sales.services import move_to_stage
from vendcrm.sales.services import pipeline_summary


class OpportunityViewSet(viewsets.ModelViewSet):
    queryset = Opportunity.objects.select_related("customer", "product")
    serializer_class = OpportunitySerializer
    filterset_fields = ["customer", "product", "stage", "assigned_to"]
    ordering_fields = ["created_at", "value", "expected_close_date"]

    @extend_schema(request=OpportunityStageSerializer, responses=OpportunitySerializer)
    @action(detail=True, methods=["patch"], url_path="stage")
    def stage(self, request, pk=None):
        opportunity = self.get_object()
        serializer = OpportunityStageSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        move_to_stage(opportunity, serializer.validated_data["stage"])
        return Response(self.get_serializer(opportunity).data)

    @extend_schema(responses=PipelineStageSerializer(many=True))
    @action(detail=False, methods=["get"])
    def pipeline(self, request):
        rows = pipeline_summary(self.filter_queryset(self.get_queryset()))
        return Response(PipelineStageSerializer(rows, many=True).data)

    @action(detail=True, methods=["get"])
    def quote(self, request, pk=None):
        return Response(build_quote(self.get_object()))
