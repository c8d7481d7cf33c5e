import django_filters
from drf_spectacular.utils import OpenApiParameter
from drf_spectacular.utils import extend_schema
from rest_framework import mixins
from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.exceptions import ValidationError
from rest_framework.response import Response

from vendcrm.maintenance.api.serializers import MaintenanceNotesSerializer
from vendcrm.maintenance.api.serializers import MaintenanceRecordSerializer
from vendcrm.maintenance.api.serializers import MaintenanceStatusSerializer
from vendcrm.maintenance.models import MaintenanceRecord
from vendcrm.maintenance.services import change_status
from vendcrm.maintenance.services import upcoming_records

MAX_UPCOMING_DAYS = 365


class MaintenanceFilter(django_filters.FilterSet):
    # The dashboard filters with ?customerId=, the API with ?customer_id=.
    customer_id = django_filters.NumberFilter(field_name="customer_id")
    customerId = django_filters.NumberFilter(field_name="customer_id")  # noqa: N815
    status = django_filters.ChoiceFilter(choices=MaintenanceRecord.Status.choices)

    class Meta:
        model = MaintenanceRecord
        fields = ["customer_id", "status", "machine_id"]


class MaintenanceRecordViewSet(
    mixins.ListModelMixin,
    mixins.CreateModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    viewsets.GenericViewSet,
):
    queryset = MaintenanceRecord.objects.select_related("customer")
    serializer_class = MaintenanceRecordSerializer
    filterset_class = MaintenanceFilter
    search_fields = ["machine_id", "serial_number", "description"]

    @extend_schema(request=MaintenanceNotesSerializer)
    @action(detail=True, methods=["patch"])
    def notes(self, request, pk=None):
        record = self.get_object()
        serializer = MaintenanceNotesSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        record.technician_notes = serializer.validated_data["technician_notes"]
        record.save(update_fields=["technician_notes", "updated_at"])
        return Response(self.get_serializer(record).data)

    @extend_schema(request=MaintenanceStatusSerializer)
    @action(detail=True, methods=["patch"], url_path="status")
    def set_status(self, request, pk=None):
        record = self.get_object()
        serializer = MaintenanceStatusSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        change_status(record, serializer.validated_data["status"])
        return Response(self.get_serializer(record).data)

    @extend_schema(parameters=[OpenApiParameter("days", int, required=False)])
    @action(detail=False, methods=["get"])
    def upcoming(self, request):
        raw = request.query_params.get("days", "30")
        try:
            days = int(raw)
        except ValueError as exc:
            raise ValidationError({"days": "Must be an integer."}) from exc
        if not 0 < days <= MAX_UPCOMING_DAYS:
            raise ValidationError({"days": f"Must be between 1 and {MAX_UPCOMING_DAYS}."})
        records = upcoming_records(days)
        page = self.paginate_queryset(records)
        if page is not None:
            return self.get_paginated_response(self.get_serializer(page, many=True).data)
        return Response(self.get_serializer(records, many=True).data)
