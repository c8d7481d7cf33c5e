from decimal import Decimal
from decimal import InvalidOperation

from rest_framework import serializers

from vendcrm.common.serializers import FrontendAliasMixin
from vendcrm.maintenance.models import MaintenanceRecord


class MaintenanceRecordSerializer(FrontendAliasMixin, serializers.ModelSerializer):
    parts_used = serializers.ListField(
        child=serializers.DictField(), required=False, default=list
    )

    class Meta:
        model = MaintenanceRecord
        fields = "__all__"
        read_only_fields = (
            "cost",
            "parts_cost",
            "completed_date",
            "created_at",
            "updated_at",
        )

    def validate_parts_used(self, value):
        cleaned = []
        for index, part in enumerate(value):
            name = str(part.get("name", "")).strip()
            if not name:
                msg = f"Part {index + 1}: name is required."
                raise serializers.ValidationError(msg)
            try:
                quantity = int(part.get("quantity", 1))
                cost = Decimal(str(part.get("cost", 0)))
            except (TypeError, ValueError, InvalidOperation) as exc:
                msg = f"Part {index + 1}: quantity and cost must be numbers."
                raise serializers.ValidationError(msg) from exc
            if quantity < 1 or cost < 0:
                msg = f"Part {index + 1}: quantity must be >= 1 and cost >= 0."
                raise serializers.ValidationError(msg)
            # JSONField cannot hold Decimal.
            cleaned.append({"name": name, "quantity": quantity, "cost": str(cost)})
        return cleaned

    def validate(self, attrs):
        scheduled = attrs.get("scheduled_date") or getattr(
            self.instance, "scheduled_date", None
        )
        next_date = attrs.get("next_maintenance_date")
        if scheduled and next_date and next_date <= scheduled:
            msg = "Next maintenance must be after the scheduled date."
            raise serializers.ValidationError({"next_maintenance_date": msg})
        return attrs


class MaintenanceNotesSerializer(FrontendAliasMixin, serializers.Serializer):
    technician_notes = serializers.CharField(allow_blank=True)


class MaintenanceStatusSerializer(serializers.Serializer):
    status = serializers.ChoiceField(choices=MaintenanceRecord.Status.choices)
