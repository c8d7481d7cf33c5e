from decimal import Decimal

from django.db import models
from django.utils.translation import gettext_lazy as _

TWO_PLACES = Decimal("0.01")


class MaintenanceRecord(models.Model):
    """A scheduled or completed service visit on one machine."""

    class Status(models.TextChoices):
        PENDING = "pending", _("Pending")
        IN_PROGRESS = "in-progress", _("In progress")
        DONE = "done", _("Done")

    customer = models.ForeignKey(
        "customers.Customer",
        on_delete=models.CASCADE,
        related_name="maintenance_records",
    )
    machine_id = models.CharField(max_length=100)
    serial_number = models.CharField(max_length=100)
    machine_type = models.CharField(max_length=100)
    maintenance_type = models.CharField(
        max_length=100, help_text=_("preventive, repair, install, ...")
    )
    description = models.TextField()
    status = models.CharField(
        max_length=20, choices=Status.choices, default=Status.PENDING, db_index=True
    )
    technician_notes = models.TextField(blank=True, default="")
    # [{"name": str, "quantity": int, "cost": decimal-string}]
    parts_used = models.JSONField(default=list, blank=True)
    cost = models.DecimalField(max_digits=10, decimal_places=2, default=Decimal("0"))
    labor_cost = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal("0")
    )
    parts_cost = models.DecimalField(
        max_digits=10, decimal_places=2, default=Decimal("0")
    )
    scheduled_date = models.DateTimeField()
    completed_date = models.DateTimeField(null=True, blank=True)
    next_maintenance_date = models.DateTimeField(null=True, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-scheduled_date", "-id"]

    def __str__(self):
        return f"{self.machine_id} {self.maintenance_type} ({self.status})"

    def recalculate_costs(self) -> None:
        parts_total = sum(
            (
                Decimal(str(part.get("cost", 0) or 0))
                * int(part.get("quantity", 1) or 0)
                for part in self.parts_used or []
            ),
            Decimal("0"),
        )
        self.parts_cost = parts_total.quantize(TWO_PLACES)
        self.cost = (Decimal(self.labor_cost or 0) + self.parts_cost).quantize(
            TWO_PLACES
        )

    def save(self, *args, **kwargs):
        self.recalculate_costs()
        update_fields = kwargs.get("update_fields")
        if update_fields is not None:
            kwargs["update_fields"] = {*update_fields, "cost", "parts_cost"}
        super().save(*args, **kwargs)
