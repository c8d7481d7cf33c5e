from django.contrib import admin

from vendcrm.maintenance.models import MaintenanceRecord


@admin.register(MaintenanceRecord)
class MaintenanceRecordAdmin(admin.ModelAdmin):
    list_display = [
        "machine_id",
        "customer",
        "maintenance_type",
        "status",
        "scheduled_date",
        "cost",
    ]
    list_filter = ["status", "maintenance_type"]
    list_select_related = ["customer"]
    readonly_fields = ["cost", "parts_cost"]
