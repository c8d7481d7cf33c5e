from django.contrib import admin

from vendcrm.activities.models import Activity


@admin.register(Activity)
class ActivityAdmin(admin.ModelAdmin):
    list_display = ["customer", "type", "contacted_by", "completed", "created_at"]
    list_filter = ["type", "completed"]
    list_select_related = ["customer"]
    search_fields = ["description", "customer__company"]
