from django.contrib import admin

from vendcrm.sales.models import Opportunity


@admin.register(Opportunity)
class OpportunityAdmin(admin.ModelAdmin):
    list_display = ["customer", "product", "stage", "value", "assigned_to"]
    list_filter = ["stage"]
    list_select_related = ["customer", "product"]
    search_fields = ["customer__company", "product__name", "assigned_to"]
