from django.contrib import admin

from vendcrm.customers.models import Customer
from vendcrm.customers.models import LoyaltyTransaction


class LoyaltyTransactionInline(admin.TabularInline):
    model = LoyaltyTransaction
    extra = 0
    readonly_fields = ["created_at"]


@admin.register(Customer)
class CustomerAdmin(admin.ModelAdmin):
    list_display = ["company", "name", "email", "service_territory", "state"]
    list_filter = ["service_territory", "state"]
    search_fields = ["name", "company", "email"]
    inlines = [LoyaltyTransactionInline]
