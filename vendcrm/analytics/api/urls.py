from django.urls import path

from vendcrm.analytics.api import views

urlpatterns = [
    path("customers/", views.customer_analytics, name="analytics-customers"),
    path("sales/", views.sales_analytics, name="analytics-sales"),
    path(
        "activities/heatmap/",
        views.activity_heatmap,
        name="analytics-activity-heatmap",
    ),
    path(
        "export/customers.csv",
        views.export_customers,
        name="analytics-export-customers",
    ),
    path(
        "export/territories.csv",
        views.export_territories,
        name="analytics-export-territories",
    ),
]
