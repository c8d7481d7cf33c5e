from django.http import HttpResponse
from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view
from rest_framework.response import Response

from vendcrm.analytics import services


@extend_schema(tags=["Analytics"])
@api_view(["GET"])
def customer_analytics(request):
    return Response({"territories": services.territory_coverage()})


@extend_schema(tags=["Analytics"])
@api_view(["GET"])
def sales_analytics(request):
    return Response(services.sales_overview())


@extend_schema(tags=["Analytics"])
@api_view(["GET"])
def activity_heatmap(request):
    return Response({"cells": services.activity_heatmap()})


def _csv_response(content: str, filename: str) -> HttpResponse:
    response = HttpResponse(content, content_type="text/csv; charset=utf-8")
    response["Content-Disposition"] = f'attachment; filename="{filename}"'
    return response


@extend_schema(tags=["Analytics"], responses={(200, "text/csv"): str})
@api_view(["GET"])
def export_customers(request):
    return _csv_response(services.customers_csv(), "customers.csv")


@extend_schema(tags=["Analytics"], responses={(200, "text/csv"): str})
@api_view(["GET"])
def export_territories(request):
    return _csv_response(services.territories_csv(), "territories.csv")
