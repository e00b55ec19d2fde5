from django.http import HttpResponse
from drf_spectacular.utils import extend_schema
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from rest_framework.decorators import api_view


@extend_schema(exclude=True)
@api_view(["GET"])
def marketplace_prometheus_metrics(request):
    """Prometheus exposition of the product and chat counters."""
    return HttpResponse(generate_latest(), content_type=CONTENT_TYPE_LATEST)
