"""
Prometheus Metrics Endpoint.

PURPOSE:
    Expose /metrics endpoint for a Prometheus scraper to collect metrics.

    Test with: curl http://localhost:5001/metrics
"""

from fastapi import APIRouter, Response
from message_api.observability.metrics import get_metrics_content


router = APIRouter(prefix="/metrics", tags=["observability"])


@router.get("")
async def metrics():
    """Prometheus metrics endpoint in Prometheus text format."""
    content, content_type = get_metrics_content()
    return Response(content=content, media_type=content_type)
