"""Prometheus scrape endpoint.

Serves the request counters and ``nexlink_id_decode_failures_total``.
``create_app`` mounts it only when ENABLE_METRICS is on.
"""

from __future__ import annotations

from fastapi import APIRouter
from prometheus_client import CONTENT_TYPE_LATEST
from starlette.responses import Response

from nexlink.observability.metrics import get_metrics

router = APIRouter(tags=["observability"])


@router.get("/metrics", response_class=Response, summary="Prometheus metrics")
async def scrape() -> Response:
    return Response(get_metrics().generate_latest(), media_type=CONTENT_TYPE_LATEST)
