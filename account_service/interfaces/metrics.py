"""
Metrics exposition router.

Serves the application's Prometheus registry in the text format.
"""

from fastapi import APIRouter, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST

router = APIRouter(tags=["metrics"])


@router.get("/metrics", include_in_schema=False)
def metrics(request: Request) -> Response:
    return Response(
        content=request.app.state.metrics.exposition(),
        media_type=CONTENT_TYPE_LATEST,
    )
