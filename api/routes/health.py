"""
Health check and metrics endpoints
"""
from fastapi import APIRouter, Response
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest

router = APIRouter(tags=["ops"])


@router.get("/healthz")
async def health_check():
    """
    Health check endpoint
    Returns: {"ok": true} with 200
    """
    return {"ok": True}


@router.get("/metrics", response_class=Response)
async def metrics():
    """Prometheus-compatible metrics endpoint"""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)
