"""
Health check endpoint for API v1.

Reports whether the document store answers a ping.  Used by the
hosting platform's probes; it never raises.
"""

from typing import Any, Dict

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from automytee_api.app.core import db

router = APIRouter()


@router.get("", response_model=Dict[str, Any])
async def health() -> JSONResponse:
    store_up = await run_in_threadpool(db.ping)
    body = {
        "success": store_up,
        "data": {"status": "healthy" if store_up else "unhealthy", "store": "up" if store_up else "down"},
    }
    return JSONResponse(status_code=200 if store_up else 503, content=body)
