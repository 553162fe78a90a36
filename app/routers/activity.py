"""
Activity Router
Latest random activity plus start/stop control of the polling scheduler
"""
import logging
from typing import Dict

from fastapi import APIRouter, HTTPException

from app.core.config import settings
from app.utils import scheduler as activity_scheduler

router = APIRouter()
logger = logging.getLogger(__name__)


@router.get("/")
def get_activity() -> Dict:
    """
    Latest fetch result. "success" is False when the last fetch failed, in
    which case "error" describes why.
    """
    latest = activity_scheduler.get_latest_activity()
    if latest is None:
        raise HTTPException(status_code=404, detail="No activity fetched yet")
    return latest


@router.post("/refresh")
def refresh_activity_now() -> Dict:
    return activity_scheduler.refresh_activity(
        settings.ACTIVITY_API_URL,
        timeout=settings.ACTIVITY_REQUEST_TIMEOUT,
    )


@router.post("/start")
def start_polling() -> Dict:
    started = activity_scheduler.start_scheduler(
        settings.ACTIVITY_API_URL,
        interval_seconds=settings.ACTIVITY_POLL_SECONDS,
        timeout=settings.ACTIVITY_REQUEST_TIMEOUT,
    )
    message = "Activity polling started" if started else "Activity polling already running"
    return {"message": message, **activity_scheduler.get_scheduler_status()}


@router.post("/stop")
def stop_polling() -> Dict:
    stopped = activity_scheduler.stop_scheduler()
    message = "Activity polling stopped" if stopped else "Activity polling was not running"
    return {"message": message, **activity_scheduler.get_scheduler_status()}


@router.get("/status")
def polling_status() -> Dict:
    return {
        **activity_scheduler.get_scheduler_status(),
        "interval_seconds": settings.ACTIVITY_POLL_SECONDS,
        "api_url": settings.ACTIVITY_API_URL,
    }
