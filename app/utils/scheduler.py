"""
Scheduler Service
Polls the random activity API on an interval using APScheduler
"""
import logging
import threading
from datetime import datetime
from typing import Optional

from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

from app.utils.activity_client import fetch_random_activity

logger = logging.getLogger(__name__)

ACTIVITY_JOB_ID = "refresh_random_activity"

# Scheduler instance (exported for use in the activity router)
scheduler: Optional[BackgroundScheduler] = None

# Most recent fetch result, success or error
latest_activity: Optional[dict] = None

# One fetch in flight at a time, whether scheduled or manual
_fetch_lock = threading.Lock()

# Serializes start/stop so only one scheduler ever exists
_scheduler_lock = threading.Lock()


def refresh_activity(url: str, timeout: float = 10.0) -> dict:
    """Job function: fetch a new activity and keep it as the latest result"""
    global latest_activity

    with _fetch_lock:
        result = fetch_random_activity(url, timeout=timeout)
        latest_activity = result
    if result.get("success"):
        logger.info(f"Activity refreshed: {result['activity']}")
    else:
        logger.warning(f"Activity refresh failed: {result.get('error')}")
    return result


def get_latest_activity() -> Optional[dict]:
    return latest_activity


def start_scheduler(url: str, interval_seconds: int = 60, timeout: float = 10.0) -> bool:
    """
    Start the background scheduler with the activity polling job.
    The first fetch runs immediately, then every interval_seconds.
    Returns False if the scheduler was already running.
    """
    global scheduler

    with _scheduler_lock:
        if scheduler is not None:
            logger.warning("Scheduler is already running")
            return False

        scheduler = BackgroundScheduler()
        scheduler.add_job(
            refresh_activity,
            args=[url, timeout],
            trigger=IntervalTrigger(seconds=interval_seconds),
            id=ACTIVITY_JOB_ID,
            name="Random activity refresh",
            next_run_time=datetime.now(),
            max_instances=1,
            coalesce=True,
            replace_existing=True,
        )
        scheduler.start()
    logger.info(f"Scheduler started: polling {url} every {interval_seconds}s")
    return True


def stop_scheduler() -> bool:
    """Stop the background scheduler. Returns False if it was not running."""
    global scheduler

    with _scheduler_lock:
        if scheduler is None:
            return False

        scheduler.shutdown(wait=False)
        scheduler = None
    logger.info("Scheduler stopped")
    return True


def get_scheduler_status() -> dict:
    """Get current scheduler status"""
    current = scheduler
    if current is None:
        return {"running": False, "jobs": []}

    jobs = []
    for job in current.get_jobs():
        jobs.append({
            "id": job.id,
            "name": job.name,
            "next_run": job.next_run_time.isoformat() if job.next_run_time else None
        })

    return {
        "running": current.running,
        "jobs": jobs
    }
