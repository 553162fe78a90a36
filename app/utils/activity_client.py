"""
Activity Client
Fetches a random activity suggestion from the public activity API
"""
import logging
from datetime import datetime

import requests

logger = logging.getLogger(__name__)


def fetch_random_activity(url: str, timeout: float = 10.0) -> dict:
    """
    Fetch one random activity.

    Args:
        url: Activity API endpoint
        timeout: Request timeout in seconds

    Returns:
        dict: {"success": True, "activity": ...} or {"success": False, "error": ...},
              both carrying "fetched_at"
    """
    fetched_at = datetime.utcnow().isoformat()

    try:
        logger.info(f"Fetching random activity from {url}")
        response = requests.get(url, timeout=timeout)
        response.raise_for_status()
        data = response.json()
    except requests.RequestException as e:
        error_msg = f"Activity API request failed: {str(e)}"
        logger.error(error_msg)
        return {"success": False, "error": error_msg, "fetched_at": fetched_at}
    except ValueError as e:
        error_msg = f"Activity API returned invalid JSON: {str(e)}"
        logger.error(error_msg)
        return {"success": False, "error": error_msg, "fetched_at": fetched_at}

    activity = data.get("activity") if isinstance(data, dict) else None
    if not activity:
        error_msg = "Activity API response has no 'activity' field"
        logger.error(f"{error_msg}: {data}")
        return {"success": False, "error": error_msg, "fetched_at": fetched_at}

    return {"success": True, "activity": activity, "fetched_at": fetched_at}
