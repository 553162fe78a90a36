import threading
import time
from unittest.mock import MagicMock, patch

import pytest
import requests

from app.utils import scheduler
from app.utils.activity_client import fetch_random_activity

API_URL = "https://activity.example.com/api/activity/"


def _response(payload=None, json_error=None, http_error=None):
    response = MagicMock()
    if http_error:
        response.raise_for_status.side_effect = http_error
    if json_error:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture(autouse=True)
def reset_scheduler_state():
    yield
    scheduler.stop_scheduler()
    scheduler.latest_activity = None


def test_fetch_success():
    with patch("app.utils.activity_client.requests.get", return_value=_response({"activity": "Learn to juggle"})) as get:
        result = fetch_random_activity(API_URL, timeout=3)

    get.assert_called_once_with(API_URL, timeout=3)
    assert result["success"] is True
    assert result["activity"] == "Learn to juggle"
    assert "fetched_at" in result


def test_fetch_network_error_is_reported():
    with patch("app.utils.activity_client.requests.get", side_effect=requests.ConnectionError("down")):
        result = fetch_random_activity(API_URL)

    assert result["success"] is False
    assert "down" in result["error"]
    assert "activity" not in result


def test_fetch_http_error_is_reported():
    error = requests.HTTPError("503 Server Error")
    with patch("app.utils.activity_client.requests.get", return_value=_response(http_error=error)):
        result = fetch_random_activity(API_URL)

    assert result["success"] is False
    assert "503" in result["error"]


def test_fetch_invalid_json_is_reported():
    with patch("app.utils.activity_client.requests.get", return_value=_response(json_error=ValueError("bad json"))):
        result = fetch_random_activity(API_URL)

    assert result["success"] is False
    assert "invalid JSON" in result["error"]


def test_fetch_missing_activity_is_reported():
    with patch("app.utils.activity_client.requests.get", return_value=_response({"error": "No activity found"})):
        result = fetch_random_activity(API_URL)

    assert result["success"] is False


def test_refresh_activity_stores_latest():
    assert scheduler.get_latest_activity() is None
    with patch("app.utils.scheduler.fetch_random_activity", return_value={"success": True, "activity": "Bake", "fetched_at": "t"}):
        scheduler.refresh_activity(API_URL)
    assert scheduler.get_latest_activity()["activity"] == "Bake"

    with patch("app.utils.scheduler.fetch_random_activity", return_value={"success": False, "error": "boom", "fetched_at": "t"}):
        scheduler.refresh_activity(API_URL)
    assert scheduler.get_latest_activity() == {"success": False, "error": "boom", "fetched_at": "t"}


refreshed_urls = []


def record_refresh(url, timeout=10.0):
    refreshed_urls.append(url)


def test_start_and_stop_scheduler():
    assert scheduler.get_scheduler_status() == {"running": False, "jobs": []}

    with patch("app.utils.scheduler.refresh_activity", record_refresh):
        assert scheduler.start_scheduler(API_URL, interval_seconds=3600) is True
        assert scheduler.start_scheduler(API_URL, interval_seconds=3600) is False

        status = scheduler.get_scheduler_status()
        assert status["running"] is True
        assert [job["id"] for job in status["jobs"]] == [scheduler.ACTIVITY_JOB_ID]

        assert scheduler.stop_scheduler() is True

    assert scheduler.stop_scheduler() is False
    assert scheduler.get_scheduler_status()["running"] is False


def test_refreshes_never_overlap():
    in_flight = []
    overlaps = []

    def slow_fetch(url, timeout=10.0):
        in_flight.append(url)
        if len(in_flight) > 1:
            overlaps.append(len(in_flight))
        time.sleep(0.05)
        in_flight.pop()
        return {"success": True, "activity": "Paint", "fetched_at": "t"}

    with patch("app.utils.scheduler.fetch_random_activity", slow_fetch):
        threads = [threading.Thread(target=scheduler.refresh_activity, args=(API_URL,)) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    assert overlaps == []
    assert scheduler.get_latest_activity()["activity"] == "Paint"


def test_concurrent_starts_create_one_scheduler():
    barrier = threading.Barrier(4)
    results = []

    def start():
        barrier.wait()
        results.append(scheduler.start_scheduler(API_URL, interval_seconds=3600))

    with patch("app.utils.scheduler.refresh_activity", record_refresh):
        threads = [threading.Thread(target=start) for _ in range(4)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert sorted(results) == [False, False, False, True]
        assert scheduler.stop_scheduler() is True
        assert scheduler.stop_scheduler() is False
