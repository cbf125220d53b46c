import json
from datetime import datetime, timedelta, timezone

import pytest

from statusboard.config import settings
from statusboard.services.dashboard import (
    build_notifications,
    countdown,
    describe_cron_job,
    format_cron_schedule,
    group_tasks,
    hospital_status,
    occupancy_percent,
)


def _ids(now: datetime) -> list[str]:
    return [n["id"] for n in build_notifications(now)["notifications"]]


@pytest.mark.parametrize(
    "hour, minute, expected",
    [
        (6, 59, []),
        (7, 0, ["medicine-7am"]),
        (7, 29, ["medicine-7am"]),
        (7, 30, []),
        (8, 30, ["nabh-daily"]),
        (10, 44, []),
        (10, 45, ["meeting-11am"]),
        (11, 0, []),
        (15, 59, ["meeting-4pm"]),
    ],
)
def test_notification_windows(hour, minute, expected):
    now = datetime(2026, 2, 2, hour, minute)
    assert _ids(now) == expected + ["contacts"]


def test_unread_count_and_contacts():
    result = build_notifications(datetime(2026, 2, 2, 7, 5), ["Front desk: 101", "Quality: 202"])

    assert result["unreadCount"] == 1
    contacts = result["notifications"][-1]
    assert contacts["message"] == "Front desk: 101 | Quality: 202"
    assert contacts["actionRequired"] is False


def test_countdown():
    deadline = datetime(2026, 2, 13, 9, 0, tzinfo=timezone(timedelta(hours=5, minutes=30)))
    now = deadline - timedelta(days=3, hours=4, minutes=5, seconds=30)

    c = countdown(now, deadline)

    assert (c.days, c.hours, c.minutes, c.passed) == (3, 4, 5, False)


def test_countdown_after_deadline():
    deadline = datetime(2026, 2, 13, 9, 0, tzinfo=timezone.utc)

    c = countdown(deadline + timedelta(hours=1), deadline)

    assert (c.days, c.hours, c.minutes, c.passed) == (0, 0, 0, True)


@pytest.mark.parametrize(
    "schedule, expected",
    [
        ("0 9 * * *", "09:00 daily"),
        ("30 8 * * 1-5", "08:30 daily"),
        ("every 2h", "every 2h"),
        ("", "Not scheduled"),
        (None, "Not scheduled"),
        ({"kind": "every"}, "Not scheduled"),
    ],
)
def test_format_cron_schedule(schedule, expected):
    assert format_cron_schedule(schedule) == expected


def test_describe_cron_job():
    job = {"id": "meds", "schedule": "0 7 * * *", "action": {"prompt": "Remind meds", "channel": "whatsapp"}}

    card = describe_cron_job(job)

    assert card["description"] == "Remind meds"
    assert card["schedule"] == "07:00 daily"
    assert card["channel"] == "whatsapp"

    bare = describe_cron_job({"id": "x"})
    assert (bare["description"], bare["channel"], bare["schedule"]) == ("Automated task", "System", "Not scheduled")


def test_group_tasks():
    tasks = [
        {"title": "a", "category": "NABH", "completed": True},
        {"title": "b", "category": "Ops", "completed": False},
        {"title": "c", "category": "NABH", "completed": False},
    ]

    groups = group_tasks(tasks)

    assert [(g["category"], g["completed"], g["total"]) for g in groups] == [("NABH", 1, 2), ("Ops", 0, 1)]


def test_hospital_status():
    cards = hospital_status(["Hope Hospital"])

    assert cards == [{
        "name": "Hope Hospital",
        "occupancy": 0,
        "total": 0,
        "percent": 0.0,
        "status": "Waiting for data",
        "lastUpdate": "Not yet checked",
    }]
    assert occupancy_percent(42, 75) == 56.0


# ------------------------------------------------------------------
# HTTP
# ------------------------------------------------------------------


def test_status_endpoint(client, monkeypatch):
    monkeypatch.setattr(settings, "audit_deadline", datetime(2000, 1, 1, tzinfo=timezone.utc))

    body = client.get("/api/dashboard/status").json()

    assert body["timezone"] == settings.timezone
    assert body["countdown"]["passed"] is True


def test_notifications_endpoint(client, monkeypatch):
    monkeypatch.setattr(settings, "key_contacts", ["Desk: 1"])

    body = client.get("/api/dashboard/notifications").json()

    assert body["notifications"][-1]["message"] == "Desk: 1"


def test_hospitals_endpoint(client, monkeypatch):
    monkeypatch.setattr(settings, "hospitals", ["A", "B"])

    assert [h["name"] for h in client.get("/api/dashboard/hospitals").json()] == ["A", "B"]


def test_overview_endpoint(client, workspace):
    (workspace / "HEARTBEAT.md").write_text("## Ops\n- [x] one\n- [ ] two\n")
    (workspace / "cron").mkdir()
    (workspace / "cron" / "jobs.json").write_text(json.dumps([{"id": "j", "schedule": "5 6 * * *"}]))

    body = client.get("/api/dashboard/overview").json()

    assert body["taskGroups"][0]["completed"] == 1
    assert body["cronJobs"][0]["schedule"] == "06:05 daily"


def test_index_page(client):
    resp = client.get("/")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("text/html")
