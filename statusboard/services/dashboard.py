"""Derived display data for the dashboard cards.

Everything here is a pure function of its arguments (``now`` is always
passed in), so the front-end owns all UI state.
"""

from dataclasses import asdict, dataclass
from datetime import datetime, time

REMINDER = "reminder"
MEETING = "meeting"
URGENT = "urgent"
CONTACT = "contact"


@dataclass(frozen=True)
class NotificationRule:
    id: str
    type: str
    title: str
    message: str
    label: str  # shown as the notification time
    start: time  # window start, inclusive
    end: time  # window end, exclusive
    priority: str = "high"
    action_required: bool = True

    def is_active(self, now: datetime) -> bool:
        return self.start <= now.time() < self.end


NOTIFICATION_RULES: tuple[NotificationRule, ...] = (
    NotificationRule(
        id="medicine-7am",
        type=REMINDER,
        title="Medicine Time!",
        message="Time to take your morning medications",
        label="7:00 AM",
        start=time(7, 0),
        end=time(7, 30),
    ),
    NotificationRule(
        id="nabh-daily",
        type=URGENT,
        title="NABH Daily Coordination",
        message="Daily NABH coordination with the quality team",
        label="8:30 AM",
        start=time(8, 30),
        end=time(9, 0),
    ),
    NotificationRule(
        id="meeting-11am",
        type=MEETING,
        title="Meeting in 15 minutes",
        message="SOP review group - Directors chamber + Zoom",
        label="11:00 AM",
        start=time(10, 45),
        end=time(11, 0),
    ),
    NotificationRule(
        id="meeting-4pm",
        type=MEETING,
        title="Meeting in 15 minutes",
        message="SOP review group - Directors chamber + Zoom",
        label="4:00 PM",
        start=time(15, 45),
        end=time(16, 0),
    ),
)


def _notification_dict(rule: NotificationRule) -> dict:
    return {
        "id": rule.id,
        "type": rule.type,
        "title": rule.title,
        "message": rule.message,
        "time": rule.label,
        "priority": rule.priority,
        "actionRequired": rule.action_required,
    }


def build_notifications(
    now: datetime,
    contacts: list[str] | None = None,
    rules: tuple[NotificationRule, ...] = NOTIFICATION_RULES,
) -> dict:
    """Notifications whose window contains *now*, plus the contacts card."""
    notifications = [_notification_dict(r) for r in rules if r.is_active(now)]
    notifications.append({
        "id": "contacts",
        "type": CONTACT,
        "title": "Key Contacts",
        "message": " | ".join(contacts or []) or "No contacts configured",
        "time": "Always Available",
        "priority": "medium",
        "actionRequired": False,
    })
    return {
        "notifications": notifications,
        "unreadCount": sum(1 for n in notifications if n["actionRequired"]),
    }


@dataclass
class Countdown:
    days: int
    hours: int
    minutes: int
    passed: bool


def countdown(now: datetime, deadline: datetime) -> Countdown:
    """Whole days/hours/minutes until *deadline*; all zero once it has passed.

    Both datetimes must be timezone-aware (or both naive).
    """
    remaining = int((deadline - now).total_seconds())
    if remaining <= 0:
        return Countdown(days=0, hours=0, minutes=0, passed=True)
    days, rest = divmod(remaining, 86400)
    return Countdown(days=days, hours=rest // 3600, minutes=rest % 3600 // 60, passed=False)


def countdown_dict(now: datetime, deadline: datetime) -> dict:
    return asdict(countdown(now, deadline))


def format_cron_schedule(schedule) -> str:
    """``"30 8 * * *"`` -> ``"08:30 daily"``.

    Only the minute and hour fields are rendered; other five-field
    expressions are shown the same way. Non-cron strings pass through.
    """
    if not schedule or not isinstance(schedule, str):
        return "Not scheduled"
    parts = schedule.split(" ")
    if len(parts) == 5:
        minute, hour = parts[0], parts[1]
        return f"{hour.rjust(2, '0')}:{minute.rjust(2, '0')} daily"
    return schedule


def describe_cron_job(job: dict) -> dict:
    """Cron job definition as shown on its card."""
    action = job.get("action") or {}
    return {
        "id": job.get("id"),
        "name": job.get("name") or job.get("id"),
        "description": action.get("message") or action.get("prompt") or "Automated task",
        "schedule": format_cron_schedule(job.get("schedule")),
        "channel": action.get("channel") or "System",
        "enabled": job.get("enabled", True),
    }


def group_tasks(tasks: list[dict]) -> list[dict]:
    """Tasks grouped by category in first-seen order with completion counts."""
    groups: dict[str, list[dict]] = {}
    for task in tasks:
        groups.setdefault(task.get("category") or "General", []).append(task)
    return [
        {
            "category": category,
            "completed": sum(1 for t in items if t.get("completed")),
            "total": len(items),
            "tasks": items,
        }
        for category, items in groups.items()
    ]


def hospital_status(names: list[str]) -> list[dict]:
    """Occupancy cards. Figures stay at zero until a daily update supplies them."""
    return [
        {
            "name": name,
            "occupancy": 0,
            "total": 0,
            "percent": occupancy_percent(0, 0),
            "status": "Waiting for data",
            "lastUpdate": "Not yet checked",
        }
        for name in names
    ]


def occupancy_percent(occupancy: int, total: int) -> float:
    if total <= 0:
        return 0.0
    return round(occupancy / total * 100, 1)
