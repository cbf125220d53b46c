import logging
from datetime import datetime
from zoneinfo import ZoneInfo

from fastapi import APIRouter, HTTPException

from statusboard.config import settings
from statusboard.services import dashboard
from statusboard.services.workspace import WorkspaceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/dashboard", tags=["dashboard"])


def _now() -> datetime:
    return datetime.now(ZoneInfo(settings.timezone))


def _deadline() -> datetime:
    deadline = settings.audit_deadline
    if deadline.tzinfo is None:
        deadline = deadline.replace(tzinfo=ZoneInfo(settings.timezone))
    return deadline


@router.get("/notifications")
async def get_notifications() -> dict:
    return dashboard.build_notifications(_now(), settings.key_contacts)


@router.get("/status")
async def get_status() -> dict:
    """Current time in the dashboard's zone and the audit countdown."""
    now = _now()
    deadline = _deadline()
    return {
        "now": now.isoformat(timespec="seconds"),
        "timezone": settings.timezone,
        "deadline": deadline.isoformat(),
        "countdown": dashboard.countdown_dict(now, deadline),
    }


@router.get("/hospitals")
async def get_hospitals() -> list[dict]:
    return dashboard.hospital_status(settings.hospitals)


@router.get("/overview")
async def get_overview() -> dict:
    """Tasks grouped by category and cron jobs ready for display."""
    try:
        tasks = WorkspaceService.read_heartbeat()
        cron_jobs = WorkspaceService.read_cron_jobs()
    except Exception:
        logger.exception("Failed to read workspace files")
        raise HTTPException(status_code=500, detail="Failed to fetch tasks")
    return {
        "taskGroups": dashboard.group_tasks(tasks),
        "cronJobs": [dashboard.describe_cron_job(job) for job in cron_jobs],
    }
