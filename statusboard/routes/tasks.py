import logging
from datetime import datetime, timezone

from fastapi import APIRouter, HTTPException

from statusboard.services.workspace import WorkspaceService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["tasks"])


@router.get("/tasks")
async def get_tasks() -> dict:
    """Heartbeat tasks, cron jobs, daily schedule and profile in one payload."""
    try:
        tasks = WorkspaceService.read_heartbeat()
        cron_jobs = WorkspaceService.read_cron_jobs()
        schedule = WorkspaceService.get_daily_schedule()
        profile = WorkspaceService.get_user_profile()
    except Exception:
        logger.exception("Failed to read workspace files")
        raise HTTPException(status_code=500, detail="Failed to fetch tasks")

    return {
        "tasks": tasks,
        "cronJobs": cron_jobs,
        "schedule": schedule,
        "profile": profile,
        "lastUpdated": datetime.now(timezone.utc).isoformat(),
    }
