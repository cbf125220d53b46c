import os
import re

from statusboard.config import settings
from statusboard.services.storage import StorageService

_HEADING = re.compile(r"^#{1,6}\s+(?P<title>.+?)\s*$")
_CHECKBOX = re.compile(r"^\s*[-*]\s+\[(?P<mark>[ xX])\]\s+(?P<title>.+?)\s*$")

DEFAULT_CATEGORY = "General"


class WorkspaceService:
    """Read-only accessors over the assistant's workspace files.

    Each accessor is independent and returns an empty default when its file
    is missing. Nothing is cross-checked between them.
    """

    @staticmethod
    def read_heartbeat() -> list[dict]:
        """Parse the markdown checklist in the heartbeat file into tasks.

        ``## Heading`` lines set the category for the checkboxes below them::

            ## NABH
            - [x] Update evidence binder
            - [ ] Staff training sign-off
        """
        path = settings.heartbeat_file
        if not os.path.exists(path):
            return []
        return parse_heartbeat(StorageService.read_text(path))

    @staticmethod
    def read_cron_jobs() -> list[dict]:
        data = StorageService.read_json_or_default(settings.cron_jobs_file, [])
        if isinstance(data, dict):
            return data.get("jobs", [])
        return data

    @staticmethod
    def get_daily_schedule() -> list[dict]:
        return StorageService.read_json_or_default(settings.schedule_file, [])

    @staticmethod
    def get_user_profile() -> dict:
        return StorageService.read_json_or_default(settings.profile_file, {})


def parse_heartbeat(text: str) -> list[dict]:
    tasks: list[dict] = []
    category = DEFAULT_CATEGORY
    for line in text.splitlines():
        heading = _HEADING.match(line)
        if heading:
            category = heading.group("title")
            continue
        box = _CHECKBOX.match(line)
        if box:
            tasks.append({
                "id": f"task-{len(tasks) + 1}",
                "title": box.group("title"),
                "category": category,
                "completed": box.group("mark") != " ",
            })
    return tasks
