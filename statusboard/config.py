import os
import tempfile
from datetime import datetime

from pydantic import model_validator
from pydantic_settings import BaseSettings

_OPENCLAW_HOME = os.path.join(os.path.expanduser("~"), ".openclaw")


class Settings(BaseSettings):
    # Workspace
    workspace_dir: str = os.path.join(_OPENCLAW_HOME, "workspace")
    heartbeat_file: str = ""
    cron_jobs_file: str = os.path.join(_OPENCLAW_HOME, "cron", "jobs.json")
    schedule_file: str = ""
    profile_file: str = ""

    # Transcripts
    transcripts_dir: str = ""
    upload_dir: str = os.path.join(tempfile.gettempdir(), "zoom-uploads")
    transcribe_script: str = ""
    openclaw_config_path: str = os.path.join(_OPENCLAW_HOME, "openclaw.json")
    openai_api_key: str | None = None
    transcribe_max_output_bytes: int = 10 * 1024 * 1024
    transcribe_timeout_seconds: float | None = None

    # Accreditation
    learning_resources_file: str | None = None

    # Dashboard
    timezone: str = "Asia/Kolkata"
    audit_deadline: datetime = datetime.fromisoformat("2026-02-13T09:00:00+05:30")
    hospitals: list[str] = ["Ayushman Nagpur Hospital", "Hope Hospital"]
    key_contacts: list[str] = []

    # Server
    host: str = "127.0.0.1"
    port: int = 8000
    log_level: str = "INFO"

    model_config = {"env_file": ".env", "extra": "ignore"}

    @model_validator(mode="after")
    def _derive_workspace_paths(self) -> "Settings":
        """Fill in the paths that live under ``workspace_dir`` when unset."""
        ws = self.workspace_dir
        if not self.heartbeat_file:
            self.heartbeat_file = os.path.join(ws, "HEARTBEAT.md")
        if not self.schedule_file:
            self.schedule_file = os.path.join(ws, "schedule.json")
        if not self.profile_file:
            self.profile_file = os.path.join(ws, "profile.json")
        if not self.transcripts_dir:
            self.transcripts_dir = os.path.join(ws, "transcripts")
        if not self.transcribe_script:
            self.transcribe_script = os.path.join(
                ws, "skills", "zoom-transcription", "transcribe-zoom.sh"
            )
        return self


settings = Settings()
