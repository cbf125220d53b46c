import pytest
from fastapi.testclient import TestClient

from statusboard.config import settings
from statusboard.main import app


@pytest.fixture
def workspace(tmp_path, monkeypatch):
    """Point every configured path at a fresh temporary workspace."""
    ws = tmp_path / "workspace"
    ws.mkdir()
    paths = {
        "workspace_dir": ws,
        "heartbeat_file": ws / "HEARTBEAT.md",
        "cron_jobs_file": ws / "cron" / "jobs.json",
        "schedule_file": ws / "schedule.json",
        "profile_file": ws / "profile.json",
        "transcripts_dir": ws / "transcripts",
        "upload_dir": tmp_path / "uploads",
        "transcribe_script": ws / "transcribe.sh",
        "openclaw_config_path": tmp_path / "openclaw.json",
    }
    for name, path in paths.items():
        monkeypatch.setattr(settings, name, str(path))
    monkeypatch.setattr(settings, "openai_api_key", None)
    monkeypatch.setattr(settings, "transcribe_timeout_seconds", None)
    return ws


@pytest.fixture
def transcripts_dir(workspace):
    path = workspace / "transcripts"
    path.mkdir()
    return path


@pytest.fixture
def client():
    return TestClient(app)
