import asyncio
import json
import os
import stat

import pytest

from statusboard.config import settings
from statusboard.services.transcription import TranscriptionService


def _write_script(path, body: str) -> None:
    path.write_text("#!/bin/sh\n" + body)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)


@pytest.fixture
def fake_script(workspace, transcripts_dir, monkeypatch):
    """A transcription script that records its input and writes a transcript."""
    monkeypatch.setenv("FAKE_TRANSCRIPTS_DIR", str(transcripts_dir))
    script = workspace / "transcribe.sh"
    _write_script(
        script,
        'echo "$1" > "$FAKE_TRANSCRIPTS_DIR/.last_input"\n'
        'echo "$OPENAI_API_KEY" > "$FAKE_TRANSCRIPTS_DIR/.last_key"\n'
        'printf "hello from the meeting" > "$FAKE_TRANSCRIPTS_DIR/zoom_20250301_100000.txt"\n'
        'echo "done"\n',
    )
    return script


# ------------------------------------------------------------------
# Listing / reading / deleting
# ------------------------------------------------------------------


def test_list_endpoint(client, transcripts_dir):
    (transcripts_dir / "zoom_20250115_093000.txt").write_text("hello world")
    (transcripts_dir / "zoom_20250116_140000.txt").write_text("later")
    (transcripts_dir / "zoom_20250116_140000.txt.json").write_text('{"duration": 125}')

    resp = client.get("/api/zoom/transcripts")

    assert resp.status_code == 200
    transcripts = resp.json()["transcripts"]
    assert [t["filename"] for t in transcripts] == [
        "zoom_20250116_140000.txt",
        "zoom_20250115_093000.txt",
    ]
    assert transcripts[0]["duration"] == "2:05"
    assert transcripts[1]["wordCount"] == 2


def test_list_endpoint_creates_directory(client, workspace):
    resp = client.get("/api/zoom/transcripts")

    assert resp.status_code == 200
    assert resp.json() == {"transcripts": []}
    assert (workspace / "transcripts").is_dir()


def test_get_transcript(client, transcripts_dir):
    (transcripts_dir / "zoom_20250115_093000.txt").write_text("hello world")

    resp = client.get("/api/zoom/transcript/zoom_20250115_093000.txt")

    assert resp.status_code == 200
    assert resp.json() == {"content": "hello world"}


def test_get_transcript_json_is_decoded(client, transcripts_dir):
    (transcripts_dir / "zoom_20250115_093000.txt").write_text("hello")
    (transcripts_dir / "zoom_20250115_093000.txt.json").write_text('{"duration": 5}')

    resp = client.get("/api/zoom/transcript/zoom_20250115_093000.txt", params={"type": "json"})

    assert resp.json() == {"content": {"duration": 5}}


def test_get_missing_transcript(client, transcripts_dir):
    resp = client.get("/api/zoom/transcript/missing.txt")

    assert resp.status_code == 404
    assert "error" in resp.json()


def test_delete_endpoint(client, transcripts_dir):
    (transcripts_dir / "zoom_20250115_093000.txt").write_text("hello")
    (transcripts_dir / "zoom_20250115_093000.txt.srt").write_text("1\n")

    first = client.delete("/api/zoom/transcript/zoom_20250115_093000.txt")
    second = client.delete("/api/zoom/transcript/zoom_20250115_093000.txt")

    assert first.json() == {"success": True}
    assert second.json() == {"success": True}
    assert list(transcripts_dir.iterdir()) == []


# ------------------------------------------------------------------
# Download
# ------------------------------------------------------------------


def test_download_plain(client, transcripts_dir):
    (transcripts_dir / "zoom_20250115_093000.txt").write_text("hello world")

    resp = client.get("/api/zoom/download/zoom_20250115_093000.txt")

    assert resp.status_code == 200
    assert resp.text == "hello world"
    assert resp.headers["content-type"].startswith("text/plain")
    assert 'filename="zoom_20250115_093000.txt"' in resp.headers["content-disposition"]
    assert resp.headers["content-disposition"].startswith("attachment")


def test_download_json_sidecar(client, transcripts_dir):
    (transcripts_dir / "zoom_20250115_093000.txt").write_text("hello")
    (transcripts_dir / "zoom_20250115_093000.txt.json").write_text('{"duration": 5}')

    resp = client.get("/api/zoom/download/zoom_20250115_093000.txt?type=json")

    assert resp.status_code == 200
    assert resp.headers["content-type"].startswith("application/json")
    assert 'filename="zoom_20250115_093000.json"' in resp.headers["content-disposition"]
    assert resp.json() == {"duration": 5}


def test_download_unknown_type(client, transcripts_dir):
    (transcripts_dir / "zoom_20250115_093000.txt").write_text("hello")

    resp = client.get("/api/zoom/download/zoom_20250115_093000.txt?type=exe")

    assert resp.status_code == 400


@pytest.mark.parametrize(
    "path",
    [
        "/api/zoom/download/..%2F..%2Fetc%2Fpasswd",
        "/api/zoom/download/..%2F..%2Fetc%2Fpasswd?type=srt",
        "/api/zoom/transcript/..%2F..%2Fetc%2Fpasswd",
    ],
)
def test_traversal_is_forbidden(client, transcripts_dir, path):
    resp = client.get(path)

    assert resp.status_code == 403
    assert resp.json() == {"error": "Invalid file path"}


def test_delete_traversal_is_forbidden(client, transcripts_dir, tmp_path):
    victim = tmp_path / "victim.txt"
    victim.write_text("keep me")

    resp = client.delete("/api/zoom/transcript/..%2F..%2Fvictim.txt")

    assert resp.status_code == 403
    assert victim.exists()


@pytest.mark.parametrize(
    "method, path",
    [
        ("GET", "/api/zoom/transcript/a%00.txt"),
        ("GET", "/api/zoom/download/a%00.txt"),
        ("DELETE", "/api/zoom/transcript/a%00.txt"),
    ],
)
def test_nul_byte_is_forbidden(client, transcripts_dir, method, path):
    (transcripts_dir / "a.txt").write_text("x")

    resp = client.request(method, path)

    assert resp.status_code == 403
    assert resp.json() == {"error": "Invalid file path"}
    assert (transcripts_dir / "a.txt").exists()


# ------------------------------------------------------------------
# Upload / transcription
# ------------------------------------------------------------------


def test_upload_rejects_non_media(client, workspace):
    resp = client.post(
        "/api/zoom/transcribe", files={"file": ("diagram.png", b"\x89PNG", "image/png")}
    )

    assert resp.status_code == 400
    assert "Invalid file type" in resp.json()["error"]
    assert not os.path.exists(settings.upload_dir)


def test_upload_requires_file(client, workspace):
    resp = client.post(
        "/api/zoom/transcribe", files={"other": ("a.mp3", b"x", "audio/mpeg")}
    )

    assert resp.status_code == 400
    assert resp.json() == {"error": "No file provided"}


def test_upload_without_api_key(client, workspace, fake_script):
    resp = client.post(
        "/api/zoom/transcribe", files={"file": ("meeting.mp4", b"data", "video/mp4")}
    )

    assert resp.status_code == 500
    assert "OPENAI_API_KEY" in resp.json()["error"]
    assert not os.path.exists(settings.upload_dir)


def test_upload_runs_script(client, workspace, transcripts_dir, fake_script, monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "sk-env")

    resp = client.post(
        "/api/zoom/transcribe", files={"file": ("meeting.m4a", b"audio-bytes", "audio/mp4")}
    )

    assert resp.status_code == 200
    assert resp.json() == {"success": True, "message": "Transcription completed successfully"}

    staged = (transcripts_dir / ".last_input").read_text().strip()
    assert os.path.basename(staged).startswith("upload_")
    assert staged.endswith(".m4a")
    assert not os.path.exists(staged)
    assert (transcripts_dir / ".last_key").read_text().strip() == "sk-env"

    listing = client.get("/api/zoom/transcripts").json()["transcripts"]
    assert [t["filename"] for t in listing] == ["zoom_20250301_100000.txt"]


def test_config_file_overrides_env_key(client, workspace, transcripts_dir, fake_script, monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "sk-env")
    with open(settings.openclaw_config_path, "w") as f:
        json.dump({"env": {"OPENAI_API_KEY": "sk-config"}}, f)

    resp = client.post(
        "/api/zoom/transcribe", files={"file": ("meeting.mp4", b"data", "video/mp4")}
    )

    assert resp.status_code == 200
    assert (transcripts_dir / ".last_key").read_text().strip() == "sk-config"


def test_script_failure_reports_stderr(client, workspace, monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "sk-env")
    _write_script(workspace / "transcribe.sh", 'echo "whisper exploded" >&2\nexit 3\n')

    resp = client.post(
        "/api/zoom/transcribe", files={"file": ("meeting.mp3", b"data", "audio/mpeg")}
    )

    assert resp.status_code == 500
    assert resp.json() == {"error": "Transcription failed", "details": "whisper exploded"}
    assert os.listdir(settings.upload_dir) == []


def test_script_output_limit(client, workspace, monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "sk-env")
    monkeypatch.setattr(settings, "transcribe_max_output_bytes", 16)
    _write_script(workspace / "transcribe.sh", 'echo "this line is much longer than sixteen bytes"\n')

    resp = client.post(
        "/api/zoom/transcribe", files={"file": ("meeting.mp3", b"data", "audio/mpeg")}
    )

    assert resp.status_code == 500
    assert "exceeded" in resp.json()["details"]
    assert os.listdir(settings.upload_dir) == []


def test_script_timeout(client, workspace, monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "sk-env")
    monkeypatch.setattr(settings, "transcribe_timeout_seconds", 0.5)
    _write_script(workspace / "transcribe.sh", "exec sleep 30\n")

    resp = client.post(
        "/api/zoom/transcribe", files={"file": ("meeting.mp3", b"data", "audio/mpeg")}
    )

    assert resp.status_code == 500
    assert "timed out" in resp.json()["details"]


class _InterruptedUpload:
    """Upload whose body stream breaks after the first chunk."""

    filename = "meeting.mp3"
    content_type = "audio/mpeg"

    def __init__(self):
        self.reads = 0

    async def read(self, size: int = -1) -> bytes:
        self.reads += 1
        if self.reads == 1:
            return b"partial audio"
        raise OSError("connection reset by peer")


def test_interrupted_upload_leaves_no_partial_file(workspace, monkeypatch):
    monkeypatch.setattr(settings, "openai_api_key", "sk-env")
    service = TranscriptionService()

    with pytest.raises(OSError):
        asyncio.run(service.transcribe_upload(_InterruptedUpload()))

    assert os.listdir(settings.upload_dir) == []
