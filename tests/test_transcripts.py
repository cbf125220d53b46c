import json
import os
from datetime import datetime

import pytest

from statusboard.errors import PathOutsideRootError, TranscriptNotFoundError
from statusboard.services.transcripts import (
    TranscriptStore,
    format_duration,
    is_primary_transcript,
    parse_filename_timestamp,
)


@pytest.fixture
def store(transcripts_dir):
    return TranscriptStore(str(transcripts_dir))


# ------------------------------------------------------------------
# Filename helpers
# ------------------------------------------------------------------


def test_parse_filename_timestamp():
    assert parse_filename_timestamp("zoom_20250115_093000.txt") == datetime(2025, 1, 15, 9, 30, 0)
    assert parse_filename_timestamp("team_sync_20240229_235959.txt") == datetime(2024, 2, 29, 23, 59, 59)


@pytest.mark.parametrize(
    "name",
    ["notes.txt", "zoom_2025011_093000.txt", "zoom_20251301_093000.txt", "zoom_20250115_093000.md"],
)
def test_parse_filename_timestamp_rejects(name):
    assert parse_filename_timestamp(name) is None


def test_format_duration():
    assert format_duration(125) == "2:05"
    assert format_duration(59.9) == "0:59"
    assert format_duration(3600) == "60:00"
    assert format_duration(0) == "Unknown"
    assert format_duration(None) == "Unknown"
    assert format_duration("125") == "Unknown"


def test_is_primary_transcript():
    assert is_primary_transcript("zoom_20250115_093000.txt")
    assert not is_primary_transcript("zoom_20250115_093000.txt.json")
    assert not is_primary_transcript("zoom_20250115_093000.txt.srt")
    assert not is_primary_transcript("recording.mp4")


# ------------------------------------------------------------------
# Listing
# ------------------------------------------------------------------


def test_list_example_directory(store, transcripts_dir):
    (transcripts_dir / "zoom_20250115_093000.txt").write_text("hello world")
    (transcripts_dir / "zoom_20250116_140000.txt").write_text("second meeting transcript")
    (transcripts_dir / "zoom_20250116_140000.txt.json").write_text(json.dumps({"duration": 125}))

    listing = [s.to_dict() for s in store.list_transcripts()]

    assert [t["filename"] for t in listing] == [
        "zoom_20250116_140000.txt",
        "zoom_20250115_093000.txt",
    ]
    newer, older = listing
    assert newer["duration"] == "2:05"
    assert newer["hasJson"] is True
    assert newer["hasSrt"] is False
    assert newer["date"] == "2025-01-16T14:00:00"
    assert older["wordCount"] == 2
    assert older["duration"] == "Unknown"
    assert older["size"] == "0.0 KB"


def test_list_excludes_sidecars(store, transcripts_dir):
    (transcripts_dir / "a_20250101_000000.txt").write_text("x")
    (transcripts_dir / "a_20250101_000000.txt.json").write_text("{}")
    (transcripts_dir / "a_20250101_000000.txt.srt").write_text("1\n")
    (transcripts_dir / "orphan.txt.srt").write_text("1\n")

    names = [s.filename for s in store.list_transcripts()]

    assert names == ["a_20250101_000000.txt"]
    summary = store.list_transcripts()[0]
    assert summary.has_json and summary.has_srt


def test_list_falls_back_to_mtime(store, transcripts_dir):
    path = transcripts_dir / "standup notes.txt"
    path.write_text("one two three")
    mtime = datetime(2023, 5, 6, 7, 8, 9).timestamp()
    os.utime(path, (mtime, mtime))

    (summary,) = store.list_transcripts()

    assert summary.date == "2023-05-06T07:08:09"
    assert summary.word_count == 3


def test_filename_date_wins_over_mtime(store, transcripts_dir):
    path = transcripts_dir / "zoom_20200101_120000.txt"
    path.write_text("x")
    later = datetime(2024, 1, 1).timestamp()
    os.utime(path, (later, later))

    (summary,) = store.list_transcripts()

    assert summary.date == "2020-01-01T12:00:00"


def test_list_tolerates_bad_sidecar(store, transcripts_dir):
    (transcripts_dir / "zoom_20250115_093000.txt").write_text("hello")
    (transcripts_dir / "zoom_20250115_093000.txt.json").write_text("{not json")

    (summary,) = store.list_transcripts()

    assert summary.duration == "Unknown"
    assert summary.has_json is True


def test_list_skips_unreadable_transcript(store, transcripts_dir):
    (transcripts_dir / "good_20250101_000000.txt").write_text("fine")
    (transcripts_dir / "bad_20250102_000000.txt").write_bytes(b"\xff\xfe\xfa")

    names = [s.filename for s in store.list_transcripts()]

    assert names == ["good_20250101_000000.txt"]


def test_list_creates_missing_directory(workspace):
    root = workspace / "not-yet"
    store = TranscriptStore(str(root))

    assert store.list_transcripts() == []
    assert root.is_dir()


# ------------------------------------------------------------------
# Read / download
# ------------------------------------------------------------------


def test_read_kinds(store, transcripts_dir):
    (transcripts_dir / "m_20250101_000000.txt").write_text("plain text")
    (transcripts_dir / "m_20250101_000000.txt.json").write_text('{"duration": 3, "segments": []}')

    assert store.read_text("m_20250101_000000.txt") == "plain text"
    assert store.read("m_20250101_000000.txt", "json") == {"duration": 3, "segments": []}


def test_download_names(store, transcripts_dir):
    (transcripts_dir / "m_20250101_000000.txt").write_text("x")
    (transcripts_dir / "m_20250101_000000.txt.srt").write_text("1\n")

    path, content_type, name = store.download("m_20250101_000000.txt", "srt")

    assert path == (transcripts_dir / "m_20250101_000000.txt.srt").resolve()
    assert content_type == "text/plain"
    assert name == "m_20250101_000000.srt"


def test_missing_file_is_not_found(store):
    with pytest.raises(TranscriptNotFoundError):
        store.resolve("nope.txt")


@pytest.mark.parametrize("name", ["../../etc/passwd", "../secret.txt", "/etc/passwd", "sub/../../x.txt"])
def test_traversal_is_rejected(store, name):
    with pytest.raises(PathOutsideRootError):
        store.resolve(name)


def test_symlink_escape_is_rejected(store, transcripts_dir, tmp_path):
    secret = tmp_path / "secret.txt"
    secret.write_text("classified")
    (transcripts_dir / "evil.txt").symlink_to(secret)

    with pytest.raises(PathOutsideRootError):
        store.read_text("evil.txt")


# ------------------------------------------------------------------
# Delete
# ------------------------------------------------------------------


def test_delete_removes_sidecars(store, transcripts_dir):
    for name in ("d_20250101_000000.txt", "d_20250101_000000.txt.json", "d_20250101_000000.txt.srt"):
        (transcripts_dir / name).write_text("x")

    removed = store.delete("d_20250101_000000.txt")

    assert len(removed) == 3
    assert list(transcripts_dir.iterdir()) == []


def test_delete_is_idempotent(store, transcripts_dir):
    (transcripts_dir / "d_20250101_000000.txt").write_text("x")

    assert store.delete("d_20250101_000000.txt") == ["d_20250101_000000.txt"]
    assert store.delete("d_20250101_000000.txt") == []
    assert list(transcripts_dir.iterdir()) == []


def test_delete_rejects_traversal(store, tmp_path):
    victim = tmp_path / "victim.txt"
    victim.write_text("keep me")

    with pytest.raises(PathOutsideRootError):
        store.delete("../../victim.txt")
    assert victim.exists()


def test_delete_symlinked_transcript_keeps_target(store, transcripts_dir):
    real = transcripts_dir / "real_20250101_000000.txt"
    real.write_text("the real meeting")
    alias = transcripts_dir / "alias_20250102_000000.txt"
    alias.symlink_to(real)

    assert store.delete("alias_20250102_000000.txt") == ["alias_20250102_000000.txt"]
    assert not os.path.lexists(alias)
    assert real.read_text() == "the real meeting"


def test_delete_removes_dangling_sidecar_link(store, transcripts_dir):
    (transcripts_dir / "m_20250101_000000.txt").write_text("x")
    (transcripts_dir / "m_20250101_000000.txt.srt").symlink_to(transcripts_dir / "gone.srt")

    removed = store.delete("m_20250101_000000.txt")

    assert removed == ["m_20250101_000000.txt", "m_20250101_000000.txt.srt"]
    assert list(transcripts_dir.iterdir()) == []


def test_nul_byte_is_rejected(store, transcripts_dir):
    (transcripts_dir / "a.txt").write_text("x")

    with pytest.raises(PathOutsideRootError):
        store.resolve("a\x00.txt")
    with pytest.raises(PathOutsideRootError):
        store.delete("a\x00.txt")
    assert (transcripts_dir / "a.txt").exists()
