import logging
import math
import os
import re
from datetime import datetime
from pathlib import Path
from typing import Any

from statusboard.errors import PathOutsideRootError, TranscriptNotFoundError
from statusboard.models import TranscriptSummary
from statusboard.services.storage import StorageService

logger = logging.getLogger(__name__)

TRANSCRIPT_SUFFIX = ".txt"
JSON_SIDECAR = ".json"
SRT_SIDECAR = ".srt"

UNKNOWN_DURATION = "Unknown"

# <prefix>_YYYYMMDD_HHMMSS.txt
_FILENAME_TIMESTAMP = re.compile(r"^.+_(\d{8})_(\d{6})\.txt$")

# kind -> (sidecar suffix, content type, download extension)
DOWNLOAD_KINDS: dict[str, tuple[str, str, str]] = {
    "txt": ("", "text/plain", ".txt"),
    "json": (JSON_SIDECAR, "application/json", ".json"),
    "srt": (SRT_SIDECAR, "text/plain", ".srt"),
}


def parse_filename_timestamp(filename: str) -> datetime | None:
    """Timestamp embedded in ``prefix_YYYYMMDD_HHMMSS.txt``, or None.

    Names that match the pattern but encode an impossible date (month 13,
    hour 25, ...) also return None.
    """
    match = _FILENAME_TIMESTAMP.match(filename)
    if not match:
        return None
    try:
        return datetime.strptime(match.group(1) + match.group(2), "%Y%m%d%H%M%S")
    except ValueError:
        return None


def format_duration(seconds: float | int | None) -> str:
    """``125`` -> ``"2:05"``. Falsy or non-numeric values are unknown."""
    if not seconds or not isinstance(seconds, (int, float)):
        return UNKNOWN_DURATION
    whole = math.floor(seconds)
    return f"{whole // 60}:{whole % 60:02d}"


def format_size(num_bytes: int) -> str:
    return f"{num_bytes / 1024:.1f} KB"


def is_primary_transcript(filename: str) -> bool:
    return filename.endswith(TRANSCRIPT_SUFFIX) and not (
        filename.endswith(TRANSCRIPT_SUFFIX + JSON_SIDECAR)
        or filename.endswith(TRANSCRIPT_SUFFIX + SRT_SIDECAR)
    )


class TranscriptStore:
    """Transcript files under a single root directory.

    Layout::

        <root>/zoom_20250115_093000.txt       # plain transcript
        <root>/zoom_20250115_093000.txt.json  # optional: timestamps, duration
        <root>/zoom_20250115_093000.txt.srt   # optional: subtitles

    There is no locking; concurrent deletes and reads of the same name race.
    """

    def __init__(self, root: str) -> None:
        self.root = root

    # ------------------------------------------------------------------
    # Listing
    # ------------------------------------------------------------------

    def list_transcripts(self) -> list[TranscriptSummary]:
        """Summaries of every primary transcript, newest first.

        A transcript that cannot be read is logged and left out.
        """
        StorageService.ensure_dir(self.root)
        names = set(os.listdir(self.root))

        entries: list[tuple[datetime, TranscriptSummary]] = []
        for filename in sorted(names):
            if not is_primary_transcript(filename):
                continue
            try:
                entries.append(self._summarize(filename, names))
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Skipping unreadable transcript %s: %s", filename, e)

        entries.sort(key=lambda entry: entry[0], reverse=True)
        return [summary for _, summary in entries]

    def _summarize(
        self, filename: str, names: set[str]
    ) -> tuple[datetime, TranscriptSummary]:
        path = os.path.join(self.root, filename)
        stat = os.stat(path)
        content = StorageService.read_text(path)

        date = parse_filename_timestamp(filename)
        if date is None:
            logger.debug("No timestamp in %s; using modification time", filename)
            date = datetime.fromtimestamp(stat.st_mtime)

        has_json = filename + JSON_SIDECAR in names
        has_srt = filename + SRT_SIDECAR in names

        duration = UNKNOWN_DURATION
        if has_json:
            duration = self._sidecar_duration(path + JSON_SIDECAR)

        summary = TranscriptSummary(
            filename=filename,
            date=date.isoformat(timespec="seconds"),
            duration=duration,
            word_count=len(content.split()),
            size=format_size(stat.st_size),
            has_json=has_json,
            has_srt=has_srt,
        )
        return date, summary

    @staticmethod
    def _sidecar_duration(path: str) -> str:
        try:
            data = StorageService.read_json(path)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable sidecar %s: %s", path, e)
            return UNKNOWN_DURATION
        if not isinstance(data, dict):
            return UNKNOWN_DURATION
        return format_duration(data.get("duration"))

    # ------------------------------------------------------------------
    # Path resolution
    # ------------------------------------------------------------------

    def resolve(self, filename: str, kind: str = "txt") -> Path:
        """Canonical path of *filename* (or its sidecar for *kind*).

        Raises ``PathOutsideRootError`` when the resolved path (symlinks
        followed) is not inside the root, and ``TranscriptNotFoundError`` when
        it is inside but does not exist.
        """
        if kind not in DOWNLOAD_KINDS:
            raise ValueError(f"Unknown transcript kind: {kind}")
        suffix = DOWNLOAD_KINDS[kind][0]

        path = self._contained(filename + suffix)
        if not path.is_file():
            raise TranscriptNotFoundError(f"Transcript not found: {filename}{suffix}")
        return path

    def _contained(self, name: str) -> Path:
        """*name* under the root with every symlink followed."""
        return self._checked(name, follow_links=True)

    def _entry(self, name: str) -> Path:
        """*name* under the root with only its parent directories resolved.

        A symlink in the last component is left as is, so removing the result
        removes the link and never its target.
        """
        return self._checked(name, follow_links=False)

    def _checked(self, name: str, follow_links: bool) -> Path:
        root = Path(self.root).resolve()
        if "\x00" not in name:
            path = root / name
            if follow_links:
                path = path.resolve()
            else:
                path = path.parent.resolve() / path.name
            if path != root and path.is_relative_to(root):
                return path
        logger.warning("Rejected path outside transcripts root: %r", name)
        raise PathOutsideRootError()

    # ------------------------------------------------------------------
    # Read / download / delete
    # ------------------------------------------------------------------

    def read_text(self, filename: str) -> str:
        return StorageService.read_text(str(self.resolve(filename)))

    def read(self, filename: str, kind: str = "txt") -> Any:
        """Content for in-app display: JSON sidecars decoded, others as text."""
        path = str(self.resolve(filename, kind))
        if kind == "json":
            return StorageService.read_json(path)
        return StorageService.read_text(path)

    def download(self, filename: str, kind: str = "txt") -> tuple[Path, str, str]:
        """Return ``(path, content_type, download_name)`` for an attachment."""
        path = self.resolve(filename, kind)
        _suffix, content_type, ext = DOWNLOAD_KINDS[kind]
        download_name = filename
        if kind != "txt":
            download_name = filename.replace(TRANSCRIPT_SUFFIX, ext, 1)
        return path, content_type, download_name

    def delete(self, filename: str) -> list[str]:
        """Remove the transcript and both sidecars. Missing files are fine.

        Symlinks are unlinked themselves, dangling ones included; their
        targets are left alone. Returns the names that were actually removed.
        """
        self._contained(filename)
        names = (filename, filename + JSON_SIDECAR, filename + SRT_SIDECAR)
        entries = [(name, self._entry(name)) for name in names]

        removed: list[str] = []
        for name, path in entries:
            if StorageService.remove_if_exists(str(path)):
                removed.append(name)
        logger.info("Deleted transcript %s (%d files)", filename, len(removed))
        return removed
