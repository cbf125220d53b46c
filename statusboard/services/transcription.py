import asyncio
import logging
import os
import time

import aiofiles
from fastapi import UploadFile

from statusboard.config import settings
from statusboard.errors import (
    MissingUploadError,
    TranscriptionConfigError,
    TranscriptionFailedError,
    UnsupportedMediaTypeError,
)
from statusboard.services.storage import StorageService

logger = logging.getLogger(__name__)

API_KEY_ENV = "OPENAI_API_KEY"
ALLOWED_MEDIA_PREFIXES = ("audio/", "video/")
_READ_CHUNK = 64 * 1024


def is_allowed_media_type(content_type: str | None) -> bool:
    return bool(content_type) and content_type.startswith(ALLOWED_MEDIA_PREFIXES)


def resolve_api_key() -> str | None:
    """Credential for the transcription command.

    The environment value (``settings.openai_api_key``) is overridden by
    ``env.OPENAI_API_KEY`` in the OpenClaw config file when that is set.
    """
    api_key = settings.openai_api_key
    path = settings.openclaw_config_path
    try:
        config = StorageService.read_json(path)
    except (OSError, ValueError) as e:
        logger.info("Could not read OpenClaw config %s (%s); using environment", path, e)
        return api_key

    override = (config.get("env") or {}).get(API_KEY_ENV) if isinstance(config, dict) else None
    return override or api_key


class TranscriptionService:
    """Runs the external transcription script against one uploaded file.

    The script writes ``<name>.txt`` (plus ``.txt.json`` / ``.txt.srt``
    sidecars) into the transcripts directory as a side effect; this class only
    stages the upload, runs the command and cleans up.
    """

    def __init__(
        self,
        script: str | None = None,
        upload_dir: str | None = None,
        max_output_bytes: int | None = None,
        timeout: float | None = None,
    ) -> None:
        self.script = script or settings.transcribe_script
        self.upload_dir = upload_dir or settings.upload_dir
        self.max_output_bytes = max_output_bytes or settings.transcribe_max_output_bytes
        self.timeout = timeout if timeout is not None else settings.transcribe_timeout_seconds

    async def transcribe_upload(self, file: UploadFile | None) -> dict:
        """Validate, stage, transcribe, clean up.

        Raises a ``DashboardError`` subclass on every failure path.
        """
        if file is None or not file.filename:
            raise MissingUploadError()
        if not is_allowed_media_type(file.content_type):
            raise UnsupportedMediaTypeError()

        api_key = resolve_api_key()
        if not api_key:
            raise TranscriptionConfigError(
                f"OpenAI API key not configured. Please set {API_KEY_ENV} "
                f"in {settings.openclaw_config_path} or the environment"
            )

        upload_path = await self._save_upload(file)
        try:
            stdout, stderr = await self.run(upload_path, api_key)
        finally:
            self._cleanup(upload_path)

        logger.info("Transcription output: %s", stdout.strip())
        if stderr.strip():
            logger.warning("Transcription stderr: %s", stderr.strip())
        return {"success": True, "message": "Transcription completed successfully"}

    async def _save_upload(self, file: UploadFile) -> str:
        StorageService.ensure_dir(self.upload_dir)
        ext = os.path.splitext(file.filename or "")[1]
        upload_path = os.path.join(
            self.upload_dir, f"upload_{int(time.time() * 1000)}{ext}"
        )
        try:
            async with aiofiles.open(upload_path, "wb") as f:
                while True:
                    chunk = await file.read(_READ_CHUNK)
                    if not chunk:
                        break
                    await f.write(chunk)
        except BaseException:
            # partial file
            self._cleanup(upload_path)
            raise
        return upload_path

    @staticmethod
    def _cleanup(upload_path: str) -> None:
        try:
            StorageService.remove_if_exists(upload_path)
        except OSError as e:
            logger.error("Failed to delete upload file %s: %s", upload_path, e)

    # ------------------------------------------------------------------
    # External command
    # ------------------------------------------------------------------

    async def run(self, input_path: str, api_key: str) -> tuple[str, str]:
        """Run ``<script> <input_path>`` and return ``(stdout, stderr)``.

        Blocks (asynchronously) until the process exits. The process is killed
        if its combined output exceeds ``max_output_bytes`` or the optional
        timeout elapses.
        """
        env = {**os.environ, API_KEY_ENV: api_key}
        logger.info("Starting transcription for: %s", input_path)
        try:
            proc = await asyncio.create_subprocess_exec(
                self.script,
                input_path,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
                env=env,
            )
        except OSError as e:
            raise TranscriptionFailedError(f"Could not start {self.script}: {e}") from e

        budget = _OutputBudget(self.max_output_bytes)
        try:
            stdout, stderr, _ = await asyncio.wait_for(
                asyncio.gather(
                    budget.drain(proc.stdout),
                    budget.drain(proc.stderr),
                    proc.wait(),
                ),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            await _kill(proc)
            raise TranscriptionFailedError(
                f"Transcription command timed out after {self.timeout}s"
            )
        except OutputLimitExceeded:
            await _kill(proc)
            raise TranscriptionFailedError(
                f"Transcription output exceeded {self.max_output_bytes} bytes"
            )

        out = stdout.decode("utf-8", errors="replace")
        err = stderr.decode("utf-8", errors="replace")
        if proc.returncode != 0:
            raise TranscriptionFailedError(
                err.strip() or out.strip() or f"exit status {proc.returncode}"
            )
        return out, err


class OutputLimitExceeded(Exception):
    pass


class _OutputBudget:
    """Shared byte budget for a process's stdout and stderr."""

    def __init__(self, limit: int) -> None:
        self.remaining = limit

    async def drain(self, stream: asyncio.StreamReader) -> bytes:
        parts: list[bytes] = []
        while True:
            chunk = await stream.read(_READ_CHUNK)
            if not chunk:
                break
            self.remaining -= len(chunk)
            if self.remaining < 0:
                raise OutputLimitExceeded()
            parts.append(chunk)
        return b"".join(parts)


async def _kill(proc: asyncio.subprocess.Process) -> None:
    if proc.returncode is None:
        proc.kill()
        await proc.wait()
