import asyncio
import logging

from fastapi import APIRouter, File, HTTPException, Query, UploadFile
from fastapi.responses import FileResponse

from statusboard.config import settings
from statusboard.errors import DashboardError
from statusboard.services.transcription import TranscriptionService
from statusboard.services.transcripts import DOWNLOAD_KINDS, TranscriptStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/zoom", tags=["transcripts"])

KIND_PATTERN = "^(" + "|".join(DOWNLOAD_KINDS) + ")$"


def _store() -> TranscriptStore:
    return TranscriptStore(settings.transcripts_dir)


@router.get("/transcripts")
async def list_transcripts() -> dict:
    """Summaries of all transcripts, newest first."""
    try:
        summaries = await asyncio.to_thread(_store().list_transcripts)
    except Exception:
        logger.exception("Error listing transcripts")
        raise HTTPException(status_code=500, detail="Failed to list transcripts")
    return {"transcripts": [s.to_dict() for s in summaries]}


@router.get("/transcript/{filename:path}")
async def get_transcript(
    filename: str, kind: str = Query("txt", alias="type", pattern=KIND_PATTERN)
) -> dict:
    """Transcript content for in-app display (JSON sidecars come back decoded)."""
    try:
        content = await asyncio.to_thread(_store().read, filename, kind)
    except DashboardError:
        raise
    except Exception:
        logger.exception("Error reading transcript %s", filename)
        raise HTTPException(status_code=500, detail="Failed to read transcript")
    return {"content": content}


@router.delete("/transcript/{filename:path}")
async def delete_transcript(filename: str) -> dict:
    """Delete a transcript and its sidecars. Deleting twice is not an error."""
    try:
        await asyncio.to_thread(_store().delete, filename)
    except DashboardError:
        raise
    except Exception:
        logger.exception("Error deleting transcript %s", filename)
        raise HTTPException(status_code=500, detail="Failed to delete transcript")
    return {"success": True}


@router.get("/download/{filename:path}")
async def download_transcript(
    filename: str, kind: str = Query("txt", alias="type", pattern=KIND_PATTERN)
) -> FileResponse:
    """Download the transcript (``txt``) or one of its sidecars (``json``/``srt``)."""
    try:
        path, content_type, download_name = await asyncio.to_thread(
            _store().download, filename, kind
        )
    except DashboardError:
        raise
    except Exception:
        logger.exception("Error downloading %s", filename)
        raise HTTPException(status_code=500, detail="Failed to download file")
    return FileResponse(path, media_type=content_type, filename=download_name)


@router.post("/transcribe")
async def transcribe(file: UploadFile | None = File(None)) -> dict:
    """Upload an audio/video recording and run the transcription script on it."""
    service = TranscriptionService()
    try:
        return await service.transcribe_upload(file)
    except DashboardError as e:
        logger.error("Transcription error: %s", e.details or e.message)
        raise
    except Exception as e:
        logger.exception("Transcription error")
        raise HTTPException(status_code=500, detail=f"Transcription failed: {e}")
