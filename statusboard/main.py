import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException

from statusboard.config import settings
from statusboard.errors import DashboardError
from statusboard.routes import accreditation, dashboard, tasks, transcripts
from statusboard.services.storage import StorageService

FRONTEND_DIR = Path(__file__).parent / "frontend"

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Make sure the transcripts directory exists. Nothing to tear down."""
    configure_logging()
    StorageService.ensure_dir(settings.transcripts_dir)
    logger.info("Serving transcripts from %s", settings.transcripts_dir)
    yield


app = FastAPI(
    title="statusboard",
    description="Personal status dashboard: tasks, schedule, accreditation checklist and meeting transcripts",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(tasks.router)
app.include_router(transcripts.router)
app.include_router(accreditation.router)
app.include_router(dashboard.router)


# ------------------------------------------------------------------
# Error bodies: always {"error": ..., "details"?: ...}
# ------------------------------------------------------------------


@app.exception_handler(DashboardError)
async def dashboard_error_handler(_request: Request, exc: DashboardError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(HTTPException)
async def http_error_handler(_request: Request, exc: HTTPException) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.detail})


@app.exception_handler(RequestValidationError)
async def validation_error_handler(
    _request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=400,
        content={"error": "Invalid request", "details": str(exc.errors())},
    )


# Serve static files (CSS, JS)
if FRONTEND_DIR.is_dir():
    app.mount("/static", StaticFiles(directory=FRONTEND_DIR), name="static")


@app.get("/")
async def serve_frontend():
    """Serve the frontend HTML."""
    return FileResponse(FRONTEND_DIR / "index.html")


def run() -> None:
    uvicorn.run("statusboard.main:app", host=settings.host, port=settings.port)
