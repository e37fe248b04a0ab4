import logging
import time
import uuid
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import settings
from .errors import IntakeError, IntakeValidationError
from .intake import read_submission
from .jobs import start_job
from .models import ErrorResponse, JobResult

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parent / "static"

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)

app = FastAPI(title="3D Auto Splitter")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# TODOs:
# - Replace the mock job with a real one: job id, status polling, stored artifact.

app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")


@app.middleware("http")
async def log_requests(request: Request, call_next):
    request_id = uuid.uuid4().hex[:12]
    start = time.time()
    response = await call_next(request)
    logger.info(
        "[%s] %s %s -> %d (%d ms, content-length=%s)",
        request_id,
        request.method,
        request.url.path,
        response.status_code,
        int((time.time() - start) * 1000),
        request.headers.get("content-length"),
    )
    return response


@app.exception_handler(IntakeError)
async def intake_error_handler(request: Request, exc: IntakeError):
    return JSONResponse(ErrorResponse(error=exc.message).model_dump(), status_code=exc.status_code)


@app.get("/")
async def index():
    return FileResponse(STATIC_DIR / "index.html", media_type="text/html")


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post(
    "/api/start-job",
    responses={
        200: {"model": JobResult},
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)
async def start_job_endpoint(request: Request):
    try:
        form = await request.form()
        submission = await read_submission(form)
        result = start_job(submission)
    except IntakeValidationError:
        raise
    except Exception:
        # Details stay in the server log
        logger.exception("Failed to start job")
        raise IntakeError()

    return JSONResponse(result.model_dump(by_alias=True, exclude_none=True))


def run():
    import uvicorn
    uvicorn.run(app, host=settings.HOST, port=settings.PORT, log_level=settings.LOG_LEVEL.lower())


if __name__ == "__main__":
    run()
