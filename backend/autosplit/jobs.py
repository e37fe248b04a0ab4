import logging

from .config import settings
from .models import JobResult, UploadSubmission

logger = logging.getLogger(__name__)


def start_job(submission: UploadSubmission) -> JobResult:
    """Start a split job for an uploaded model.

    There is no splitter yet, so every call returns the same mock result.
    Nothing is stored and nothing is queued.
    """
    # Later this is where we:
    # - upload the model to storage
    # - hand it to the splitting worker
    # - return a job id or the real download link
    logger.info(
        "Mock split job for %s (%d bytes, %s)",
        submission.filename, submission.size, submission.extension or "no extension",
    )
    return JobResult(message=settings.MOCK_MESSAGE, download_url=settings.MOCK_DOWNLOAD_URL)
