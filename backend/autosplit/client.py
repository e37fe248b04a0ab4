"""Upload client for the split job endpoint.

Mirrors the browser form: it keeps the selected file, a status that moves
``idle -> working -> done | error`` and the download link of the last job.
Picking a new file always puts it back to ``idle``.

Only one request runs at a time. Picking a new file while a request is in
flight does not allow a second one, and the late response is dropped.
"""
import logging
from enum import Enum
from typing import Callable, List, Optional

import httpx

from .models import Failure, JobOutcome, Pending, Success, outcome_from_payload
from .utils import ALLOWED_EXTS, allowed_file

logger = logging.getLogger(__name__)

START_JOB_PATH = "/api/start-job"

MSG_IDLE = "Idle"
MSG_WORKING = "Uploading and starting job..."
MSG_DONE = "Done! Download is ready."
MSG_PENDING = "Job started (mock). Real splitting coming soon."
MSG_ERROR = "Error starting job."

ALERT_NO_FILE = "Please select a 3D model file first."
ALERT_UNSUPPORTED = "Unsupported file type. Please drop an STL, OBJ, GLB or GLTF file."
ALERT_FAILED = "Something went wrong starting the job."


class Status(str, Enum):
    IDLE = "idle"
    WORKING = "working"
    DONE = "done"
    ERROR = "error"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class UploadClient:
    def __init__(
        self,
        base_url: str = "http://localhost:8000",
        http: Optional[httpx.Client] = None,
        alert: Optional[Callable[[str], None]] = None,
    ):
        self.http = http or httpx.Client(base_url=base_url)
        self.alerts: List[str] = []
        self._alert = alert
        self.filename: Optional[str] = None
        self.content: Optional[bytes] = None
        self.status = Status.IDLE
        self.message = MSG_IDLE
        self.download_url: Optional[str] = None
        self.outcome: Optional[JobOutcome] = None
        self.in_flight = False
        self._seq = 0

    @property
    def can_submit(self) -> bool:
        return self.content is not None and not self.in_flight

    def alert(self, text: str):
        self.alerts.append(text)
        if self._alert:
            self._alert(text)

    def _reset(self):
        self.status = Status.IDLE
        self.message = MSG_IDLE
        self.download_url = None
        self.outcome = None

    def select_file(self, filename: str, content: bytes):
        """File picker selection. The picker's accept list is advisory only."""
        self.filename = filename
        self.content = content
        self._seq += 1
        self._reset()

    def drop_file(self, filename: str, content: bytes) -> bool:
        if not allowed_file(filename, ALLOWED_EXTS):
            logger.debug("Dropped file %s rejected", filename)
            self.alert(ALERT_UNSUPPORTED)
            return False
        self.select_file(filename, content)
        return True

    def submit(self) -> Optional[JobOutcome]:
        if self.content is None:
            self.alert(ALERT_NO_FILE)
            return None
        if self.in_flight:
            return None

        self._seq += 1
        seq = self._seq
        self.in_flight = True
        self.status = Status.WORKING
        self.message = MSG_WORKING
        self.download_url = None
        self.outcome = None

        try:
            res = self.http.post(
                START_JOB_PATH,
                files={"model": (self.filename, self.content, "application/octet-stream")},
            )
            if not res.is_success:
                raise RuntimeError(f"Failed to start job (HTTP {res.status_code})")
            outcome = outcome_from_payload(res.json())
        except Exception as e:
            logger.error("Starting job failed: %s", e)
            outcome = Failure(reason=str(e))
        finally:
            self.in_flight = False

        if seq != self._seq:
            logger.debug("Dropping response for a file that is no longer selected")
            return None

        self.outcome = outcome
        if isinstance(outcome, Failure):
            self.status = Status.ERROR
            self.message = MSG_ERROR
            self.alert(ALERT_FAILED)
            return outcome

        self.status = Status.DONE
        if isinstance(outcome, Success):
            self.message = MSG_DONE
            self.download_url = outcome.url
        elif isinstance(outcome, Pending):
            self.message = MSG_PENDING
        return outcome

    def close(self):
        self.http.close()
