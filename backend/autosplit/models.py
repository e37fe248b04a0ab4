from typing import Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class UploadSubmission(BaseModel):
    """A single uploaded model file. Lives for the duration of one request."""
    filename: str
    content: bytes
    extension: str

    @property
    def size(self) -> int:
        return len(self.content)


class JobResult(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str
    download_url: Optional[str] = Field(None, alias="downloadUrl")


class ErrorResponse(BaseModel):
    error: str


# Outcome of a submission as seen by the client
class Success(BaseModel):
    kind: Literal["success"] = "success"
    url: str


class Pending(BaseModel):
    kind: Literal["pending"] = "pending"
    message: Optional[str] = None


class Failure(BaseModel):
    kind: Literal["failure"] = "failure"
    reason: str


JobOutcome = Union[Success, Pending, Failure]


def outcome_from_payload(payload) -> JobOutcome:
    """Classify a 2xx body. Only ``downloadUrl`` decides success."""
    if not isinstance(payload, dict):
        return Pending()
    url = payload.get("downloadUrl")
    if isinstance(url, str) and url:
        return Success(url=url)
    message = payload.get("message")
    return Pending(message=message if isinstance(message, str) else None)
