import logging

from starlette.datastructures import FormData, UploadFile

from .config import settings
from .errors import IntakeValidationError, UnsupportedFileType
from .models import UploadSubmission
from .utils import allowed_file, file_extension, safe_filename

logger = logging.getLogger(__name__)

MODEL_FIELD = "model"


async def read_submission(form: FormData) -> UploadSubmission:
    """Pull the uploaded model out of a parsed multipart form.

    The ``model`` field has to be a file attachment. A missing field or a
    plain text value is a validation error.
    """
    field = form.get(MODEL_FIELD)
    if not isinstance(field, UploadFile):
        logger.info("Rejected upload: %r field missing or not a file", MODEL_FIELD)
        raise IntakeValidationError()

    filename = safe_filename(field.filename)
    if settings.ENFORCE_EXTENSIONS and not allowed_file(filename, settings.ALLOWED_EXT):
        logger.info("Rejected upload: unsupported file type %s", filename)
        raise UnsupportedFileType()

    content = await field.read()
    return UploadSubmission(
        filename=filename,
        content=content,
        extension=file_extension(filename),
    )
