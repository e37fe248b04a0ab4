class IntakeError(Exception):
    """Base class for errors reported back to the uploader."""
    status_code = 500
    message = "Failed to start job"

    def __init__(self, message=None):
        super().__init__(message or self.message)
        if message:
            self.message = message


class IntakeValidationError(IntakeError):
    status_code = 400
    message = "No file uploaded"


class UnsupportedFileType(IntakeValidationError):
    message = "Unsupported file type"
