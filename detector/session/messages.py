from detector.analysis.exceptions import AnalysisError
from detector.ingestion.exceptions import (
    ImageReadError,
    ImageTooLargeError,
    IngestionError,
    InvalidImageTypeError,
    SampleUnavailableError,
)

_KB = 1024
_MB = 1024 * 1024


def user_message(error: IngestionError | AnalysisError) -> str:
    """Message shown to the user for a recoverable session error."""
    if isinstance(error, InvalidImageTypeError):
        return "Please upload a valid image file"
    if isinstance(error, ImageTooLargeError):
        return f"Image size should be less than {_format_limit(error.max_bytes)}"
    if isinstance(error, ImageReadError):
        return "Failed to read the image file. Please try again."
    if isinstance(error, SampleUnavailableError):
        return "Failed to load default image"
    if isinstance(error, AnalysisError):
        return f"Failed to analyze image: {error}"
    return "Failed to process image. Please try again."


def _format_limit(max_bytes: int) -> str:
    if max_bytes >= _MB:
        return f"{max_bytes // _MB}MB"
    return f"{max(1, max_bytes // _KB)}KB"
