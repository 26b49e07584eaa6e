class IngestionError(Exception):
    """Base exception for all image ingestion errors."""


class InvalidImageTypeError(IngestionError):
    """Raised when the declared MIME type is not an accepted image type."""


class ImageTooLargeError(IngestionError):
    """Raised when the image exceeds the maximum accepted size."""

    def __init__(self, size_bytes: int, max_bytes: int) -> None:
        super().__init__(f"Image is {size_bytes} bytes, maximum is {max_bytes} bytes")
        self.size_bytes = size_bytes
        self.max_bytes = max_bytes


class ImageReadError(IngestionError):
    """Raised when the image bytes cannot be read from their source."""


class SampleUnavailableError(IngestionError):
    """Raised when the bundled sample image cannot be loaded."""
