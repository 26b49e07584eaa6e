class AnalysisError(Exception):
    """Base exception for all image analysis errors."""


class MalformedImageDataError(AnalysisError):
    """Raised when the image payload cannot be extracted from its encoded form."""


class ServiceError(AnalysisError):
    """Raised when the inference service reports failure or returns no usable text."""


class TransportError(AnalysisError):
    """Raised when the inference service cannot be reached."""
