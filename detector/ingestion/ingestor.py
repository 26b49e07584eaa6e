"""Validates user-selected images and encodes them for preview and analysis."""

import asyncio
from pathlib import Path

from detector.ingestion.base import BaseImageFile
from detector.ingestion.encoding import encode_data_url
from detector.ingestion.exceptions import (
    ImageReadError,
    ImageTooLargeError,
    InvalidImageTypeError,
    SampleUnavailableError,
)
from detector.ingestion.image_file import guess_content_type
from detector.ingestion.models import EncodedImage
from detector.logging.logger import Log

MAX_IMAGE_BYTES = 20 * 1024 * 1024

_CANONICAL_TYPES = {
    "image/jpeg": "image/jpeg",
    "image/jpg": "image/jpeg",
    "image/png": "image/png",
    "image/webp": "image/webp",
}

DEFAULT_SAMPLE_PATH = Path(__file__).parent / "assets" / "sample_image.png"


def canonical_image_type(content_type: str) -> str | None:
    """Map a declared content type onto an accepted image type, or None."""
    base = content_type.lower().split(";", 1)[0].strip()
    if not base.startswith("image/"):
        return None
    return _CANONICAL_TYPES.get(base)


class ImageIngestor:
    """Turns raw image files into EncodedImage values."""

    def __init__(
        self,
        max_bytes: int = MAX_IMAGE_BYTES,
        sample_path: Path | None = None,
    ) -> None:
        self._max_bytes = max_bytes
        self._sample_path = sample_path if sample_path is not None else DEFAULT_SAMPLE_PATH

    async def ingest(self, file: BaseImageFile) -> EncodedImage:
        """Validate, read and encode a user-selected image.

        Raises:
            InvalidImageTypeError: declared type is not jpeg, png or webp.
            ImageTooLargeError: the image is larger than the configured maximum.
            ImageReadError: the bytes could not be read.
        """
        mime_type = canonical_image_type(file.content_type)
        if mime_type is None:
            Log.warning("Rejected upload", content_type=file.content_type or "<none>")
            raise InvalidImageTypeError(
                f"Unsupported image type: {file.content_type or 'unknown'}"
            )

        declared = file.declared_size
        if declared is not None:
            self._check_size(declared)

        try:
            raw = await file.read()
        except OSError as exc:
            raise ImageReadError(f"Failed to read image: {exc}") from exc
        if not raw:
            raise ImageReadError("Image file is empty")
        self._check_size(len(raw))

        image = encode_data_url(raw, mime_type)
        Log.info("Ingested image", mime_type=mime_type, size_bytes=image.size_bytes)
        return image

    async def load_bundled_sample(self) -> EncodedImage:
        """Load the sample image shipped with the package (no network).

        Raises:
            SampleUnavailableError: if the resource is missing, empty, unreadable
                or larger than the configured maximum.
        """
        mime_type = canonical_image_type(guess_content_type(self._sample_path))
        if mime_type is None:
            raise SampleUnavailableError(
                f"Sample image has an unsupported type: {self._sample_path.name}"
            )
        try:
            raw = await asyncio.to_thread(self._sample_path.read_bytes)
        except OSError as exc:
            raise SampleUnavailableError(f"Failed to load sample image: {exc}") from exc
        if not raw:
            raise SampleUnavailableError("Sample image is empty")
        if len(raw) > self._max_bytes:
            raise SampleUnavailableError(
                f"Sample image is {len(raw)} bytes, maximum is {self._max_bytes} bytes"
            )

        Log.debug("Loaded bundled sample image", path=self._sample_path)
        return encode_data_url(raw, mime_type)

    def _check_size(self, size: int) -> None:
        if size > self._max_bytes:
            raise ImageTooLargeError(size, self._max_bytes)
