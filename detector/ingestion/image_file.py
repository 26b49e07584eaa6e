import asyncio
import mimetypes
from pathlib import Path

from detector.ingestion.base import BaseImageFile

_SUFFIX_TYPES = {
    ".jpg": "image/jpeg",
    ".jpeg": "image/jpeg",
    ".png": "image/png",
    ".webp": "image/webp",
}


def guess_content_type(path: Path) -> str:
    """Guess an image MIME type from the file name, '' if unknown."""
    known = _SUFFIX_TYPES.get(path.suffix.lower())
    if known:
        return known
    guessed, _ = mimetypes.guess_type(path.name)
    return guessed or ""


class LocalImageFile(BaseImageFile):
    """Image stored on the local filesystem, read off the event loop.

    The declared size is taken from a single stat() at construction, so the
    async ingest flow performs no blocking filesystem call before read().
    """

    def __init__(self, path: Path, content_type: str | None = None) -> None:
        self._path = path
        self._content_type = (
            content_type if content_type is not None else guess_content_type(path)
        )
        try:
            self._declared_size: int | None = path.stat().st_size
        except OSError:
            self._declared_size = None

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def declared_size(self) -> int | None:
        return self._declared_size

    async def read(self) -> bytes:
        return await asyncio.to_thread(self._path.read_bytes)


class InMemoryImageFile(BaseImageFile):
    """Image already held in memory, e.g. the body of an HTTP upload."""

    def __init__(self, data: bytes, content_type: str) -> None:
        self._data = data
        self._content_type = content_type

    @property
    def content_type(self) -> str:
        return self._content_type

    @property
    def declared_size(self) -> int | None:
        return len(self._data)

    async def read(self) -> bytes:
        return self._data
