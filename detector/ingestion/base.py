from abc import ABC, abstractmethod


class BaseImageFile(ABC):
    """Contract for a user-selected image handed over by the presentation layer."""

    @property
    @abstractmethod
    def content_type(self) -> str:
        """Declared MIME type, '' when the source does not declare one."""

    @property
    @abstractmethod
    def declared_size(self) -> int | None:
        """Size announced by the source before reading, if known."""

    @abstractmethod
    async def read(self) -> bytes:
        """Read the full image content.

        Raises:
            OSError: if the underlying stream cannot be read.
        """
