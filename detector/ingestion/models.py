from dataclasses import dataclass

DATA_URL_DELIMITER = "base64,"


@dataclass(frozen=True)
class EncodedImage:
    """An image ready to preview and transmit.

    ``data_url`` is self-describing (``data:<mime>;base64,<payload>``) so it can
    be handed to a renderer as-is or split to recover the payload alone.
    """

    mime_type: str
    data_url: str
    size_bytes: int

    @property
    def payload(self) -> str:
        """Base64 payload after the data URL delimiter, or '' if there is none."""
        _, delimiter, payload = self.data_url.partition(DATA_URL_DELIMITER)
        return payload if delimiter else ""
