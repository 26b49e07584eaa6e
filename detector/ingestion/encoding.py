import base64

from detector.ingestion.models import DATA_URL_DELIMITER, EncodedImage


def encode_data_url(raw: bytes, mime_type: str) -> EncodedImage:
    """Base64-encode image bytes into a data URL tagged with their MIME type."""
    payload = base64.b64encode(raw).decode("ascii")
    return EncodedImage(
        mime_type=mime_type,
        data_url=f"data:{mime_type};{DATA_URL_DELIMITER}{payload}",
        size_bytes=len(raw),
    )
