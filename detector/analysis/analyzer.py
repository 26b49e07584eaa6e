"""Sends encoded images to the configured inference provider."""

from detector.analysis.client_base import BaseInferenceClient
from detector.analysis.exceptions import MalformedImageDataError, ServiceError
from detector.analysis.prompt_loader import load_default_prompt
from detector.ingestion.models import EncodedImage
from detector.logging.logger import Log

# Payloads are always declared as JPEG on the wire, whatever was uploaded.
TRANSMISSION_MIME_TYPE = "image/jpeg"


class AnalysisClient:
    """Requests an authenticity report for one image per call."""

    def __init__(
        self,
        *,
        client: BaseInferenceClient,
        model: str,
        default_prompt: str | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._default_prompt = default_prompt or load_default_prompt()

    @property
    def default_prompt(self) -> str:
        return self._default_prompt

    async def analyze(self, image: EncodedImage, prompt: str | None = None) -> str:
        """Return the raw report text for ``image``.

        A blank ``prompt`` falls back to the default prompt.

        Raises:
            MalformedImageDataError: the payload cannot be extracted; nothing is sent.
            ServiceError: the provider failed or returned no text.
            TransportError: the provider could not be reached.
        """
        payload = image.payload
        if not payload:
            raise MalformedImageDataError("Invalid image data format")

        effective_prompt = (prompt or "").strip() or self._default_prompt
        Log.info(
            "Requesting image analysis",
            model=self._model,
            payload_chars=len(payload),
        )
        Log.debug(f"Analysis prompt:\n{effective_prompt}")

        text = await self._client.create_image_analysis(
            model=self._model,
            prompt=effective_prompt,
            image_mime_type=TRANSMISSION_MIME_TYPE,
            image_payload=payload,
        )
        if not text or not text.strip():
            raise ServiceError("No analysis generated")

        Log.info("Image analysis received", report_chars=len(text))
        return text
