from abc import ABC, abstractmethod


class BaseInferenceClient(ABC):
    """Contract for provider-specific multimodal inference clients."""

    @abstractmethod
    async def create_image_analysis(
        self,
        *,
        model: str,
        prompt: str,
        image_mime_type: str,
        image_payload: str,
    ) -> str:
        """Return the provider's textual report for one prompt and one image.

        Raises:
            ServiceError: the provider answered with an error or with no text.
            TransportError: the provider could not be reached.
        """
