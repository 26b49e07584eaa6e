import httpx
import openai

from detector.analysis.client_base import BaseInferenceClient
from detector.analysis.exceptions import ServiceError, TransportError


class OpenAIClientAdapter(BaseInferenceClient):
    """Inference client built on the async OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
            max_retries=0,
        )

    async def create_image_analysis(
        self,
        *,
        model: str,
        prompt: str,
        image_mime_type: str,
        image_payload: str,
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                messages=[
                    {
                        "role": "user",
                        "content": [
                            {"type": "text", "text": prompt},
                            {
                                "type": "image_url",
                                "image_url": {
                                    "url": f"data:{image_mime_type};base64,{image_payload}",
                                },
                            },
                        ],
                    }
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise TransportError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ServiceError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ServiceError("AI returned no choices")
        content = response.choices[0].message.content
        if not content or not content.strip():
            raise ServiceError("No analysis generated")
        return content
