from typing import ClassVar

from detector.analysis.analyzer import AnalysisClient
from detector.analysis.example_client_adapter import ExampleClientAdapter
from detector.analysis.openai_client_adapter import OpenAIClientAdapter
from detector.config.settings import Settings


class AnalysisClientFactory:
    """Creates an AnalysisClient for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "gemini": "https://generativelanguage.googleapis.com/v1beta/openai/",
        "openrouter": "https://openrouter.ai/api/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> AnalysisClient:
        """Create a configured analysis client from application settings."""
        provider = settings.analysis_provider.lower()
        default_prompt = settings.analysis_prompt.strip() or None
        if provider == "example":
            return AnalysisClient(
                client=ExampleClientAdapter(),
                model="example",
                default_prompt=default_prompt,
            )
        base_url = cls._resolve_base_url(provider, settings)
        api_key, model, timeout = cls._resolve_provider_settings(provider, settings)
        if not api_key:
            raise ValueError(f"An API key is required for analysis_provider={provider}")
        client = OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=timeout,
            base_url=base_url,
        )
        return AnalysisClient(client=client, model=model, default_prompt=default_prompt)

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "analysis_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_provider_settings(
        cls, provider: str, settings: Settings
    ) -> tuple[str, str, int]:
        by_provider = {
            "gemini": (
                settings.gemini_api_key,
                settings.gemini_model_name,
                settings.gemini_timeout_seconds,
            ),
            "openai": (
                settings.openai_api_key,
                settings.openai_model_name,
                settings.openai_timeout_seconds,
            ),
            "openai_compatible": (
                settings.openai_compatible_api_key,
                settings.openai_compatible_model_name,
                settings.openai_compatible_timeout_seconds,
            ),
            "openrouter": (
                settings.openrouter_api_key,
                settings.openrouter_model_name,
                settings.openrouter_timeout_seconds,
            ),
            "ollama": (
                settings.ollama_api_key,
                settings.ollama_model_name,
                settings.ollama_timeout_seconds,
            ),
        }
        return by_provider[provider]
