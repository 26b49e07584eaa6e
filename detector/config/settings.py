from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    log_level: str = "INFO"

    max_image_bytes: int = 20 * 1024 * 1024
    sample_image_path: str = ""

    analysis_provider: str = "gemini"
    analysis_prompt: str = ""

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-1.5-flash"
    gemini_timeout_seconds: int = 60

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 60

    openai_compatible_base_url: str = ""
    openai_compatible_api_key: str = ""
    openai_compatible_model_name: str = ""
    openai_compatible_timeout_seconds: int = 60

    openrouter_api_key: str = ""
    openrouter_model_name: str = "google/gemini-flash-1.5"
    openrouter_timeout_seconds: int = 60

    ollama_api_key: str = "ollama"
    ollama_model_name: str = "llava"
    ollama_timeout_seconds: int = 120
