from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    ai_provider: str = "openai"
    ai_api_key: str = ""
    ai_base_url: str = ""
    ai_vision_model_name: str = "gpt-4o-mini"
    ai_classification_model_name: str = "gpt-4o-mini"
    ai_timeout_seconds: int = 30
    ai_temperature: float = 0.2

    pdf_engine: str = "pdfplumber"

    extraction_timeout_seconds: float = 45.0
    max_concurrent_extractions: int = 10

    attachments_root: str = "storage/attachments"

    default_entry_type: str = "story"
    default_category: str = "Fun"

    empty_capture_policy: str = "placeholder"
    empty_capture_placeholder: str = "File capture"
