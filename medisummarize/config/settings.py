from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    pdf_engine: str = "pdfplumber"

    ai_provider: str = "openai"
    ai_api_key: str = ""
    ai_base_url: str = ""
    ai_timeout_seconds: int = 30
    ai_temperature: float = 0.2
    summary_model_name: str = "gpt-4o-mini"
    chat_model_name: str = "gpt-4o-mini"
    ocr_model_name: str = "gpt-4o-mini"

    ocr_min_text_chars: int = 50
    ocr_min_file_size_bytes: int = 10_000
    max_report_chars: int = 30_000
