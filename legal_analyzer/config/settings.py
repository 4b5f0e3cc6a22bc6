from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_name: str = "Legal Document Analyzer"
    app_version: str = "1.0.0"
    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 3001
    frontend_url: str = "http://localhost:3000"
    cors_allowed_origins: list[str] = ["http://localhost:3000"]

    pdf_engine: str = "pdfplumber"

    ocr_provider: str = "document_ai"
    google_cloud_project_id: str = ""
    document_ai_location: str = "us"
    document_ai_processor_id: str = "default"
    ocr_timeout_seconds: int = 120

    analysis_provider: str = "gemini"
    analysis_model_names: list[str] = [
        "gemini-2.5-pro",
        "gemini-2.5-flash",
        "gemini-2.0-flash",
    ]
    analysis_temperature: float = 0.2
    analysis_top_p: float = 0.8
    analysis_max_output_tokens: int = 8192
    analysis_timeout_seconds: int = 120

    gemini_api_key: str = ""
    openai_api_key: str = ""
    openai_compatible_api_key: str = ""
    openai_compatible_base_url: str = ""

    translation_provider: str = "google"
    default_language: str = "en"
