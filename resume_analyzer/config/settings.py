from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    host: str = "0.0.0.0"
    port: int = 5000
    cors_allow_origins: list[str] = ["*"]

    max_upload_bytes: int = 10 * 1024 * 1024

    pdf_engine: str = "pdfplumber"
    json_recovery_mode: str = "outermost"

    analysis_provider: str = "gemini"
    analysis_temperature: float = 0.2

    analysis_openai_api_key: str = ""
    analysis_openai_model_name: str = "gpt-4o-mini"
    analysis_openai_timeout_seconds: int = 60

    analysis_gemini_api_key: str = ""
    analysis_gemini_model_name: str = "gemini-2.0-flash"
    analysis_gemini_timeout_seconds: int = 60

    analysis_openrouter_api_key: str = ""
    analysis_openrouter_model_name: str = ""
    analysis_openrouter_timeout_seconds: int = 60

    analysis_ollama_api_key: str = "ollama"
    analysis_ollama_model_name: str = "llama3.1"
    analysis_ollama_timeout_seconds: int = 120

    analysis_openai_compatible_api_key: str = ""
    analysis_openai_compatible_model_name: str = ""
    analysis_openai_compatible_base_url: str = ""
    analysis_openai_compatible_timeout_seconds: int = 60
