from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    ai_provider: str = "gemini"
    ai_api_key: str = ""
    ai_model_name: str = "gemini-2.0-flash"
    ai_base_url: str = ""
    ai_timeout_seconds: int = 120

    generation_temperature: float = 0.5
    refinement_temperature: float = 0.4
    auto_select_temperature: float = 0.1

    pdf_engine: str = "pymupdf"
    pdf_render_scale: float = 1.5

    video_metadata_timeout_seconds: int = 30

    history_path: str = ""
    history_max_entries: int = 50
