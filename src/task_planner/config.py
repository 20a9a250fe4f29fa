"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "task-planner-service"
    service_version: str = "0.1.0"

    # CORS
    cors_origins: list[str] = ["*"]

    # Task drafts
    default_duration_minutes: int = 30
    max_title_length: int = 500

    class Config:
        env_prefix = "PLANNER_"
        case_sensitive = False


settings = Settings()
