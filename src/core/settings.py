"""
Application configuration settings for the case records API
"""

from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Application settings, read from the environment or from .env"""

    app_name: str = Field(default="Processos API", env="APP_NAME")
    database_url: str = Field(default="sqlite:///./processos.db", env="DATABASE_URL")
    cors_origins: List[str] = Field(default=["http://localhost:3000", "http://localhost:8000"], env="CORS_ORIGINS")
    log_level: str = Field(default="INFO", env="LOG_LEVEL")

    # Import
    max_upload_size: int = Field(default=10 * 1024 * 1024, env="MAX_UPLOAD_SIZE")  # 10MB

    # Logging middleware
    log_requests: bool = Field(default=True, env="LOG_REQUESTS")
    slow_request_threshold: float = Field(default=1.0, env="SLOW_REQUEST_THRESHOLD")  # seconds

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"  # Ignore extra environment variables


@lru_cache()
def get_app_settings() -> AppSettings:
    """Get cached application settings instance"""
    return AppSettings()
