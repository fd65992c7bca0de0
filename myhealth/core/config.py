"""
Core configuration and settings for the FastAPI application.
"""

from typing import Optional
from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    # Application Info
    app_name: str = "MyHealth AI Backend"
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 3000

    # Database
    DATABASE_URL: str = "sqlite:///./health.db"

    # Authentication
    jwt_secret: str = "super-secret-key"
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: Optional[int] = None  # None = no exp claim
    bcrypt_rounds: int = 10

    # Google Cloud / Vertex AI Configuration
    google_cloud_project: str = "myhealth-ai"
    vertex_ai_location: str = "us-central1"
    gemini_model_name: str = "gemini-2.0-flash"
    google_application_credentials: Optional[str] = None

    # Report Upload Configuration
    max_file_size_mb: int = 10
    allowed_extensions: set = {".pdf", ".jpg", ".jpeg", ".png", ".webp"}

    # CORS Settings
    cors_origins: list = ["http://localhost:3000", "http://localhost:5173"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list = ["*"]
    cors_allow_headers: list = ["*"]

    # Client
    api_base_url: str = "http://localhost:3000"
    history_retry_attempts: int = 3

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Export settings instance
settings = get_settings()
