"""
Application configuration settings loaded from environment variables.
Uses pydantic_settings for validation and type conversion.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings
from typing import List, Optional

DEFAULT_TEMPERATURE = 0.7


class Settings(BaseSettings):
    """
    Application settings class with environment variable validation.

    Attributes:
        database_url: SQLAlchemy connection string
        upload_dir: Directory where exam attachments are written
        static_dir: Directory with the frontend assets
        cors_origins: Origins allowed by the CORS middleware
        log_level: Root logging level

        # Inference settings
        ollama_host: Base URL of the text-completion service
        ollama_model: Model identifier sent with every triage request
        ollama_api_key: Optional bearer credential for the service
        ollama_temperature: Sampling temperature
    """
    # Database settings
    database_url: str = "sqlite:///./prontuarios.db"

    # File storage settings
    upload_dir: str = "uploads"
    static_dir: str = "frontend"

    # HTTP settings
    cors_origins: List[str] = ["*"]
    log_level: str = "INFO"

    # Inference settings
    ollama_host: str = "http://localhost:11434"
    ollama_model: str = "deepseek-v3.1:671b-cloud"
    ollama_api_key: Optional[str] = None
    ollama_temperature: float = DEFAULT_TEMPERATURE

    class Config:
        """Configuration for environment variables loading"""
        env_file = ".env"
        case_sensitive = False

    @field_validator("ollama_temperature", mode="before")
    @classmethod
    def fallback_temperature(cls, value):
        """Non-numeric temperatures fall back to the default instead of failing startup."""
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_TEMPERATURE
        try:
            return float(value)
        except (TypeError, ValueError):
            return DEFAULT_TEMPERATURE

    @field_validator("ollama_api_key", mode="before")
    @classmethod
    def blank_api_key(cls, value):
        if isinstance(value, str) and not value.strip():
            return None
        return value


# Create settings instance
settings = Settings()
