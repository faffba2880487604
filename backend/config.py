"""Application configuration using pydantic-settings."""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    DATABASE_URL: str = "sqlite:///./preferences.db"

    # Bearer token validation. Tokens are issued elsewhere; this service
    # only verifies them.
    TOKEN_KEY: str = "development-signing-key-change-me-in-production"
    TOKEN_ISSUER: str = "user-service"
    TOKEN_AUDIENCE: str = "user-service"
    TOKEN_ALGORITHM: str = "HS256"
    TOKEN_CLOCK_SKEW_SECONDS: int = 60

    # CORS
    CORS_ORIGINS: list[str] = ["http://localhost:5173"]

    # App settings
    LOG_LEVEL: str = "INFO"

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate and normalize LOG_LEVEL to an uppercase Python logging level."""
        valid = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in valid:
            raise ValueError(f"LOG_LEVEL must be one of {valid}, got {v!r}")
        return v.upper()

    @field_validator("TOKEN_CLOCK_SKEW_SECONDS")
    @classmethod
    def validate_clock_skew(cls, v: int) -> int:
        """Reject negative clock skew leeway."""
        if v < 0:
            raise ValueError("TOKEN_CLOCK_SKEW_SECONDS must be >= 0")
        return v


settings = Settings()
