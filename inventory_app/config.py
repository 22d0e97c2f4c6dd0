from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables or a .env file.

    Missing database or reCAPTCHA values are not rejected here; they surface
    as errors the first time the database or the verifier is used.
    """

    # Database
    DATABASE_URL: str = "sqlite:///./inventory.db"
    CREATE_TABLES: bool = True

    # reCAPTCHA
    RECAPTCHA_SECRET: str = ""
    RECAPTCHA_VERIFY_URL: str = "https://www.google.com/recaptcha/api/siteverify"

    # Contact form submissions
    CONTACT_LOG_PATH: str = "messages.txt"

    # Frontend
    STATIC_DIR: str = "public"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 5000
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
