from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import field_validator
from pathlib import Path
from typing import Literal
from functools import lru_cache


class Settings(BaseSettings):
    """
    Settings for the logging stack and the HTTP error adapters, loaded from environment.
    """

    # Environment
    ENV: Literal["development", "testing", "staging", "production"] = "development"
    SERVICE_NAME: str = "error-handler"

    # Logging
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    LOG_FORMAT: Literal["json", "text"] = "json"
    LOG_TO_STDOUT: bool = True
    LOG_DIR: Path = Path("/var/log/error-handler")
    LOG_MAX_BYTES: int = 10_000_000  # 10 MB
    LOG_BACKUP_COUNT: int = 5

    # Error responses
    # "json" -> {"error": ..., "status": ...}; "text" -> the bare message as text/plain
    ERROR_RESPONSE_FORMAT: Literal["json", "text"] = "json"
    EXPOSE_REQUEST_ID: bool = True

    # --- Validators ---
    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str | None) -> str | None:
        """
        Normalize LOG_LEVEL to uppercase before Literal validation,
        so LOG_LEVEL=debug is accepted.
        """
        return v.upper() if isinstance(v, str) else v

    @field_validator("LOG_FORMAT", "ERROR_RESPONSE_FORMAT", mode="before")
    @classmethod
    def normalize_format(cls, v: str | None) -> str | None:
        return v.lower() if isinstance(v, str) else v

    # Load environment variables from the .env file located two levels up relative to this file.
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )


# get_settings() takes no arguments and always returns the same settings from the environment,
# so it is cached with @lru_cache().
@lru_cache()
def get_settings() -> Settings:
    return Settings()
