"""Settings model for confchain's own runtime behavior."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
LogFormat = Literal["json", "console"]


class Settings(BaseSettings):
    """Library settings, read from CONFCHAIN_* environment variables.

    These govern logging only. They are not a value source for resolvers.
    """

    model_config = SettingsConfigDict(
        env_prefix="CONFCHAIN_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = Field(default="INFO", description="Logging level")
    log_format: LogFormat = Field(
        default="json",
        description="json for production, console for development",
    )
    redact_secrets: bool = Field(
        default=True,
        description="Redact secret-looking fields from log events",
    )
