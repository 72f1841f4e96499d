"""Runtime settings for confchain.

Settings come from pydantic model defaults overridden by CONFCHAIN_*
environment variables.

Usage:
    from confchain.config import configure_logging, get_settings

    configure_logging()
    level = get_settings().log_level
"""

from functools import lru_cache

from confchain.config.settings import Settings
from confchain.observability.logging import setup_logging


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Get the singleton settings instance.

    The result is cached for the lifetime of the process.
    Call `get_settings.cache_clear()` to reload configuration.
    """
    return Settings()


def reload_settings() -> Settings:
    """Clear the settings cache and reload configuration."""
    get_settings.cache_clear()
    return get_settings()


def configure_logging(settings: Settings | None = None) -> None:
    """Apply logging settings (defaults to get_settings())."""
    settings = settings or get_settings()
    setup_logging(
        level=settings.log_level,
        format=settings.log_format,
        redact_secrets=settings.redact_secrets,
    )


__all__ = ["Settings", "configure_logging", "get_settings", "reload_settings"]
