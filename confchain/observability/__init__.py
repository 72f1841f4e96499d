"""Observability: structured logging.

Provides standardized logging primitives using structlog.
"""

from confchain.observability.logging import SecretRedactor, get_logger, setup_logging

__all__ = ["SecretRedactor", "get_logger", "setup_logging"]
