"""Process environment provider."""

import os

from confchain.providers.base import ConfigProvider


class EnvironmentProvider(ConfigProvider):
    """Reads keys from os.environ at lookup time.

    A variable set to the empty string counts as found. With a prefix,
    a lookup for ``DATABASE_URL`` reads ``{prefix}DATABASE_URL``.
    """

    def __init__(self, prefix: str = "") -> None:
        self.prefix = prefix

    @property
    def provider_name(self) -> str:
        if self.prefix:
            return f"environment:{self.prefix}"
        return "environment"

    def lookup(self, key: str) -> str | None:
        return os.environ.get(f"{self.prefix}{key}")
