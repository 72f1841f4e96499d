"""ConfigProvider abstract interface."""

from abc import ABC, abstractmethod
from collections.abc import Callable

LookupFn = Callable[[str], str | None]


class ConfigProvider(ABC):
    """Abstract interface for a single configuration source.

    A lookup returns the value for a key, or None when the source does
    not have it. An empty string is a found value.
    """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Return the provider name used in log events."""
        pass

    @abstractmethod
    def lookup(self, key: str) -> str | None:
        """Look up a key in this source.

        Args:
            key: Configuration key

        Returns:
            The value, or None if the key is absent. The resolver treats
            any non-str result as absent.

        Raises:
            ProviderLookupError: If the source failed to answer. The
                resolver treats any exception as a miss.
        """
        pass

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.provider_name}>"


class CallableProvider(ConfigProvider):
    """Adapts a plain ``key -> value | None`` function to ConfigProvider."""

    def __init__(self, fn: LookupFn, name: str | None = None) -> None:
        self._fn = fn
        self._name = name or getattr(fn, "__name__", type(fn).__name__)

    @property
    def provider_name(self) -> str:
        return self._name

    def lookup(self, key: str) -> str | None:
        return self._fn(key)
