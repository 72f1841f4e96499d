"""In-memory mapping provider."""

from collections.abc import Mapping

from confchain.providers.base import ConfigProvider


class InMemoryProvider(ConfigProvider):
    """Looks keys up in a caller-owned mapping.

    The mapping is held by reference, not copied. Concurrent readers are
    safe only if the mapping is not mutated after it is handed over.
    """

    def __init__(self, values: Mapping[str, str]) -> None:
        self._values = values

    @property
    def provider_name(self) -> str:
        return "in_memory"

    def lookup(self, key: str) -> str | None:
        if key not in self._values:
            return None
        return self._values[key]
