"""Resolver - ordered, first-match-wins configuration lookup.

Resolves a key by consulting providers in the order they were given:
1. The first provider that returns a value wins
2. Later providers are never consulted once a value is found
3. A key no provider has is an error (get_required) or the caller's
   default (get_optional)

Callers control precedence purely by provider order.
"""

from typing import Any

from confchain.errors import (
    ConfChainError,
    KeyNotFoundError,
    NoProvidersConfiguredError,
)
from confchain.observability.logging import get_logger
from confchain.providers.factories import with_custom

logger = get_logger(__name__)


def _provider_name(provider: Any) -> str:
    return getattr(provider, "provider_name", type(provider).__name__)


class Resolver:
    """Ordered chain of configuration providers.

    The chain is fixed at construction; there is no add or remove.
    Objects without a ``lookup`` method but callable are wrapped the
    same way ``with_custom`` wraps them.
    """

    def __init__(self, *providers: Any) -> None:
        self._providers = tuple(with_custom(provider) for provider in providers)

    @property
    def providers(self) -> tuple[Any, ...]:
        """Providers in precedence order."""
        return self._providers

    def __repr__(self) -> str:
        names = ", ".join(_provider_name(p) for p in self._providers)
        return f"Resolver([{names}])"

    def get_required(self, key: str) -> str:
        """Resolve a key, failing if no provider has it.

        A provider that raises, or returns anything other than a str,
        counts as not having the key.

        Args:
            key: Configuration key

        Returns:
            Value from the earliest provider that has the key

        Raises:
            NoProvidersConfiguredError: If the chain is empty
            KeyNotFoundError: If no provider has the key
        """
        if not self._providers:
            logger.debug("config_no_providers", key=key)
            raise NoProvidersConfiguredError()

        for position, provider in enumerate(self._providers):
            try:
                value = provider.lookup(key)
            except Exception as e:
                # A failed lookup is a miss; move on to the next provider
                logger.debug(
                    "config_provider_lookup_failed",
                    key=key,
                    provider=_provider_name(provider),
                    error=str(e),
                    error_type=type(e).__name__,
                )
                continue

            if isinstance(value, str):
                logger.debug(
                    "config_value_resolved",
                    key=key,
                    provider=_provider_name(provider),
                    position=position,
                )
                return value

        logger.debug(
            "config_key_not_found",
            key=key,
            providers=[_provider_name(p) for p in self._providers],
        )
        raise KeyNotFoundError(key)

    def get_optional(self, key: str, default: str = "") -> str:
        """Resolve a key, returning default on any lookup failure.

        Args:
            key: Configuration key
            default: Value returned when the key cannot be resolved

        Returns:
            Resolved value or default
        """
        try:
            return self.get_required(key)
        except ConfChainError:
            return default
