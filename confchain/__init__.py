"""confchain: ordered, fallback-chained configuration lookup.

Build a Resolver from providers in precedence order; the first provider
that has a key wins.

    from confchain import Resolver, with_environment, with_in_memory

    resolver = Resolver(with_environment(), with_in_memory({"PORT": "8000"}))
    port = resolver.get_optional("PORT", "8080")
"""

from confchain.errors import (
    ConfChainError,
    KeyNotFoundError,
    NoProvidersConfiguredError,
    ProviderLookupError,
)
from confchain.providers import (
    CallableProvider,
    ConfigProvider,
    EnvironmentProvider,
    InMemoryProvider,
    with_custom,
    with_environment,
    with_in_memory,
)
from confchain.resolver import Resolver

__version__ = "0.1.0"

__all__ = [
    # Resolver
    "Resolver",
    # Providers
    "CallableProvider",
    "ConfigProvider",
    "EnvironmentProvider",
    "InMemoryProvider",
    "with_custom",
    "with_environment",
    "with_in_memory",
    # Errors
    "ConfChainError",
    "KeyNotFoundError",
    "NoProvidersConfiguredError",
    "ProviderLookupError",
]
