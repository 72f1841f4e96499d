"""Factory functions for building resolver chains.

Each factory returns a ConfigProvider so built-in and custom sources
read the same way at the call site:

    resolver = Resolver(
        with_environment(),
        with_in_memory({"LOG_LEVEL": "INFO"}),
        with_custom(vault_lookup),
    )
"""

from collections.abc import Mapping
from typing import Any

from confchain.providers.base import CallableProvider, ConfigProvider
from confchain.providers.environment import EnvironmentProvider
from confchain.providers.memory import InMemoryProvider


def with_in_memory(values: Mapping[str, str]) -> InMemoryProvider:
    """Create a provider backed by a fixed mapping."""
    return InMemoryProvider(values)


def with_environment(prefix: str = "") -> EnvironmentProvider:
    """Create a provider backed by the process environment."""
    return EnvironmentProvider(prefix=prefix)


def with_custom(provider: Any) -> ConfigProvider:
    """Pass a caller-supplied provider through.

    Anything exposing a ``lookup`` method is returned unchanged. A plain
    callable is wrapped in CallableProvider.

    Raises:
        TypeError: If provider has no lookup method and is not callable
    """
    if callable(getattr(provider, "lookup", None)):
        return provider
    if callable(provider):
        return CallableProvider(provider)
    raise TypeError(
        f"custom provider must define lookup() or be callable, got {type(provider).__name__}"
    )
