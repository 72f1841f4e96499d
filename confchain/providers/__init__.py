"""Configuration value providers.

Built-in sources (in-memory mapping, process environment) plus a
pass-through for caller-supplied lookups.
"""

from confchain.providers.base import CallableProvider, ConfigProvider, LookupFn
from confchain.providers.environment import EnvironmentProvider
from confchain.providers.factories import with_custom, with_environment, with_in_memory
from confchain.providers.memory import InMemoryProvider

__all__ = [
    "CallableProvider",
    "ConfigProvider",
    "EnvironmentProvider",
    "InMemoryProvider",
    "LookupFn",
    "with_custom",
    "with_environment",
    "with_in_memory",
]
