"""Exception hierarchy for configuration lookups.

All errors inherit from ConfChainError, which carries the human-readable
message. Resolver.get_optional absorbs any ConfChainError and falls back
to the caller's default.
"""


class ConfChainError(Exception):
    """Base exception for all confchain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class NoProvidersConfiguredError(ConfChainError):
    """Raised when a resolver with an empty provider chain is queried."""

    def __init__(self) -> None:
        super().__init__("there is no configuration provider configured")


class KeyNotFoundError(ConfChainError):
    """Raised when no configured provider has the requested key."""

    def __init__(self, key: str) -> None:
        self.key = key
        super().__init__(f"key {key} not found")


class ProviderLookupError(ConfChainError):
    """Raised by a provider whose lookup failed.

    The resolver treats it as a miss and moves on to the next provider.
    """

    pass
