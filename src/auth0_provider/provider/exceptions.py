"""Exceptions raised by the provider lifecycle."""


class ProviderError(Exception):
    """Base exception for provider lifecycle errors."""

    pass


class ProviderAlreadyConfiguredError(ProviderError):
    """Raised when ``configure`` is called on a configured provider."""

    pass


class ProviderNotConfiguredError(ProviderError):
    """Raised when the client handle is requested before ``configure``."""

    pass
