"""Provider definition: schema, resource registry and configure."""

from auth0_provider.provider.exceptions import (
    ProviderAlreadyConfiguredError,
    ProviderError,
    ProviderNotConfiguredError,
)
from auth0_provider.provider.provider import Provider, new_provider
from auth0_provider.provider.resources import RESOURCE_TYPES

__all__ = [
    "RESOURCE_TYPES",
    "Provider",
    "ProviderAlreadyConfiguredError",
    "ProviderError",
    "ProviderNotConfiguredError",
    "new_provider",
]
