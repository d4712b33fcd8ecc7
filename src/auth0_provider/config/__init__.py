"""Provider configuration: schema, sources and resolution.

This module provides:
- The provider block schema (``domain``, ``client_id``, ``client_secret``, ``debug``)
- Layered resolution (explicit → env → secret file → .env)
- The immutable, fully resolved ``ProviderConfig``

Example:
    ```python
    from auth0_provider.config import ConfigResolver

    config = ConfigResolver().resolve({"debug": True})
    ```
"""

from auth0_provider.config.exceptions import (
    ConfigError,
    ConfigFileError,
    MissingRequiredConfigError,
)
from auth0_provider.config.resolver import ConfigResolver, resolve_config
from auth0_provider.config.settings import (
    PROVIDER_SETTINGS,
    ProviderConfig,
    Setting,
    parse_bool,
)
from auth0_provider.config.sources import (
    ConfigSource,
    DotenvSource,
    EnvironmentSource,
    ExplicitSource,
    SecretFileSource,
)

__all__ = [
    "PROVIDER_SETTINGS",
    "ConfigError",
    "ConfigFileError",
    "ConfigResolver",
    "ConfigSource",
    "DotenvSource",
    "EnvironmentSource",
    "ExplicitSource",
    "MissingRequiredConfigError",
    "ProviderConfig",
    "SecretFileSource",
    "Setting",
    "parse_bool",
    "resolve_config",
]
