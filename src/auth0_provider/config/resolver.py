"""Layered resolution of the provider configuration.

Resolution order (first source that provides a value wins):
1. Explicitly provided value
2. Environment variable
3. Secret file (``AUTH0_CLIENT_SECRET_FILE``)
4. .env file (python-dotenv)

Example:
    ```python
    from auth0_provider.config import ConfigResolver

    resolver = ConfigResolver()

    # Everything from AUTH0_DOMAIN / AUTH0_CLIENT_ID / AUTH0_CLIENT_SECRET
    config = resolver.resolve()

    # Explicit values take precedence over the environment
    config = resolver.resolve({"domain": "example.eu.auth0.com"})
    ```

Security Considerations:
    - Sensitive values are never logged (masked with ***)
    - Only source information is logged (source name, env var name)
"""

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from auth0_provider.config.exceptions import MissingRequiredConfigError
from auth0_provider.config.settings import (
    CLIENT_ID,
    CLIENT_SECRET,
    DEBUG,
    DOMAIN,
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

logger = logging.getLogger(__name__)


class ConfigResolver:
    """Resolve a ProviderConfig from explicit values and fallback sources.

    The explicit values passed to :meth:`resolve` are always consulted first.
    The remaining sources are queried in the order given.

    Example:
        ```python
        # Skip .env discovery
        resolver = ConfigResolver(load_dotenv=False)

        # Custom source list
        resolver = ConfigResolver(sources=[EnvironmentSource(os_environ_copy)])
        ```
    """

    def __init__(
        self,
        sources: Sequence[ConfigSource] | None = None,
        *,
        dotenv_path: str | None = None,
        load_dotenv: bool = True,
    ):
        """Initialize the resolver.

        Args:
            sources: Fallback sources in priority order. When None, uses the
                environment, secret files and (optionally) a .env file.
            dotenv_path: Path to a .env file. If None, searches upward from the
                current working directory.
            load_dotenv: Whether to add the .env source to the default list.
        """
        if sources is None:
            sources = [EnvironmentSource(), SecretFileSource()]
            if load_dotenv:
                sources.append(DotenvSource(dotenv_path))
        self.sources: tuple[ConfigSource, ...] = tuple(sources)

    def _mask(self, setting: Setting, value: Any) -> str:
        if value is None:
            return "None"
        if setting.sensitive:
            return "***"
        return repr(value)

    def resolve_setting(self, setting: Setting, values: Mapping[str, Any] | None = None) -> Any:
        """Return the raw value of one setting from the first source that has it.

        Args:
            setting: The setting to look up.
            values: Explicit values keyed by setting name.

        Returns:
            The value as provided by the winning source, or None.
        """
        for source in (ExplicitSource(values), *self.sources):
            value = source.get(setting)
            if value is not None:
                logger.debug(f"Resolved '{setting.name}' from {source.name}: {self._mask(setting, value)}")
                return value
        return None

    def _require(self, setting: Setting, values: Mapping[str, Any] | None) -> str:
        value = self.resolve_setting(setting, values)
        if value is None or value == "":
            raise MissingRequiredConfigError(setting.name, env_var_name=setting.env_var)
        return str(value)

    def resolve(self, values: Mapping[str, Any] | None = None) -> ProviderConfig:
        """Resolve the full provider configuration.

        Args:
            values: Explicit values keyed by setting name (``domain``,
                ``client_id``, ``client_secret``, ``debug``). Missing keys and
                None values fall through to the other sources.

        Returns:
            ProviderConfig with every required field populated.

        Raises:
            MissingRequiredConfigError: If a required setting has no value in
                any source. Settings are checked in schema order.
            ConfigFileError: If a secret file is configured but unreadable.
        """
        unknown = set(values or {}) - {s.name for s in PROVIDER_SETTINGS}
        if unknown:
            logger.warning(f"Ignoring unknown provider settings: {', '.join(sorted(unknown))}")

        domain = self._require(DOMAIN, values)
        client_id = self._require(CLIENT_ID, values)
        client_secret = self._require(CLIENT_SECRET, values)
        debug = parse_bool(self.resolve_setting(DEBUG, values))

        return ProviderConfig(
            domain=domain,
            client_id=client_id,
            client_secret=client_secret,
            debug=debug,
        )


def resolve_config(values: Mapping[str, Any] | None = None, **kwargs: Any) -> ProviderConfig:
    """Shortcut for ``ConfigResolver(**kwargs).resolve(values)``."""
    return ConfigResolver(**kwargs).resolve(values)
