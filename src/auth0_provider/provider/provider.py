"""The Auth0 provider definition and its configure step.

A provider starts ``unconfigured``. A single successful :meth:`Provider.configure`
call moves it to ``configured`` and publishes the Management API client that
the host hands to every resource operation. There is no way back.

Example:
    ```python
    from auth0_provider.provider import new_provider

    provider = new_provider()
    api = provider.configure({"domain": "example.eu.auth0.com"}, terraform_version="1.9.5")
    assert provider.meta is api
    ```
"""

import logging
from collections.abc import Callable, Mapping, Sequence
from typing import Any

from auth0_provider.client import ManagementClient, new_management_client
from auth0_provider.config import PROVIDER_SETTINGS, ConfigResolver, Setting
from auth0_provider.provider.exceptions import ProviderAlreadyConfiguredError, ProviderNotConfiguredError
from auth0_provider.provider.resources import RESOURCE_TYPES

logger = logging.getLogger(__name__)


class Provider:
    """Provider schema, resource registry and the one-shot configure transition.

    Args:
        settings: Provider block schema.
        resource_types: Names of the resource types the provider serves.
        resolver: Configuration resolver; defaults to ``ConfigResolver()``.
        client_factory: Callable building the client handle from a config.
    """

    def __init__(
        self,
        *,
        settings: Sequence[Setting] = PROVIDER_SETTINGS,
        resource_types: Sequence[str] = RESOURCE_TYPES,
        resolver: ConfigResolver | None = None,
        client_factory: Callable[..., ManagementClient] = new_management_client,
    ) -> None:
        self.settings: tuple[Setting, ...] = tuple(settings)
        self.resource_types: tuple[str, ...] = tuple(resource_types)
        self._resolver = resolver if resolver is not None else ConfigResolver()
        self._client_factory = client_factory
        self._meta: ManagementClient | None = None
        self._terraform_version: str | None = None

    def schema(self) -> dict[str, Setting]:
        return {setting.name: setting for setting in self.settings}

    def has_resource(self, name: str) -> bool:
        return name in self.resource_types

    @property
    def configured(self) -> bool:
        return self._meta is not None

    @property
    def terraform_version(self) -> str | None:
        """Terraform version reported by the host at configure time."""
        return self._terraform_version

    @property
    def meta(self) -> ManagementClient:
        """The client handle passed to resource operations.

        Raises:
            ProviderNotConfiguredError: If ``configure`` has not succeeded yet.
        """
        if self._meta is None:
            raise ProviderNotConfiguredError("Provider has not been configured")
        return self._meta

    def configure(
        self,
        values: Mapping[str, Any] | None = None,
        *,
        terraform_version: str = "",
        **client_options: Any,
    ) -> ManagementClient:
        """Resolve the configuration and build the Management API client.

        Args:
            values: Explicit provider block values keyed by setting name.
            terraform_version: Version string supplied by the host.
            **client_options: Forwarded to the client factory
                (``transport``, ``max_retries``, ``timeout``).

        Returns:
            The published client handle.

        Raises:
            ProviderAlreadyConfiguredError: If called a second time.
            MissingRequiredConfigError: If a required setting is missing.
            ConfigFileError: If a secret file is configured but unreadable.
            ClientConstructionError: If the client cannot be built.
        """
        if self._meta is not None:
            raise ProviderAlreadyConfiguredError("Provider is already configured")

        config = self._resolver.resolve(values)
        meta = self._client_factory(config, terraform_version=terraform_version, **client_options)

        self._terraform_version = terraform_version
        self._meta = meta
        logger.info(f"Configured Auth0 provider for {config.domain}")
        return meta


def new_provider(**kwargs: Any) -> Provider:
    """Build a fresh, unconfigured provider."""
    return Provider(**kwargs)
