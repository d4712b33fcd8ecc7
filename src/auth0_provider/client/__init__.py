"""Management API client construction.

This module provides:
- The identification string (User-Agent) naming the provider stack
- OAuth2 client-credentials auth with lazy token exchange
- The ``ManagementClient`` handle shared by resource operations

Example:
    ```python
    from auth0_provider.client import new_management_client

    api = new_management_client(config, terraform_version="1.9.5")
    ```
"""

from auth0_provider.client.auth import ClientCredentialsAuth
from auth0_provider.client.exceptions import ClientConstructionError
from auth0_provider.client.factory import new_management_client, validate_config
from auth0_provider.client.identity import VersionInfo, build_user_agent, collect_version_info
from auth0_provider.client.management import ManagementClient

__all__ = [
    "ClientConstructionError",
    "ClientCredentialsAuth",
    "ManagementClient",
    "VersionInfo",
    "build_user_agent",
    "collect_version_info",
    "new_management_client",
    "validate_config",
]
