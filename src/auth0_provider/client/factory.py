"""Build the authenticated Management API client from a resolved config.

Example:
    ```python
    from auth0_provider.client import new_management_client
    from auth0_provider.config import ConfigResolver

    config = ConfigResolver().resolve()
    api = new_management_client(config, terraform_version="1.9.5")
    ```
"""

import logging
import re

import httpx

from auth0_provider.client.auth import ClientCredentialsAuth
from auth0_provider.client.debug import debug_event_hooks
from auth0_provider.client.exceptions import ClientConstructionError
from auth0_provider.client.identity import build_user_agent
from auth0_provider.client.management import ManagementClient
from auth0_provider.config import ProviderConfig
from auth0_provider.transport import RateLimitAwareRetry

logger = logging.getLogger(__name__)

# Dot-separated DNS labels with an optional port; no scheme, no path
HOSTNAME_PATTERN = re.compile(
    r"^(?!-)[A-Za-z0-9-]{1,63}(?<!-)(\.(?!-)[A-Za-z0-9-]{1,63}(?<!-))*(?::(?P<port>\d{1,5}))?$"
)

DEFAULT_TIMEOUT = 30.0


def management_base_url(domain: str) -> str:
    return f"https://{domain}/api/v2/"


def token_url(domain: str) -> str:
    return f"https://{domain}/oauth/token"


def validate_config(config: ProviderConfig) -> None:
    """Refuse configs that would produce a partially authenticated client.

    Raises:
        ClientConstructionError: If a required field is empty or the domain
            is not hostname-shaped.
    """
    missing = config.missing_fields()
    if missing:
        raise ClientConstructionError(
            f"Cannot build Management API client, missing: {', '.join(missing)}", domain=config.domain or None
        )

    match = HOSTNAME_PATTERN.match(config.domain)
    port = match["port"] if match else None
    if len(config.domain) > 253 or not match or (port is not None and not 1 <= int(port) <= 65535):
        raise ClientConstructionError(
            f"Invalid Auth0 domain '{config.domain}': expected a hostname such as 'example.eu.auth0.com'",
            domain=config.domain,
        )


def new_management_client(
    config: ProviderConfig,
    *,
    terraform_version: str = "",
    transport: httpx.AsyncBaseTransport | None = None,
    max_retries: int = 5,
    timeout: float = DEFAULT_TIMEOUT,
) -> ManagementClient:
    """Build one authenticated Management API client.

    No request is sent here; the credential exchange happens on the first
    API call.

    Args:
        config: Resolved provider configuration.
        terraform_version: Version reported by the host, passed through
            unmodified into the User-Agent.
        transport: Base transport to wrap with retries. Defaults to
            ``httpx.AsyncHTTPTransport()``.
        max_retries: Retry budget for rate limits and server errors.
        timeout: Request timeout in seconds.

    Returns:
        A fully built ManagementClient.

    Raises:
        ClientConstructionError: If the config is incomplete, the domain is
            malformed, or the HTTP stack cannot be built.
    """
    validate_config(config)

    try:
        user_agent = build_user_agent(terraform_version)
        auth = ClientCredentialsAuth(
            token_url=token_url(config.domain),
            client_id=config.client_id,
            client_secret=config.client_secret,
            audience=management_base_url(config.domain),
            headers={"User-Agent": user_agent},
        )
        retry_transport = RateLimitAwareRetry(
            wrapped_transport=transport or httpx.AsyncHTTPTransport(),
            max_retries=max_retries,
        )
        http_client = httpx.AsyncClient(
            base_url=management_base_url(config.domain),
            auth=auth,
            headers={"User-Agent": user_agent},
            timeout=timeout,
            transport=retry_transport,
            event_hooks=debug_event_hooks() if config.debug else None,
        )
    except (httpx.InvalidURL, ValueError, TypeError, OSError) as e:
        raise ClientConstructionError(
            f"Failed to build Management API client for '{config.domain}': {e}", domain=config.domain
        ) from e

    logger.debug(f"Built Management API client for {config.domain} (debug={config.debug}, user agent: {user_agent})")

    return ManagementClient(
        domain=config.domain,
        user_agent=user_agent,
        debug=config.debug,
        http_client=http_client,
    )
