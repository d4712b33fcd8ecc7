"""Auth0 provider plugin core.

Resolves the provider configuration and builds the authenticated Management
API client that resource operations share:
- Layered configuration resolution (explicit → env → secret file → .env)
- OAuth2 client-credentials auth with lazy token exchange
- Rate-limit aware retry transport
- Structured errors for Auth0 API responses

Example:
    ```python
    from auth0_provider.provider import new_provider

    provider = new_provider()
    api = provider.configure(
        {"domain": "example.eu.auth0.com", "debug": True},
        terraform_version="1.9.5",
    )

    async with api:
        clients = await api.get("clients")
    ```
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
