"""Transport layers wrapping httpx's async transports.

Example:
    ```python
    import httpx

    from auth0_provider.transport import RateLimitAwareRetry

    transport = RateLimitAwareRetry(wrapped_transport=httpx.AsyncHTTPTransport())
    ```
"""

from auth0_provider.transport.retry import RateLimitAwareRetry

__all__ = ["RateLimitAwareRetry"]
