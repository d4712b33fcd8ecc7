"""Exceptions raised while building the Management API client."""


class ClientConstructionError(Exception):
    """Raised when an authenticated client handle cannot be built.

    The underlying error, if any, is chained as ``__cause__``.

    Attributes:
        domain: The Auth0 domain the client was being built for.
    """

    def __init__(self, message: str, domain: str | None = None):
        super().__init__(message)
        self.domain = domain
