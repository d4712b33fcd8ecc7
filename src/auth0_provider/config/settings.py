"""Provider block schema and the resolved configuration value."""

from dataclasses import dataclass, field

TRUTHY_VALUES: frozenset[str] = frozenset(["1", "true", "on"])


@dataclass(frozen=True)
class Setting:
    """Declaration of one provider-block field."""

    name: str
    env_var: str
    kind: type = str
    required: bool = False
    sensitive: bool = False
    description: str = ""


DOMAIN = Setting(
    name="domain",
    env_var="AUTH0_DOMAIN",
    required=True,
    description="Auth0 tenant domain, e.g. 'example.eu.auth0.com'.",
)
CLIENT_ID = Setting(
    name="client_id",
    env_var="AUTH0_CLIENT_ID",
    required=True,
    description="Client ID of the machine-to-machine application.",
)
CLIENT_SECRET = Setting(
    name="client_secret",
    env_var="AUTH0_CLIENT_SECRET",
    required=True,
    sensitive=True,
    description="Client secret of the machine-to-machine application.",
)
DEBUG = Setting(
    name="debug",
    env_var="AUTH0_DEBUG",
    kind=bool,
    description="Log Management API requests and responses.",
)

PROVIDER_SETTINGS: tuple[Setting, ...] = (DOMAIN, CLIENT_ID, CLIENT_SECRET, DEBUG)


def parse_bool(value: str | bool | None) -> bool:
    """Interpret a debug flag.

    Only the exact strings "1", "true" and "on" are true. Everything else,
    including "TRUE", "yes" and the empty string, is false.
    """
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return value in TRUTHY_VALUES


@dataclass(frozen=True)
class ProviderConfig:
    """Fully resolved provider configuration."""

    domain: str
    client_id: str
    client_secret: str = field(repr=False)
    debug: bool = False

    def missing_fields(self) -> list[str]:
        """Names of required fields that are empty."""
        return [s.name for s in PROVIDER_SETTINGS if s.required and not getattr(self, s.name)]
