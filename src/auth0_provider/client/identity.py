"""Identification string sent to Auth0 as the User-Agent header.

The string names four versions: this provider, the HTTP client library the
Management client is built on, the Python runtime hosting the plugin, and the
Terraform version reported by the host::

    Terraform-Provider-Auth0/0.1.0 (httpx/0.28.1; Python/3.12.4; Terraform/1.9.5)
"""

import platform
from dataclasses import dataclass

import httpx

from auth0_provider import __version__

USER_AGENT_TEMPLATE = "Terraform-Provider-Auth0/{provider} (httpx/{client}; Python/{python}; Terraform/{terraform})"


def provider_version() -> str:
    return __version__


def client_version() -> str:
    return httpx.__version__


def python_version() -> str:
    return platform.python_version()


@dataclass(frozen=True)
class VersionInfo:
    """The four version tokens that make up the identification string."""

    provider_version: str
    client_version: str
    python_version: str
    terraform_version: str

    def user_agent(self) -> str:
        return USER_AGENT_TEMPLATE.format(
            provider=self.provider_version,
            client=self.client_version,
            python=self.python_version,
            terraform=self.terraform_version,
        )


def collect_version_info(terraform_version: str) -> VersionInfo:
    """Gather version tokens; ``terraform_version`` is passed through unmodified."""
    return VersionInfo(
        provider_version=provider_version(),
        client_version=client_version(),
        python_version=python_version(),
        terraform_version=terraform_version,
    )


def build_user_agent(terraform_version: str) -> str:
    return collect_version_info(terraform_version).user_agent()
