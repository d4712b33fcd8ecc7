"""Named configuration sources queried by the resolver in priority order.

Each source answers one question: "do you have a value for this setting?"
A source returns ``None`` when it has nothing to contribute, and the resolver
moves on to the next one.

Default order (highest to lowest priority):
1. Explicit values from the provider block
2. Environment variable (``AUTH0_DOMAIN``, ...)
3. Secret file named by ``<ENV_VAR>_FILE`` (sensitive settings only)
4. .env file (python-dotenv)

Example:
    ```python
    from auth0_provider.config import ConfigResolver, EnvironmentSource, ExplicitSource

    resolver = ConfigResolver(
        sources=[ExplicitSource({"domain": "example.auth0.com"}), EnvironmentSource()],
    )
    ```
"""

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from pathlib import Path
from threading import Lock
from typing import Any

from dotenv import dotenv_values, find_dotenv

from auth0_provider.config.exceptions import ConfigFileError
from auth0_provider.config.settings import Setting

logger = logging.getLogger(__name__)


class ConfigSource(ABC):
    """A named place a setting value can come from."""

    name: str = "source"

    @abstractmethod
    def get(self, setting: Setting) -> Any:
        """Return the value for ``setting``, or None if this source has none."""


class ExplicitSource(ConfigSource):
    """Values supplied directly by the caller, keyed by setting name.

    A key that is absent or mapped to None is treated as not provided. Any
    other value, the empty string included, counts as provided.
    """

    name = "explicit value"

    def __init__(self, values: Mapping[str, Any] | None = None):
        self._values = dict(values or {})

    def get(self, setting: Setting) -> Any:
        return self._values.get(setting.name)


class EnvironmentSource(ConfigSource):
    """Process environment, read-only. Empty variables count as unset."""

    name = "environment"

    def __init__(self, environ: Mapping[str, str] | None = None):
        self._environ = environ

    @property
    def environ(self) -> Mapping[str, str]:
        return os.environ if self._environ is None else self._environ

    def get(self, setting: Setting) -> str | None:
        value = self.environ.get(setting.env_var)
        if not value:
            return None
        return value


class SecretFileSource(ConfigSource):
    """Read sensitive settings from a file whose path is in ``<ENV_VAR>_FILE``.

    Supports ``~`` and ``$VAR`` expansion in the path. File contents are
    stripped of leading/trailing whitespace.
    """

    name = "secret file"

    def __init__(self, environ: Mapping[str, str] | None = None, suffix: str = "_FILE"):
        self._environ = environ
        self.suffix = suffix

    def get(self, setting: Setting) -> str | None:
        if not setting.sensitive:
            return None

        environ = os.environ if self._environ is None else self._environ
        path_var = f"{setting.env_var}{self.suffix}"
        raw_path = environ.get(path_var)
        if not raw_path:
            return None

        path = Path(os.path.expanduser(os.path.expandvars(raw_path)))
        try:
            content = path.read_text().strip()
        except FileNotFoundError:
            raise ConfigFileError(f"Secret file not found: {path} (from {path_var})", path=str(path)) from None
        except PermissionError:
            raise ConfigFileError(
                f"Permission denied reading secret file: {path} (from {path_var})", path=str(path)
            ) from None
        except OSError as e:
            raise ConfigFileError(f"Error reading secret file {path}: {e}", path=str(path)) from e

        logger.debug(f"Read '{setting.name}' from secret file: {path} (***)")
        return content or None


class DotenvSource(ConfigSource):
    """Values from a .env file, parsed without touching ``os.environ``.

    The file is parsed once, on first lookup. When ``dotenv_path`` is None
    the file is searched for starting at the current working directory.
    """

    name = ".env file"

    def __init__(self, dotenv_path: str | None = None):
        self._dotenv_path = dotenv_path
        self._values: dict[str, str | None] | None = None
        self._lock = Lock()

    def _ensure_loaded(self) -> dict[str, str | None]:
        if self._values is not None:
            return self._values

        with self._lock:
            # Double-check pattern for thread safety
            if self._values is not None:
                return self._values

            path = self._dotenv_path or find_dotenv(usecwd=True)
            values: dict[str, str | None] = {}
            if path:
                try:
                    values = dotenv_values(path)
                    logger.debug(f"Loaded .env file for configuration: {path}")
                except OSError as e:
                    logger.warning(f"Failed to load .env file {path}: {e}")
            self._values = values
            return values

    def get(self, setting: Setting) -> str | None:
        value = self._ensure_loaded().get(setting.env_var)
        if not value:
            return None
        return value
