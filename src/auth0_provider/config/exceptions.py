"""Exceptions raised while resolving provider configuration.

Example:
    ```python
    from auth0_provider.config.exceptions import MissingRequiredConfigError

    try:
        config = resolver.resolve({"client_id": "abc", "client_secret": "xyz"})
    except MissingRequiredConfigError as e:
        print(f"Set '{e.setting_name}' or export {e.env_var_name}")
    ```
"""


class ConfigError(Exception):
    """Base exception for provider configuration errors.

    All configuration-specific exceptions inherit from this class,
    making it easy to catch any configuration-related error.
    """

    pass


class MissingRequiredConfigError(ConfigError):
    """Raised when a required setting cannot be resolved from any source.

    Attributes:
        setting_name: Name of the provider setting (e.g. ``domain``).
        env_var_name: The environment variable that was checked as fallback.
    """

    def __init__(self, setting_name: str, env_var_name: str | None = None, message: str | None = None):
        """Initialize MissingRequiredConfigError.

        Args:
            setting_name: Name of the setting that failed resolution.
            env_var_name: Optional environment variable name for reference.
            message: Optional override for the default message.
        """
        if message is None:
            message = f"Required configuration missing: '{setting_name}'"
            if env_var_name:
                message += f" (set it explicitly or via {env_var_name})"
        super().__init__(message)
        self.setting_name = setting_name
        self.env_var_name = env_var_name


class ConfigFileError(ConfigError):
    """Raised when a file-based setting is configured but cannot be read."""

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path
