"""Tests for configuration exceptions."""

import pytest

from auth0_provider.config.exceptions import (
    ConfigError,
    ConfigFileError,
    MissingRequiredConfigError,
)


class TestMissingRequiredConfigError:
    def test_is_config_error(self):
        with pytest.raises(ConfigError):
            raise MissingRequiredConfigError("domain")

    def test_default_message_names_setting(self):
        error = MissingRequiredConfigError("domain", env_var_name="AUTH0_DOMAIN")

        assert str(error) == "Required configuration missing: 'domain' (set it explicitly or via AUTH0_DOMAIN)"
        assert error.setting_name == "domain"
        assert error.env_var_name == "AUTH0_DOMAIN"

    def test_env_var_name_optional(self):
        error = MissingRequiredConfigError("client_id")

        assert error.env_var_name is None
        assert str(error) == "Required configuration missing: 'client_id'"

    def test_custom_message(self):
        error = MissingRequiredConfigError("domain", message="no domain")
        assert str(error) == "no domain"


class TestConfigFileError:
    def test_is_config_error(self):
        with pytest.raises(ConfigError):
            raise ConfigFileError("File not found")

    def test_path_attribute(self):
        error = ConfigFileError("File not found", path="/run/secrets/auth0")

        assert error.path == "/run/secrets/auth0"
        assert str(error) == "File not found"
