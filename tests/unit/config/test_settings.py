"""Tests for the provider block schema and ProviderConfig."""

import dataclasses

import pytest

from auth0_provider.config.settings import PROVIDER_SETTINGS, ProviderConfig, parse_bool


class TestProviderSettings:
    def test_setting_names_and_env_vars(self):
        assert [(s.name, s.env_var) for s in PROVIDER_SETTINGS] == [
            ("domain", "AUTH0_DOMAIN"),
            ("client_id", "AUTH0_CLIENT_ID"),
            ("client_secret", "AUTH0_CLIENT_SECRET"),
            ("debug", "AUTH0_DEBUG"),
        ]

    def test_required_settings(self):
        assert [s.name for s in PROVIDER_SETTINGS if s.required] == ["domain", "client_id", "client_secret"]

    def test_only_client_secret_is_sensitive(self):
        assert [s.name for s in PROVIDER_SETTINGS if s.sensitive] == ["client_secret"]

    def test_debug_is_bool(self):
        debug = next(s for s in PROVIDER_SETTINGS if s.name == "debug")
        assert debug.kind is bool


class TestParseBool:
    @pytest.mark.parametrize("value", ["1", "true", "on", True])
    def test_true(self, value):
        assert parse_bool(value) is True

    @pytest.mark.parametrize("value", ["TRUE", "True", "yes", "On", "0", "false", "off", "", None, False])
    def test_false(self, value):
        assert parse_bool(value) is False


class TestProviderConfig:
    def test_is_frozen(self, provider_config):
        with pytest.raises(dataclasses.FrozenInstanceError):
            provider_config.domain = "other.auth0.com"

    def test_debug_defaults_to_false(self, provider_config):
        assert provider_config.debug is False

    def test_secret_not_in_repr(self, provider_config):
        assert "client-secret-456" not in repr(provider_config)

    def test_missing_fields(self):
        config = ProviderConfig(domain="", client_id="abc", client_secret="")
        assert config.missing_fields() == ["domain", "client_secret"]

    def test_no_missing_fields(self, provider_config):
        assert provider_config.missing_fields() == []
