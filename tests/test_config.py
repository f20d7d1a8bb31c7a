"""
Unit tests for environment configuration.
"""

import pytest

from ghl_mcp.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    heartbeat_interval,
    load_config,
)
from ghl_mcp.errors import ConfigurationError


@pytest.fixture
def env(monkeypatch):
    for name in ("GHL_API_KEY", "GHL_LOCATION_ID", "GHL_BASE_URL", "GHL_TIMEOUT", "HEARTBEAT_INTERVAL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("GHL_API_KEY", "pit-token")
    monkeypatch.setenv("GHL_LOCATION_ID", "loc-1")
    return monkeypatch


class TestLoadConfig:

    def test_defaults(self, env):
        config = load_config()

        assert config.access_token == "pit-token"
        assert config.location_id == "loc-1"
        assert config.base_url == DEFAULT_BASE_URL
        assert config.timeout == DEFAULT_TIMEOUT

    def test_overrides(self, env):
        env.setenv("GHL_BASE_URL", "https://sandbox.example.test/")
        env.setenv("GHL_TIMEOUT", "5")

        config = load_config()

        assert config.base_url == "https://sandbox.example.test"
        assert config.timeout == 5.0

    @pytest.mark.parametrize("name", ["GHL_API_KEY", "GHL_LOCATION_ID"])
    def test_required(self, env, name):
        env.delenv(name)
        with pytest.raises(ConfigurationError) as exc:
            load_config()
        assert name in exc.value.message

    def test_bad_timeout(self, env):
        env.setenv("GHL_TIMEOUT", "soon")
        with pytest.raises(ConfigurationError):
            load_config()

    def test_config_is_immutable(self, env):
        config = load_config()
        with pytest.raises(AttributeError):
            config.access_token = "other"


class TestHeartbeatInterval:

    @pytest.mark.parametrize("raw, expected", [
        (None, 10.0),
        ("5", 5.0),
        ("1", 3.0),
        ("60", 10.0),
    ])
    def test_clamped(self, env, raw, expected):
        if raw is not None:
            env.setenv("HEARTBEAT_INTERVAL", raw)
        assert heartbeat_interval() == expected
