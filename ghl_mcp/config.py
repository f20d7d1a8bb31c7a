"""
Configuration

Process-wide settings read once at startup from the environment
(optionally populated from a .env file by the entrypoint).
"""

import os
from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_BASE_URL = "https://services.leadconnectorhq.com"
API_VERSION = "2021-07-28"
DEFAULT_TIMEOUT = 30.0

# Keep-alive interval for text/event-stream connections, in seconds.
DEFAULT_HEARTBEAT_INTERVAL = 10.0
MIN_HEARTBEAT_INTERVAL = 3.0
MAX_HEARTBEAT_INTERVAL = 10.0


@dataclass(frozen=True)
class ApiClientConfig:
    """Immutable connection settings shared by every tool module."""
    access_token: str
    location_id: str
    base_url: str = DEFAULT_BASE_URL
    api_version: str = API_VERSION
    timeout: float = DEFAULT_TIMEOUT

    def validate(self) -> None:
        """Raise ConfigurationError unless every required field is present."""
        if not (self.access_token or "").strip():
            raise ConfigurationError("GHL_API_KEY environment variable is required")
        if not (self.location_id or "").strip():
            raise ConfigurationError("GHL_LOCATION_ID environment variable is required")
        if not (self.base_url or "").startswith(("http://", "https://")):
            raise ConfigurationError(f"GHL_BASE_URL must be an http(s) URL, got: {self.base_url!r}")


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got: {raw!r}")


def load_config() -> ApiClientConfig:
    """Build the client configuration from environment variables."""
    config = ApiClientConfig(
        access_token=os.getenv("GHL_API_KEY", ""),
        location_id=os.getenv("GHL_LOCATION_ID", ""),
        base_url=os.getenv("GHL_BASE_URL", DEFAULT_BASE_URL).rstrip("/"),
        timeout=_float_env("GHL_TIMEOUT", DEFAULT_TIMEOUT),
    )
    config.validate()
    return config


def heartbeat_interval() -> float:
    """Configured keep-alive interval, clamped to the supported range."""
    interval = _float_env("HEARTBEAT_INTERVAL", DEFAULT_HEARTBEAT_INTERVAL)
    return min(max(interval, MIN_HEARTBEAT_INTERVAL), MAX_HEARTBEAT_INTERVAL)
