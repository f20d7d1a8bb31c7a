"""
Shared fixtures: a stub API client and the real tool catalog built on it.
"""

from unittest.mock import AsyncMock, MagicMock

import pytest

from ghl_mcp.protocol import ProtocolServer
from ghl_mcp.registry import build_registry

DEFAULT_LOCATION = "loc-default"


@pytest.fixture
def stub_client():
    """Stands in for GHLApiClient; `request` records every outbound call."""
    client = MagicMock()
    client.location_id.side_effect = lambda override=None: override or DEFAULT_LOCATION
    client.request = AsyncMock(return_value={"data": {}})
    return client


@pytest.fixture
def registry(stub_client):
    return build_registry(stub_client)


@pytest.fixture
def protocol(registry):
    return ProtocolServer(registry)
