"""
Startup sequence shared by both transports.

config -> API client -> connectivity self-test -> registry -> protocol.
Any failure here is fatal: the server never runs partially configured.
"""

import logging
from typing import Optional, Tuple

import httpx

from .client import GHLApiClient
from .config import ApiClientConfig, load_config
from .errors import ApiClientError, ConnectivityError
from .protocol import ProtocolServer
from .registry import ToolRegistry, build_registry

logger = logging.getLogger(__name__)


async def verify_connection(client: GHLApiClient) -> None:
    """Run the one-time connectivity self-test."""
    logger.info("Testing GHL API connection...")
    try:
        result = await client.test_connection()
    except ApiClientError as e:
        logger.error(f"GHL API connection failed: {e}")
        raise ConnectivityError(f"Failed to connect to GHL API: {e}") from e
    logger.info(f"GHL API connection successful, location: {result['data']['locationId']}")


def log_tool_summary(registry: ToolRegistry) -> None:
    logger.info(f"Registered {len(registry)} tools total:")
    for category, count in registry.category_counts().items():
        logger.info(f"  - {count} {category} tools")


async def start_services(
    config: Optional[ApiClientConfig] = None,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> Tuple[GHLApiClient, ProtocolServer]:
    config = config or load_config()

    logger.info("Initializing GHL API client...")
    logger.info(f"Base URL: {config.base_url}")
    logger.info(f"Version: {config.api_version}")
    logger.info(f"Location ID: {config.location_id}")
    client = GHLApiClient(config, transport=transport)

    try:
        await verify_connection(client)
        registry = build_registry(client)
    except Exception:
        await client.aclose()
        raise

    log_tool_summary(registry)
    return client, ProtocolServer(registry)
