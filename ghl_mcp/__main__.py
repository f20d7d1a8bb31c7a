#!/usr/bin/env python3
"""
GoHighLevel MCP Server - Main Entrypoint

Usage:
  python -m ghl_mcp                      # stdio transport (Claude Desktop)
  python -m ghl_mcp --transport http     # HTTP JSON-RPC + event stream
"""

import argparse
import asyncio
import contextlib
import logging
import os
import signal
import sys
from typing import List, Optional

import uvicorn
from dotenv import load_dotenv

from .errors import ConfigurationError, ConnectivityError
from .server import create_app
from .startup import start_services
from .stdio_server import run_stdio

logger = logging.getLogger("ghl-mcp")


def configure_logging() -> None:
    # stdout is the stdio protocol stream; logs go to stderr.
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def install_signal_handlers() -> None:
    """Exit immediately with status 0 on SIGINT/SIGTERM; in-flight calls are dropped."""

    def shutdown(signum, frame):
        logger.info(f"Received {signal.Signals(signum).name}, shutting down...")
        logging.shutdown()
        os._exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)


async def serve_stdio() -> None:
    client, protocol = await start_services()
    try:
        await run_stdio(protocol)
    finally:
        await client.aclose()


class HttpServer(uvicorn.Server):
    """uvicorn server that follows the process-wide SIGINT/SIGTERM contract."""

    @contextlib.contextmanager
    def capture_signals(self):
        install_signal_handlers()
        yield


async def serve_http(host: str, port: int) -> None:
    client, protocol = await start_services()
    config = uvicorn.Config(
        create_app(protocol),
        host=host,
        port=port,
        log_config=None,
        timeout_graceful_shutdown=0,
    )
    try:
        await HttpServer(config).serve()
    finally:
        await client.aclose()


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="ghl-mcp-server", description="GoHighLevel MCP Server")
    parser.add_argument("--transport", choices=["stdio", "http"], default=os.getenv("MCP_TRANSPORT", "stdio"))
    parser.add_argument("--host", default=os.getenv("HOST", "0.0.0.0"))
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "8000")))
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = parse_args(argv)
    configure_logging()
    logger.info(f"Starting GoHighLevel MCP Server ({args.transport})...")

    try:
        if args.transport == "stdio":
            install_signal_handlers()
            asyncio.run(serve_stdio())
        else:
            asyncio.run(serve_http(args.host, args.port))
    except (ConfigurationError, ConnectivityError) as e:
        logger.error(f"Failed to start GHL MCP Server: {e}")
        return 1
    except Exception:
        logger.exception("Fatal error")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
