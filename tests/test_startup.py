"""
Tests for the startup sequence and the command-line entrypoint.
"""

import signal
import socket
import subprocess
import sys
import textwrap
import time
from unittest.mock import AsyncMock, patch

import httpx
import pytest
import requests
from mcp.shared.exceptions import McpError
from mcp.shared.memory import create_connected_server_and_client_session

from ghl_mcp.__main__ import main, parse_args
from ghl_mcp.client import GHLApiClient
from ghl_mcp.config import ApiClientConfig
from ghl_mcp.errors import ConfigurationError, ConnectivityError, ToolNotFound, UpstreamApiError
from ghl_mcp.protocol import ServerState
from ghl_mcp.startup import start_services
from ghl_mcp.stdio_server import _to_mcp_error, build_server

CONFIG = ApiClientConfig(access_token="test-token", location_id="loc-1", base_url="https://api.example.test")


def transport_for(status, body):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request)
        return httpx.Response(status, json=body)

    return httpx.MockTransport(handler), calls


class TestStartServices:

    @pytest.mark.asyncio
    async def test_successful_startup(self):
        transport, calls = transport_for(200, {"location": {"id": "loc-1"}})

        client, protocol = await start_services(CONFIG, transport=transport)

        assert [r.url.path for r in calls] == ["/locations/loc-1"]
        assert protocol.state == ServerState.UNINITIALIZED
        assert len(protocol.registry) == sum(protocol.registry.category_counts().values())
        assert "create_contact" in protocol.registry
        await client.aclose()

    @pytest.mark.asyncio
    async def test_failed_self_test_aborts(self):
        transport, _ = transport_for(401, {"message": "Invalid JWT"})

        with patch.object(GHLApiClient, "aclose", new_callable=AsyncMock) as mock_close:
            with pytest.raises(ConnectivityError) as exc:
                await start_services(CONFIG, transport=transport)

        assert "Failed to connect to GHL API" in exc.value.message
        assert "401" in exc.value.message
        mock_close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_missing_token_aborts_before_network(self):
        transport, calls = transport_for(200, {})

        with pytest.raises(ConfigurationError):
            await start_services(
                ApiClientConfig(access_token="", location_id="loc-1"),
                transport=transport,
            )

        assert calls == []


class TestEntrypoint:

    def test_parse_args_defaults(self, monkeypatch):
        for name in ("MCP_TRANSPORT", "HOST", "PORT"):
            monkeypatch.delenv(name, raising=False)

        args = parse_args([])

        assert args.transport == "stdio"
        assert args.host == "0.0.0.0"
        assert args.port == 8000

    def test_parse_args_http(self):
        args = parse_args(["--transport", "http", "--port", "9000"])
        assert args.transport == "http"
        assert args.port == 9000

    @patch("ghl_mcp.__main__.load_dotenv")
    def test_missing_configuration_exits_1(self, mock_dotenv, monkeypatch):
        monkeypatch.delenv("GHL_API_KEY", raising=False)
        monkeypatch.setenv("GHL_LOCATION_ID", "loc-1")

        assert main(["--transport", "http"]) == 1
        mock_dotenv.assert_called_once()


class TestStdioServer:

    def test_protocol_errors_keep_their_code(self):
        error = _to_mcp_error(ToolNotFound("Unknown tool: nope"))

        assert error.error.code == -32602
        assert error.error.message == "Unknown tool: nope"

    def test_server_name(self, protocol):
        assert build_server(protocol).name == "ghl-mcp-server"

    @pytest.mark.asyncio
    async def test_lists_every_tool(self, protocol, registry):
        async with create_connected_server_and_client_session(build_server(protocol)) as session:
            listed = await session.list_tools()

        assert len(listed.tools) == len(registry)
        assert listed.tools[0].name == "create_contact"

    @pytest.mark.asyncio
    async def test_call_returns_tool_content(self, protocol, stub_client):
        stub_client.request.return_value = {"data": {"contact": {"_id": "123"}}}

        async with create_connected_server_and_client_session(build_server(protocol)) as session:
            result = await session.call_tool("create_contact", {"firstName": "Ann"})

        assert result.isError is False
        assert "123" in result.content[0].text

    @pytest.mark.asyncio
    @pytest.mark.parametrize("name, arguments, code", [
        ("does_not_exist", {}, -32602),
        ("create_contact", {}, -32600),
    ])
    async def test_protocol_errors_reach_client_with_code(self, protocol, stub_client, name, arguments, code):
        async with create_connected_server_and_client_session(build_server(protocol)) as session:
            with pytest.raises(McpError) as exc:
                await session.call_tool(name, arguments)

        assert exc.value.error.code == code
        stub_client.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_connectivity_failure_is_internal_error(self, protocol, stub_client):
        stub_client.request.side_effect = ConnectivityError("connection refused")

        async with create_connected_server_and_client_session(build_server(protocol)) as session:
            with pytest.raises(McpError) as exc:
                await session.call_tool("get_pipelines", {})

        assert exc.value.error.code == -32603

    @pytest.mark.asyncio
    async def test_upstream_failure_is_error_result(self, protocol, stub_client):
        stub_client.request.side_effect = UpstreamApiError(400, "bad pipeline")

        async with create_connected_server_and_client_session(build_server(protocol)) as session:
            result = await session.call_tool("get_pipelines", {})

        assert result.isError is True
        assert "GHL API Error (400): bad pipeline" in result.content[0].text


HTTP_ENTRYPOINT = textwrap.dedent("""
    import sys
    from unittest.mock import AsyncMock, MagicMock

    import ghl_mcp.__main__ as entry
    from ghl_mcp.protocol import ProtocolServer
    from ghl_mcp.registry import ToolRegistry

    client = MagicMock()
    client.aclose = AsyncMock()
    entry.start_services = AsyncMock(return_value=(client, ProtocolServer(ToolRegistry())))
    sys.exit(entry.main(["--transport", "http", "--host", "127.0.0.1", "--port", sys.argv[1]]))
""")


def free_port() -> int:
    with socket.socket() as sock:
        sock.bind(("127.0.0.1", 0))
        return sock.getsockname()[1]


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX signals")
class TestShutdown:

    @pytest.mark.parametrize("signum", [signal.SIGTERM, signal.SIGINT])
    def test_http_exits_zero_on_signal(self, tmp_path, signum):
        script = tmp_path / "serve_http.py"
        script.write_text(HTTP_ENTRYPOINT)
        port = free_port()
        process = subprocess.Popen(
            [sys.executable, str(script), str(port)],
            cwd=tmp_path,
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
        )
        try:
            deadline = time.monotonic() + 20
            while True:
                try:
                    if requests.get(f"http://127.0.0.1:{port}/health", timeout=1).status_code == 200:
                        break
                except requests.RequestException:
                    pass
                assert process.poll() is None, "server exited before becoming ready"
                assert time.monotonic() < deadline, "server did not become ready"
                time.sleep(0.2)

            process.send_signal(signum)
            assert process.wait(timeout=10) == 0
        finally:
            if process.poll() is None:
                process.kill()
                process.wait()
