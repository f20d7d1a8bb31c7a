"""
Unit tests for ProtocolServer: handshake, listing, calls and error mapping.
"""

import asyncio
import json
from unittest.mock import patch

import pytest

from ghl_mcp.errors import (
    ConnectivityError,
    InternalError,
    InvalidRequest,
    MethodNotFound,
    ToolNotFound,
    UpstreamApiError,
)
from ghl_mcp.protocol import PROTOCOL_VERSION, SERVER_NAME, ServerState

from conftest import DEFAULT_LOCATION


class TestHandshake:

    def test_initialize_is_idempotent(self, protocol):
        first = protocol.initialize()
        second = protocol.initialize({"name": "test-client"})

        assert first == second
        assert first["serverInfo"]["name"] == SERVER_NAME
        assert first["protocolVersion"] == PROTOCOL_VERSION
        assert "tools" in first["capabilities"]

    def test_initialize_returns_fresh_copy(self, protocol):
        first = protocol.initialize()
        first["serverInfo"]["name"] = "tampered"
        assert protocol.initialize()["serverInfo"]["name"] == SERVER_NAME

    @pytest.mark.asyncio
    async def test_state_transitions(self, protocol):
        assert protocol.state == ServerState.UNINITIALIZED

        # calls before initialize are served, not rejected
        await protocol.list_tools()
        assert protocol.state == ServerState.UNINITIALIZED

        protocol.initialize()
        assert protocol.state == ServerState.READY

        await protocol.list_tools()
        assert protocol.state == ServerState.SERVING

        protocol.initialize()
        assert protocol.state == ServerState.SERVING


class TestListTools:

    @pytest.mark.asyncio
    async def test_lists_every_registered_tool(self, protocol, registry):
        tools = await protocol.list_tools()
        assert len(tools) == len(registry)
        assert [t.name for t in tools] == [t.name for t in await protocol.list_tools()]

    @pytest.mark.asyncio
    async def test_module_failure_becomes_internal_error(self, protocol, registry):
        module = registry.modules[3]
        with patch.object(module, "definitions", side_effect=RuntimeError("broken module")):
            with pytest.raises(InternalError) as exc:
                await protocol.list_tools()

        assert exc.value.code == -32603
        assert "broken module" in exc.value.message


class TestCallTool:

    @pytest.mark.asyncio
    async def test_create_contact(self, protocol, stub_client):
        stub_client.request.return_value = {"data": {"contact": {"_id": "123", "firstName": "Ann"}}}

        result = await protocol.call_tool("create_contact", {"firstName": "Ann"})

        assert not result.is_error
        assert "123" in result.text
        stub_client.request.assert_awaited_once_with(
            "POST", "/contacts/",
            params=None, json={"firstName": "Ann", "locationId": DEFAULT_LOCATION},
        )

    @pytest.mark.asyncio
    async def test_missing_required_argument(self, protocol, stub_client):
        with pytest.raises(InvalidRequest) as exc:
            await protocol.call_tool("create_contact", {})

        assert exc.value.code == -32600
        assert "firstName" in exc.value.message
        stub_client.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_wrong_argument_type(self, protocol, stub_client):
        with pytest.raises(InvalidRequest):
            await protocol.call_tool("create_contact", {"firstName": 42})
        stub_client.request.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_tool(self, protocol):
        with pytest.raises(ToolNotFound) as exc:
            await protocol.call_tool("does_not_exist", {})

        assert exc.value.code == -32602
        assert "does_not_exist" in exc.value.message

    @pytest.mark.asyncio
    async def test_non_mapping_arguments(self, protocol):
        with pytest.raises(InvalidRequest):
            await protocol.call_tool("get_contact", ["c1"])

    @pytest.mark.asyncio
    async def test_missing_tool_name(self, protocol):
        with pytest.raises(InvalidRequest):
            await protocol.call_tool(None, {})

    @pytest.mark.asyncio
    async def test_upstream_error_is_a_readable_result(self, protocol, stub_client):
        stub_client.request.side_effect = UpstreamApiError(404, "Contact not found")

        result = await protocol.call_tool("get_contact", {"contactId": "missing"})

        assert result.is_error
        assert result.text == "Error: GHL API Error (404): Contact not found"

    @pytest.mark.asyncio
    async def test_connectivity_error_is_internal(self, protocol, stub_client):
        stub_client.request.side_effect = ConnectivityError("connection refused")

        with pytest.raises(InternalError) as exc:
            await protocol.call_tool("get_contact", {"contactId": "c1"})

        assert "connection refused" in exc.value.message

    @pytest.mark.asyncio
    async def test_unexpected_error_is_internal(self, protocol, stub_client):
        stub_client.request.side_effect = KeyError("surprise")

        with pytest.raises(InternalError):
            await protocol.call_tool("get_contact", {"contactId": "c1"})

    @pytest.mark.asyncio
    async def test_concurrent_calls_are_isolated(self, protocol, stub_client):
        async def respond(method, path, params=None, json=None):
            product_id = path.rsplit("/", 1)[-1]
            # let B finish before A
            await asyncio.sleep(0.02 if product_id == "A" else 0)
            return {"data": {"_id": product_id, "locationId": params["locationId"]}}

        stub_client.request.side_effect = respond

        result_a, result_b = await asyncio.gather(
            protocol.call_tool("get_product", {"productId": "A"}),
            protocol.call_tool("get_product", {"productId": "B", "locationId": "loc-b"}),
        )

        assert json.loads(result_a.text) == {"_id": "A", "locationId": DEFAULT_LOCATION}
        assert json.loads(result_b.text) == {"_id": "B", "locationId": "loc-b"}


class TestHandle:

    @pytest.mark.asyncio
    async def test_initialize(self, protocol):
        result = await protocol.handle("initialize", {"clientInfo": {"name": "x"}})
        assert result["serverInfo"]["name"] == SERVER_NAME

    @pytest.mark.asyncio
    @pytest.mark.parametrize("method", ["describe", "tools/list"])
    async def test_describe(self, protocol, registry, method):
        result = await protocol.handle(method)
        assert len(result["tools"]) == len(registry)
        assert set(result["tools"][0]) == {"name", "description", "inputSchema"}

    @pytest.mark.asyncio
    async def test_invoke(self, protocol, stub_client):
        stub_client.request.return_value = {"data": {"pipelines": []}}

        result = await protocol.handle("invoke", {"tool_name": "get_pipelines", "parameters": {}})

        assert result["isError"] is False
        assert result["content"][0]["type"] == "text"
        assert json.loads(result["content"][0]["text"]) == {"pipelines": []}

    @pytest.mark.asyncio
    async def test_tools_call(self, protocol):
        result = await protocol.handle("tools/call", {"name": "get_pipelines"})
        assert result["isError"] is False

    @pytest.mark.asyncio
    async def test_invoke_without_tool_name(self, protocol):
        with pytest.raises(InvalidRequest):
            await protocol.handle("invoke", {"parameters": {}})

    @pytest.mark.asyncio
    async def test_ping(self, protocol):
        assert await protocol.handle("ping") == {}

    @pytest.mark.asyncio
    async def test_unknown_method(self, protocol):
        with pytest.raises(MethodNotFound) as exc:
            await protocol.handle("tools/destroy", {})

        assert exc.value.code == -32601
        assert "tools/destroy" in exc.value.message
