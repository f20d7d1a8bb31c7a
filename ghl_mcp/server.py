"""
HTTP Transport

FastAPI app exposing the protocol as JSON-RPC over HTTP plus a
keep-alive event stream:
- POST /rpc, POST /mcp   JSON-RPC 2.0 (initialize, describe, invoke, tools/*)
- GET  /sse, GET  /mcp   text/event-stream heartbeat
- GET  /, /health, /tools

Run with:  uvicorn ghl_mcp.server:app --host 0.0.0.0 --port 8000
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, Dict, Literal, Optional, Union

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel, ValidationError

from .config import heartbeat_interval
from .errors import InternalError, InvalidRequest, ProtocolError
from .heartbeat import Heartbeat
from .protocol import SERVER_NAME, SERVER_VERSION, ProtocolServer
from .startup import start_services

logger = logging.getLogger(__name__)


class RpcRequest(BaseModel):
    """JSON-RPC 2.0 request envelope."""

    jsonrpc: Literal["2.0"] = "2.0"
    id: Optional[Union[int, str]] = None
    method: str
    params: Optional[Dict[str, Any]] = None


def _rpc_result(request_id: Any, result: Any) -> JSONResponse:
    return JSONResponse({"jsonrpc": "2.0", "id": request_id, "result": result})


def _rpc_error(request_id: Any, error: ProtocolError) -> JSONResponse:
    return JSONResponse({"jsonrpc": "2.0", "id": request_id, "error": error.to_dict()})


def create_app(
    protocol: Optional[ProtocolServer] = None,
    interval: Optional[float] = None,
) -> FastAPI:
    """
    Build the HTTP app. When `protocol` is given the startup sequence is
    skipped (used by tests and embedding); otherwise it runs in lifespan.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        client = None
        if protocol is None:
            # standalone `uvicorn ghl_mcp.server:app` skips the CLI's .env loading
            load_dotenv()
            if interval is None:
                app.state.heartbeat_interval = heartbeat_interval()
            client, app.state.protocol = await start_services()
        else:
            app.state.protocol = protocol
        logger.info(f"MCP HTTP server ready with {len(app.state.protocol.registry)} tools")

        yield

        if client is not None:
            await client.aclose()
        logger.info("MCP HTTP server shutting down")

    app = FastAPI(
        title="GoHighLevel MCP Server",
        description="Model Context Protocol server for the GoHighLevel API",
        version=SERVER_VERSION,
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.state.heartbeat_interval = interval if interval is not None else heartbeat_interval()

    # ============== API Endpoints ==============

    @app.get("/")
    async def root(request: Request):
        return {
            "service": SERVER_NAME,
            "version": SERVER_VERSION,
            "tools_count": len(request.app.state.protocol.registry),
            "endpoints": {
                "rpc": ["/rpc", "/mcp"],
                "events": ["/sse", "/mcp"],
                "list_tools": "/tools",
                "health": "/health",
            },
        }

    @app.get("/health")
    async def health(request: Request):
        protocol: ProtocolServer = request.app.state.protocol
        return {
            "status": "healthy",
            "state": protocol.state.value,
            "tools_loaded": len(protocol.registry),
        }

    @app.get("/tools")
    async def list_tools(request: Request):
        protocol: ProtocolServer = request.app.state.protocol
        try:
            tools = await protocol.list_tools()
        except ProtocolError as e:
            return JSONResponse({"error": e.to_dict()}, status_code=500)
        return {
            "total": len(tools),
            "tools": [{**tool.to_dict(), "category": tool.category} for tool in tools],
        }

    @app.post("/rpc")
    @app.post("/mcp")
    async def rpc(request: Request):
        try:
            body = await request.json()
        except ValueError:
            return _rpc_error(None, InvalidRequest("Request body must be valid JSON"))

        try:
            message = RpcRequest.model_validate(body)
        except ValidationError as e:
            return _rpc_error(None, InvalidRequest(f"Invalid JSON-RPC request: {e.error_count()} error(s)"))

        protocol: ProtocolServer = request.app.state.protocol
        try:
            result = await protocol.handle(message.method, message.params)
        except ProtocolError as e:
            logger.warning(f"{message.method} failed: [{e.code}] {e.message}")
            return _rpc_error(message.id, e)
        except Exception as e:
            logger.exception(f"Unexpected error handling {message.method}")
            return _rpc_error(message.id, InternalError(str(e)))
        return _rpc_result(message.id, result)

    @app.get("/sse")
    @app.get("/mcp")
    async def events(request: Request):
        heartbeat = Heartbeat(interval=request.app.state.heartbeat_interval)
        return StreamingResponse(
            heartbeat.events(),
            media_type="text/event-stream",
            headers={"Cache-Control": "no-cache", "Connection": "keep-alive"},
        )

    return app


app = create_app()
